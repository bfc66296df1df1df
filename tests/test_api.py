"""Tests for the graphprep HTTP API."""

import pytest
from fastapi.testclient import TestClient

from graphprep.api import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_preprocess(client, sample_graph_dict):
    response = client.post("/api/preprocess", json=sample_graph_dict)
    data = response.json()

    assert response.status_code == 200
    assert data["success"] is True
    assert data["start_node"] == "D"
    assert data["start_node_explicit"] is True
    assert data["extra_nodes"] == [{"id": "E", "label": "Epsilon"}]
    assert data["render_edges"] == [
        {"source": "A", "target": "B"},
        {"source": "C", "target": "D"},
    ]


def test_adjacency(client):
    body = {
        "nodes": [{"id": "A"}, {"id": "B"}],
        "edges": [{"from": "A", "to": "B"}],
        "directed": True,
    }
    data = client.post("/api/adjacency", json=body).json()

    assert data == {"success": True, "directed": True, "adjacency": {"A": ["B"]}}


def test_components(client, sample_graph_dict):
    data = client.post("/api/components", json=sample_graph_dict).json()
    assert data["components"] == [["C", "D"], ["A", "B"]]


def test_dedupe(client, sample_graph_dict):
    data = client.post("/api/dedupe", json=sample_graph_dict).json()
    assert [(e["source"], e["target"]) for e in data["edges"]] == [("A", "B"), ("C", "D")]


def test_validate(client, sample_graph_dict):
    data = client.post("/api/validate", json=sample_graph_dict).json()

    assert data["success"] is True
    assert data["summary"]["info"] == 2
    assert [i["type"] for i in data["issues"]] == ["info", "info"]


def test_malformed_body_rejected(client):
    response = client.post("/api/preprocess", json={"nodes": [{"label": "no id"}]})
    assert response.status_code == 422


def test_components_follow_resolved_start_node(client, unrooted_graph_dict):
    """Without startNode the resolved start node's component leads, as in preprocess."""
    components = client.post("/api/components", json=unrooted_graph_dict).json()["components"]
    preprocessed = client.post("/api/preprocess", json=unrooted_graph_dict).json()

    assert preprocessed["start_node"] == "B"
    assert components == [["B", "A"], ["C", "D"]]
    assert components == [[n["id"] for n in c] for c in preprocessed["components"]]

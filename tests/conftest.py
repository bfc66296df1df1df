"""Shared fixtures for graphprep tests."""

import pytest

from graphprep.models import Edge, GraphInput, Node


@pytest.fixture
def make_nodes():
    """Build Node objects from ids."""
    def _make(*ids):
        return [Node(id=node_id) for node_id in ids]
    return _make


@pytest.fixture
def make_edges():
    """Build Edge objects from 'A-B' strings."""
    def _make(*pairs):
        edges = []
        for pair in pairs:
            source, target = pair.split("-")
            edges.append(Edge(source=source, target=target))
        return edges
    return _make


@pytest.fixture
def sample_graph_dict():
    """A small undirected graph in front-end format."""
    return {
        "nodes": [
            {"id": "A", "label": "Alpha"},
            {"id": "B", "label": "Beta"},
            {"id": "C", "label": "Gamma"},
            {"id": "D", "label": "Delta"},
            {"id": "E", "label": "Epsilon"},
        ],
        "links": [
            {"source": "A", "target": "B"},
            {"source": "B", "target": "A"},
            {"source": "C", "target": "D"},
        ],
        "directed": False,
        "startNode": "D",
    }


@pytest.fixture
def sample_graph(sample_graph_dict):
    return GraphInput.from_json_dict(sample_graph_dict)


@pytest.fixture
def unrooted_graph_dict():
    """Directed graph whose resolved start node sits in the second component."""
    return {
        "nodes": [{"id": "A"}, {"id": "B"}, {"id": "C"}, {"id": "D"}],
        "links": [{"source": "C", "target": "D"}, {"source": "B", "target": "A"}],
        "directed": True,
    }

#!/usr/bin/env python3
"""
graphprep MCP Server

Provides MCP tools for AI agents to preprocess graphs before layout.
Every tool takes the graph as a JSON string (nodes, edges or links,
directed, optional startNode) and returns a JSON string.
"""

import json
import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP
from pydantic import ValidationError

from .adjacency import build_adjacency
from .config import settings
from .edges import remove_repeated_edges
from .models import GraphInput
from .preprocess import ordered_components, pick_start_node, preprocess_graph
from .validation import validate_graph, validation_summary

logger = logging.getLogger(__name__)

# Create MCP server
mcp = FastMCP("graphprep")


def _dump(data: dict) -> str:
    return json.dumps(data, indent=settings.json_indent)


def _parse_graph(graph_json: str) -> GraphInput:
    """Parse a graph JSON string, raising ValueError on bad input."""
    try:
        data = json.loads(graph_json)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("Graph document must be a JSON object")
    try:
        return GraphInput.from_json_dict(data)
    except ValidationError as e:
        raise ValueError(f"Invalid graph: {e}") from e


def _run(graph_json: str, handler) -> str:
    try:
        graph = _parse_graph(graph_json)
    except ValueError as e:
        logger.warning("Rejected graph input: %s", e)
        return _dump({"success": False, "error": str(e)})
    return _dump({"success": True, **handler(graph)})


# ============================================================================
# PREPROCESSING TOOLS
# ============================================================================

@mcp.tool()
def graph_preprocess(graph_json: str) -> str:
    """
    Run the full preprocessing pipeline on a graph.

    Args:
        graph_json: Graph as JSON, e.g. {"nodes": [{"id": "A"}], "links": [], "directed": true}

    Returns adjacency map, start node, ordered components, extra
    (unconnected) nodes and the edge list to render.
    """
    return _run(graph_json, lambda g: preprocess_graph(g).to_dict())


@mcp.tool()
def graph_start_node(graph_json: str) -> str:
    """
    Get the start node used for hierarchical layouts.

    Uses the graph's startNode when set, otherwise picks the smallest id with
    outgoing but no incoming edges.
    """
    def handler(graph):
        adjacency = build_adjacency(graph.edges, graph.directed)
        start_node, explicit = pick_start_node(graph, adjacency)
        return {"start_node": start_node, "explicit": explicit}

    return _run(graph_json, handler)


@mcp.tool()
def graph_components(graph_json: str, start_node: Optional[str] = None) -> str:
    """
    List the connected components of a graph as lists of node ids.

    Args:
        graph_json: Graph as JSON
        start_node: Node whose component is listed first (defaults to the graph's
            startNode, then to the resolved start node)
    """
    def handler(graph):
        if start_node:
            graph = graph.model_copy(update={"start_node": start_node})
        found = ordered_components(graph)
        return {"components": [[n.id for n in component] for component in found]}

    return _run(graph_json, handler)


@mcp.tool()
def graph_dedupe_edges(graph_json: str) -> str:
    """
    Remove mirrored edges (B->A after A->B) for undirected rendering.
    """
    return _run(graph_json, lambda g: {
        "edges": [e.to_json_dict() for e in remove_repeated_edges(g.edges)]
    })


@mcp.tool()
def graph_validate(graph_json: str) -> str:
    """
    Check a graph for dangling references, self-loops and duplicate edges.

    Returns the list of issues and a summary by severity.
    """
    def handler(graph):
        issues = validate_graph(graph)
        return {
            "issues": [issue.to_dict() for issue in issues],
            "summary": validation_summary(issues)
        }

    return _run(graph_json, handler)


# ============================================================================
# MAIN
# ============================================================================

def main():
    mcp.run()


if __name__ == "__main__":
    main()

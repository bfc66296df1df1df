"""
graphprep - Preprocessing of graph snapshots for layout algorithms.

Derives the structures layout code consumes: adjacency map, start node,
ordered connected components, extra nodes and deduplicated render edges.
Shared by the CLI, the HTTP API and the MCP tools.
"""

from .models import (
    Node,
    Edge,
    GraphInput,
)

from .adjacency import AdjacencyMap, build_adjacency
from .start_node import resolve_start_node
from .components import (
    Component,
    edge_node_ids,
    find_disconnected_components,
    find_extra_nodes,
    is_start_node_in_component,
)
from .edges import remove_repeated_edges
from .preprocess import LayoutInput, ordered_components, preprocess_graph
from .validation import validate_graph, validation_summary, ValidationIssue, IssueSeverity

__all__ = [
    # Models
    "Node",
    "Edge",
    "GraphInput",
    # Adjacency
    "AdjacencyMap",
    "build_adjacency",
    # Start node
    "resolve_start_node",
    # Components
    "Component",
    "edge_node_ids",
    "find_disconnected_components",
    "find_extra_nodes",
    "is_start_node_in_component",
    # Edges
    "remove_repeated_edges",
    # Pipeline
    "LayoutInput",
    "preprocess_graph",
    "ordered_components",
    # Validation
    "validate_graph",
    "validation_summary",
    "ValidationIssue",
    "IssueSeverity",
]

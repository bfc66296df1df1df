"""
Graph preprocessing - derive everything a layout algorithm consumes.

Runs the full pipeline over one graph snapshot:
adjacency -> start node -> components -> extra nodes -> render edges.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .adjacency import AdjacencyMap, build_adjacency
from .components import Component, find_disconnected_components, find_extra_nodes
from .edges import remove_repeated_edges
from .models import Edge, GraphInput, Node
from .start_node import resolve_start_node

logger = logging.getLogger(__name__)


@dataclass
class LayoutInput:
    """Derived structures for one graph snapshot."""
    directed: bool
    adjacency: AdjacencyMap
    start_node: Optional[str]
    start_node_explicit: bool
    components: list[Component] = field(default_factory=list)
    extra_nodes: list[Node] = field(default_factory=list)
    render_edges: list[Edge] = field(default_factory=list)

    @property
    def component_count(self) -> int:
        return len(self.components)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "directed": self.directed,
            "adjacency": self.adjacency,
            "start_node": self.start_node,
            "start_node_explicit": self.start_node_explicit,
            "components": [
                [n.model_dump(exclude_none=True) for n in component]
                for component in self.components
            ],
            "extra_nodes": [n.model_dump(exclude_none=True) for n in self.extra_nodes],
            "render_edges": [e.to_json_dict() for e in self.render_edges],
        }


def pick_start_node(graph: GraphInput, adjacency: AdjacencyMap) -> tuple[Optional[str], bool]:
    """
    Return the start node and whether the caller supplied it.

    An empty explicit start node counts as absent.
    """
    if graph.start_node:
        return graph.start_node, True
    return resolve_start_node(graph.nodes, adjacency), False


def ordered_components(graph: GraphInput) -> list[Component]:
    """Components led by the explicit or resolved start node's component."""
    adjacency = build_adjacency(graph.edges, graph.directed)
    start_node, _ = pick_start_node(graph, adjacency)
    return find_disconnected_components(graph.nodes, graph.edges, start_node)


def preprocess_graph(graph: GraphInput) -> LayoutInput:
    """
    Derive adjacency, start node, components, extra nodes and render edges.

    Args:
        graph: The graph snapshot to preprocess

    Returns:
        LayoutInput with all derived structures
    """
    adjacency = build_adjacency(graph.edges, graph.directed)
    start_node, explicit = pick_start_node(graph, adjacency)

    components = find_disconnected_components(graph.nodes, graph.edges, start_node)
    extra_nodes = find_extra_nodes(graph.nodes, graph.edges, graph.custom_nodes)

    if graph.directed:
        render_edges = list(graph.edges)
    else:
        render_edges = remove_repeated_edges(graph.edges)

    result = LayoutInput(
        directed=graph.directed,
        adjacency=adjacency,
        start_node=start_node,
        start_node_explicit=explicit,
        components=components,
        extra_nodes=extra_nodes,
        render_edges=render_edges,
    )

    logger.info(
        "Preprocessed graph: %d nodes, %d edges, %d components, %d extra nodes, start=%r",
        len(graph.nodes), len(graph.edges), result.component_count, len(extra_nodes), start_node
    )
    return result

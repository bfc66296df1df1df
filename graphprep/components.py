"""
Connected component decomposition.

Components are always computed on the undirected closure of the edges,
whatever the declared directedness of the graph: layout only cares whether
nodes are connected. Nodes without incident edges belong to no component
and are reported separately as extra nodes.
"""

import logging
from typing import Iterable, Optional, Sequence, TYPE_CHECKING

from .adjacency import build_adjacency
from .models import Node

if TYPE_CHECKING:
    from .adjacency import AdjacencyMap
    from .models import Edge

logger = logging.getLogger(__name__)

Component = list[Node]


def edge_node_ids(edges: Iterable["Edge"]) -> list[str]:
    """Ids touched by at least one edge, in first-occurrence order."""
    seen: dict[str, None] = {}
    for edge in edges:
        seen[edge.source] = None
        seen[edge.target] = None
    return list(seen)


def _collect_component(
    root: str,
    adjacency: "AdjacencyMap",
    visited: set[str]
) -> list[str]:
    """
    Collect ids reachable from `root` in depth-first preorder.

    Uses an explicit stack so long chains cannot exhaust the call stack.
    Children are pushed in reverse so they are visited in adjacency order.
    """
    collected: list[str] = []
    stack = [root]

    while stack:
        current = stack.pop()
        if current in visited:
            continue

        visited.add(current)
        collected.append(current)

        for neighbor in reversed(adjacency.get(current, [])):
            if neighbor not in visited:
                stack.append(neighbor)

    return collected


def find_disconnected_components(
    nodes: Sequence[Node],
    edges: Sequence["Edge"],
    start_node: Optional[str] = None
) -> list[Component]:
    """
    Partition edge-connected nodes into components.

    Components are listed in discovery order over the edge list, except that
    the component containing `start_node` always comes first. Dangling edge
    endpoints take part in connectivity but are left out of the node lists;
    a component made only of dangling ids is dropped.

    Args:
        nodes: Nodes of the graph
        edges: Edges of the graph (direction is ignored)
        start_node: Id whose component should lead the list

    Returns:
        List of components, each a list of Node objects
    """
    id_to_node = {n.id: n for n in nodes}
    adjacency = build_adjacency(edges, directed=False)

    visited: set[str] = set()
    components: list[Component] = []
    start_index: Optional[int] = None

    for node_id in edge_node_ids(edges):
        if node_id in visited:
            continue

        collected = _collect_component(node_id, adjacency, visited)
        component = [id_to_node[c] for c in collected if c in id_to_node]
        if not component:
            continue

        if start_node and start_node in collected:
            start_index = len(components)
        components.append(component)

    if start_index is not None and start_index > 0:
        components.insert(0, components.pop(start_index))

    logger.debug("Found %d components (start component index %s)",
                 len(components), start_index)
    return components


def find_extra_nodes(
    nodes: Sequence[Node],
    edges: Iterable["Edge"],
    custom_nodes: Iterable[str] = ()
) -> list[Node]:
    """
    Find nodes that no component covers.

    These are nodes with no incident edge, in node-list order, followed by
    custom node ids that are not part of the node list (labelled by their id).

    Args:
        nodes: Nodes of the graph
        edges: Edges of the graph
        custom_nodes: Extra node ids supplied by the caller

    Returns:
        List of extra Node objects
    """
    connected = set(edge_node_ids(edges))
    extras = [n for n in nodes if n.id not in connected]

    seen = {n.id for n in nodes}
    for node_id in custom_nodes:
        if node_id not in seen:
            seen.add(node_id)
            extras.append(Node(id=node_id, label=node_id))

    return extras


def is_start_node_in_component(start_node: str, component: Sequence[Node]) -> bool:
    """Check whether a component holds the node with id `start_node`."""
    return any(node.id == start_node for node in component)

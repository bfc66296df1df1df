"""
Start node resolution for hierarchical layouts.

Used when the caller does not name a start node. The choice only depends on
which ids qualify at each step, never on input order:

1. Nodes with outdegree > 0 and indegree 0 (smallest id wins)
2. If no node has any outgoing edge, the smallest id of all nodes
3. Otherwise the smallest id among nodes with outdegree > 0
"""

import logging
from typing import Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Node
    from .adjacency import AdjacencyMap

logger = logging.getLogger(__name__)


def resolve_start_node(nodes: Sequence["Node"], adjacency: "AdjacencyMap") -> Optional[str]:
    """
    Pick a deterministic start node.

    Adjacency entries for ids missing from `nodes` are ignored as sources.

    Args:
        nodes: Nodes of the graph
        adjacency: Adjacency map built with the graph's directedness

    Returns:
        The chosen node id, or None when `nodes` is empty
    """
    if not nodes:
        return None

    node_ids = {n.id for n in nodes}
    with_outdegree: set[str] = set()
    with_indegree: set[str] = set()

    for src, children in adjacency.items():
        if src in node_ids and children:
            with_outdegree.add(src)
            with_indegree.update(children)

    candidates = with_outdegree - with_indegree
    if candidates:
        start = min(candidates)
    elif not with_outdegree:
        start = min(node_ids)
    else:
        start = min(with_outdegree)

    logger.debug("Resolved start node %r (%d candidates)", start, len(candidates))
    return start

"""
Adjacency map construction.

Converts a flat edge list into a mapping of node id -> neighbor ids that
layout algorithms use for neighbor traversal.
"""

import logging
from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Edge

logger = logging.getLogger(__name__)

AdjacencyMap = dict[str, list[str]]


def build_adjacency(edges: Iterable["Edge"], directed: bool) -> AdjacencyMap:
    """
    Build an adjacency map from an edge list.

    For directed graphs only `source -> target` is recorded. For undirected
    graphs both directions are recorded. Neighbors are deduplicated per node
    and kept in first-insertion order. Endpoints are not checked against any
    node set.

    Args:
        edges: Edges to convert
        directed: Whether edges are one-way

    Returns:
        Dictionary mapping node id to its ordered list of neighbor ids
    """
    # dict keys double as an insertion-ordered set
    neighbors: dict[str, dict[str, None]] = {}

    for edge in edges:
        neighbors.setdefault(edge.source, {})[edge.target] = None
        if not directed:
            neighbors.setdefault(edge.target, {})[edge.source] = None

    adjacency = {node_id: list(targets) for node_id, targets in neighbors.items()}
    logger.debug("Built %s adjacency map with %d keys",
                 "directed" if directed else "undirected", len(adjacency))
    return adjacency

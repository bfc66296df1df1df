"""Edge list cleanup for undirected rendering."""

import logging
from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Edge

logger = logging.getLogger(__name__)


def remove_repeated_edges(edges: Iterable["Edge"]) -> list["Edge"]:
    """
    Drop edges that mirror an earlier edge (B->A after A->B).

    Only back-edges are removed: an exact same-direction repeat of an earlier
    edge is kept. A repeated self-loop is its own mirror and is dropped.

    Args:
        edges: Edges in rendering order

    Returns:
        New list with mirrored duplicates removed, order preserved
    """
    seen: set[tuple[str, str]] = set()
    result: list["Edge"] = []

    for edge in edges:
        if (edge.target, edge.source) in seen:
            continue
        seen.add(edge.key())
        result.append(edge)

    logger.debug("Kept %d edges after removing mirrored duplicates", len(result))
    return result

"""
Graph validation - Report structural oddities in a graph snapshot.

Preprocessing tolerates everything reported here; validation only tells the
caller what the derived structures will silently work around.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .components import edge_node_ids

if TYPE_CHECKING:
    from .models import GraphInput


class IssueSeverity(str, Enum):
    """Severity levels for validation issues."""
    WARNING = "warning"  # Tolerated, but probably not what the caller meant
    INFO = "info"        # Informational, may be intentional


@dataclass
class ValidationIssue:
    """A single validation issue found in a graph."""
    severity: IssueSeverity
    message: str
    node_id: str | None = None
    edge_index: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = {
            "type": self.severity.value,
            "message": self.message
        }
        if self.node_id is not None:
            result["node_id"] = self.node_id
        if self.edge_index is not None:
            result["edge_index"] = self.edge_index
        return result


def validate_graph(graph: "GraphInput") -> list[ValidationIssue]:
    """
    Validate a graph and return a list of issues.

    Checks for:
    - Empty graph - INFO
    - Duplicate node ids - WARNING
    - Isolated nodes (no incident edge) - INFO
    - Dangling edge endpoints (id not in node list) - WARNING
    - Self-referencing edges - INFO
    - Duplicate edges (same source->target) - WARNING
    - Mirrored edges in an undirected graph - INFO
    - Explicit start node missing from the node list - WARNING

    Args:
        graph: The graph to validate

    Returns:
        List of ValidationIssue objects
    """
    issues: list[ValidationIssue] = []

    nodes = graph.nodes
    edges = graph.edges

    if not nodes:
        issues.append(ValidationIssue(
            severity=IssueSeverity.INFO,
            message="Graph has no nodes"
        ))

    # Duplicate node ids
    node_ids: set[str] = set()
    for node_id in graph.node_ids():
        if node_id in node_ids:
            issues.append(ValidationIssue(
                severity=IssueSeverity.WARNING,
                message=f"Duplicate node id: {node_id} (last occurrence wins)",
                node_id=node_id
            ))
        node_ids.add(node_id)

    # Isolated nodes
    connected = set(edge_node_ids(edges))
    isolated = [n for n in nodes if n.id not in connected]
    if isolated and edges:
        labels = [f"{n.label} ({n.id})" for n in isolated]
        issues.append(ValidationIssue(
            severity=IssueSeverity.INFO,
            message=f"Isolated nodes (no connections): {', '.join(labels)}"
        ))

    seen_pairs: set[tuple[str, str]] = set()
    for index, edge in enumerate(edges):
        # Dangling endpoints
        for endpoint in dict.fromkeys((edge.source, edge.target)):
            if endpoint not in node_ids:
                issues.append(ValidationIssue(
                    severity=IssueSeverity.WARNING,
                    message=f"Edge references unknown node: {endpoint}",
                    node_id=endpoint,
                    edge_index=index
                ))

        if edge.source == edge.target:
            issues.append(ValidationIssue(
                severity=IssueSeverity.INFO,
                message="Self-referencing edge (node points to itself)",
                node_id=edge.source,
                edge_index=index
            ))

        pair = edge.key()
        if pair in seen_pairs:
            issues.append(ValidationIssue(
                severity=IssueSeverity.WARNING,
                message=f"Duplicate edge from {edge.source} to {edge.target}",
                edge_index=index
            ))
        elif not graph.directed and edge.source != edge.target and (edge.target, edge.source) in seen_pairs:
            issues.append(ValidationIssue(
                severity=IssueSeverity.INFO,
                message=f"Mirrored edge {edge.source}-{edge.target} is drawn once",
                edge_index=index
            ))
        seen_pairs.add(pair)

    if graph.start_node and graph.start_node not in node_ids:
        issues.append(ValidationIssue(
            severity=IssueSeverity.WARNING,
            message=f"Start node not in node list: {graph.start_node}",
            node_id=graph.start_node
        ))

    return issues


def validation_summary(issues: list[ValidationIssue]) -> dict:
    """
    Create a summary of validation issues.

    Args:
        issues: List of validation issues

    Returns:
        Dictionary with counts by severity
    """
    return {
        "total": len(issues),
        "warnings": len([i for i in issues if i.severity == IssueSeverity.WARNING]),
        "info": len([i for i in issues if i.severity == IssueSeverity.INFO]),
        "clean": len([i for i in issues if i.severity == IssueSeverity.WARNING]) == 0
    }

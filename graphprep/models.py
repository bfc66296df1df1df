"""
Core data models for graph preprocessing.

These models define the canonical input schema:
- Nodes identified by `id`, with a display label and optional coordinates
- Edges connecting nodes (using source/target naming convention)
- A graph input bundling nodes, edges, directedness and an optional start node

Field Naming Convention:
- Edges use `source` and `target` (industry standard from D3, Cytoscape, etc.)
- For backward compatibility, `from`/`to` are accepted on input and converted
- Graph input accepts `links`, `startNode` and `customNodes` as produced by
  D3-style front ends
"""

from typing import Optional, Any
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Node(BaseModel):
    """A node in the graph. Identity is by `id`; everything else is payload."""
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str
    label: str = ""
    x: Optional[float] = None
    y: Optional[float] = None

    @model_validator(mode='before')
    @classmethod
    def default_label(cls, data: Any) -> Any:
        """Use the id as label when no label is given."""
        if isinstance(data, dict) and not data.get('label') and 'id' in data:
            data = {**data, 'label': str(data['id'])}
        return data


class Edge(BaseModel):
    """
    An edge connecting two node ids.

    Uses `source` and `target` as canonical field names.
    Accepts `from`/`to` on input for backward compatibility.
    Endpoints are not required to exist in the node set.
    """
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    source: str
    target: str
    label: str = ""

    @model_validator(mode='before')
    @classmethod
    def convert_legacy_fields(cls, data: Any) -> Any:
        """Convert legacy 'from'/'to' fields to 'source'/'target'."""
        if isinstance(data, dict):
            data = dict(data)
            # Handle 'from' -> 'source' (from is a Python keyword)
            if 'from' in data and 'source' not in data:
                data['source'] = data.pop('from')
            if 'from_node' in data and 'source' not in data:
                data['source'] = data.pop('from_node')
            # Handle 'to' -> 'target'
            if 'to' in data and 'target' not in data:
                data['target'] = data.pop('to')
            if 'to_node' in data and 'target' not in data:
                data['target'] = data.pop('to_node')
        return data

    def key(self) -> tuple[str, str]:
        """Forward (source, target) key."""
        return (self.source, self.target)

    def to_json_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        result = {
            "source": self.source,
            "target": self.target,
        }
        # Only include label if it's set
        if self.label:
            result["label"] = self.label
        return result


class GraphInput(BaseModel):
    """
    One snapshot of a graph handed over by the input layer.

    This is what the CLI, HTTP API and MCP tools parse incoming JSON into.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)
    directed: bool = False
    start_node: Optional[str] = None
    custom_nodes: list[str] = Field(default_factory=list)

    @model_validator(mode='before')
    @classmethod
    def convert_frontend_fields(cls, data: Any) -> Any:
        """Convert D3-style 'links'/'startNode'/'customNodes' keys."""
        if isinstance(data, dict):
            data = dict(data)
            if 'links' in data and 'edges' not in data:
                data['edges'] = data.pop('links')
            if 'startNode' in data and 'start_node' not in data:
                data['start_node'] = data.pop('startNode')
            if 'customNodes' in data and 'custom_nodes' not in data:
                data['custom_nodes'] = data.pop('customNodes')
        return data

    @classmethod
    def from_json_dict(cls, data: dict) -> "GraphInput":
        """Create a GraphInput from a JSON dict (handles front-end key names)."""
        return cls.model_validate(data)

    def node_ids(self) -> list[str]:
        """Node ids in node-list order."""
        return [n.id for n in self.nodes]

# src/depviz/model/graph_model.py

"""
Graph data model.

Plain containers for the graphs handed to the analysis core:
  - GraphNode (tagged: "dependency" or "generic")
  - GraphLink (endpoints as raw ids or embedded node references)
  - Declaration
  - GraphData

The model carries no behaviour beyond safe property access and endpoint
normalization; all analysis lives in the analytics/ and interaction/
packages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Union

NodeKind = Literal["dependency", "generic"]

# Link types produced by the dependency graph creator.
DEPENDENCY_LINK_TYPES = ("import", "export", "re-export")


@dataclass
class Declaration:
    """A named declaration inside a source file."""

    name: str
    type: str = "variable"
    is_exported: bool = False
    is_default: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class GraphNode:
    """
    A graph vertex.

    `kind` records which input dialect the node came from. Dependency nodes
    always have a meaningful `path`; generic nodes use the mapped identifying
    property for both `id` and `path`. Any unrecognized keys of the source
    object are kept in `attrs`.
    """

    id: str
    path: str
    kind: NodeKind = "dependency"
    declarations: List[Declaration] = field(default_factory=list)
    imports: List[Any] = field(default_factory=list)
    exports: List[Any] = field(default_factory=list)
    attrs: Dict[str, Any] = field(default_factory=dict)

    def get(self, prop: str, default: Any = None) -> Any:
        """Look up a first-class field or an extra attribute by name."""
        if prop == "id":
            return self.id
        if prop == "path":
            return self.path
        if prop == "declarations":
            return self.declarations
        if prop == "imports":
            return self.imports
        if prop == "exports":
            return self.exports
        return self.attrs.get(prop, default)

    @property
    def name(self) -> Optional[str]:
        return self.attrs.get("name") or self.attrs.get("label")


Endpoint = Union[str, int, GraphNode, Dict[str, Any]]


@dataclass
class GraphLink:
    """A directed graph edge; treated as undirected by structural analysis."""

    source: Endpoint
    target: Endpoint
    type: str = "unknown"
    imports: List[Any] = field(default_factory=list)
    attrs: Dict[str, Any] = field(default_factory=dict)

    @property
    def source_id(self) -> str:
        return endpoint_id(self.source)

    @property
    def target_id(self) -> str:
        return endpoint_id(self.target)

    @property
    def link_id(self) -> str:
        return make_link_id(self.source_id, self.target_id)

    def get(self, prop: str, default: Any = None) -> Any:
        if prop == "source":
            return self.source_id
        if prop == "target":
            return self.target_id
        if prop == "type":
            return self.type
        if prop == "imports":
            return self.imports
        return self.attrs.get(prop, default)


@dataclass
class GraphData:
    nodes: List[GraphNode] = field(default_factory=list)
    links: List[GraphLink] = field(default_factory=list)
    name: Optional[str] = None
    description: Optional[str] = None

    def node_by_id(self, node_id: str) -> Optional[GraphNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None


def endpoint_id(ref: Endpoint) -> str:
    """
    Normalize a link endpoint to a node id.

    Accepts a raw id, an embedded GraphNode or an embedded mapping
    (id, then path, then the string form of the mapping).
    """
    if isinstance(ref, str):
        return ref
    if isinstance(ref, GraphNode):
        return ref.id
    if isinstance(ref, dict):
        return str(ref.get("id") or ref.get("path") or ref)
    return str(ref)


def make_link_id(source_id: str, target_id: str) -> str:
    # Ambiguous when ids contain "-": "a-b" + "c" collides with "a" + "b-c".
    return f"{source_id}-{target_id}"


def last_segment(path: str) -> str:
    """Final "/"-separated segment of a path, or the path itself."""
    return path.split("/")[-1] or path

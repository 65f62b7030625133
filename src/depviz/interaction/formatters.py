# src/depviz/interaction/formatters.py

"""Display helpers for node and link detail panels."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from ..model.graph_model import DEPENDENCY_LINK_TYPES, GraphLink, GraphNode


@dataclass
class FormattedNode:
    path_file: str
    path_parent: str
    # declaration type -> comma-joined exported names
    declarations: Dict[str, str] = field(default_factory=dict)


@dataclass
class FormattedLink:
    from_: str
    to: str


def format_path_segment(path: str) -> str:
    """Render a path as "file (parent/dirs)"; single segments are unchanged."""
    segments = path.split("/")
    if len(segments) > 1:
        return f"{segments[-1]} ({'/'.join(segments[:-1])})"
    return path


def format_node_for_display(node: GraphNode) -> FormattedNode:
    segments = node.id.split("/")
    if len(segments) > 1:
        path_file = segments[-1]
        path_parent = "/".join(segments[:-1])
    else:
        path_file = node.id
        path_parent = ""

    declarations: Dict[str, str] = {}
    if node.kind == "dependency":
        for decl in node.declarations:
            if not decl.is_exported:
                continue
            existing = declarations.get(decl.type)
            declarations[decl.type] = f"{existing}, {decl.name}" if existing else decl.name

    return FormattedNode(path_file=path_file, path_parent=path_parent, declarations=declarations)


def format_link_for_display(link: GraphLink) -> FormattedLink:
    """
    Dependency links point from importer to exporter; they are shown the
    other way round (exporter -> importer). Other links are shown as-is.
    """
    source_id = link.source_id
    target_id = link.target_id

    if link.type in DEPENDENCY_LINK_TYPES:
        return FormattedLink(from_=format_path_segment(target_id), to=format_path_segment(source_id))
    return FormattedLink(from_=format_path_segment(source_id), to=format_path_segment(target_id))

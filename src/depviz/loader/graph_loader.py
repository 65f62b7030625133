# src/depviz/loader/graph_loader.py

"""
Graph loading utilities.

This module loads graph JSON in either of two dialects:
1. Dependency dialect: nodes with "path", "imports", "exports" and
   "declarations"; links with "source", "target", "imports" and "type".
2. Generic dialect: arbitrary node objects plus "links" or "edges", turned
   into dependency-shaped data through a PropertyMapping (auto-detected
   when not supplied).

Everything past this module works on GraphData only.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..model.graph_model import Declaration, GraphData, GraphLink, GraphNode

NODE_ID_CANDIDATES = ("id", "ID", "nodeId", "node_id", "name", "label")
LINK_SOURCE_CANDIDATES = ("source", "from", "src", "sourceId", "source_id")
LINK_TARGET_CANDIDATES = ("target", "to", "dest", "targetId", "target_id")

_DEPENDENCY_NODE_KEYS = ("id", "path", "imports", "exports", "declarations")
_LINK_KEYS = ("source", "target", "type", "imports")
_DECLARATION_KEYS = ("name", "type", "isExported", "isDefault")


class GraphFormatError(ValueError):
    """The input is not JSON, or matches neither graph dialect."""


@dataclass(frozen=True)
class PropertyMapping:
    """Which generic-dialect properties identify nodes and link endpoints."""

    node_id: str
    link_source: str
    link_target: str
    link_collection: str = "links"


# ---------------------------------------------------------------------------
# Dialect detection
# ---------------------------------------------------------------------------


def is_dependency_node(raw: Any) -> bool:
    return (
        isinstance(raw, dict)
        and isinstance(raw.get("path"), str)
        and isinstance(raw.get("imports"), list)
        and isinstance(raw.get("exports"), list)
        and isinstance(raw.get("declarations"), list)
    )


def is_dependency_link(raw: Any) -> bool:
    return (
        isinstance(raw, dict)
        and isinstance(raw.get("source"), str)
        and isinstance(raw.get("target"), str)
        and isinstance(raw.get("imports"), list)
        and isinstance(raw.get("type"), str)
    )


def is_dependency_format(data: Any) -> bool:
    if not isinstance(data, dict):
        return False
    nodes = data.get("nodes")
    links = data.get("links")
    if not isinstance(nodes, list) or not isinstance(links, list):
        return False
    return all(is_dependency_node(n) for n in nodes) and all(is_dependency_link(l) for l in links)


def is_generic_format(data: Any) -> bool:
    if not isinstance(data, dict):
        return False
    nodes = data.get("nodes")
    if not isinstance(nodes, list):
        return False
    if not isinstance(data.get("links"), list) and not isinstance(data.get("edges"), list):
        return False
    return len(nodes) > 0 and isinstance(nodes[0], dict)


# ---------------------------------------------------------------------------
# Property mapping
# ---------------------------------------------------------------------------


def scalar_properties(obj: Any) -> List[str]:
    """Keys of `obj` holding a string or number (booleans excluded)."""
    if not isinstance(obj, dict):
        return []
    return [
        key for key, value in obj.items()
        if isinstance(value, (str, int, float)) and not isinstance(value, bool)
    ]


def _first_present(candidates: Sequence[str], available: List[str]) -> Optional[str]:
    for candidate in candidates:
        if candidate in available:
            return candidate
    return None


def detect_property_mapping(data: Dict[str, Any]) -> PropertyMapping:
    """
    Pick node-id and link-endpoint properties from the first node and link.

    Raises
    ------
    GraphFormatError
        When any of the three roles has no recognizable property.
    """
    collection = "links" if isinstance(data.get("links"), list) else "edges"
    nodes = data.get("nodes") or []
    links = data.get(collection) or []

    node_props = scalar_properties(nodes[0]) if nodes else []
    link_props = scalar_properties(links[0]) if links else []

    node_id = _first_present(NODE_ID_CANDIDATES, node_props)
    source = _first_present(LINK_SOURCE_CANDIDATES, link_props)
    target = _first_present(LINK_TARGET_CANDIDATES, link_props)

    missing = [
        role for role, prop in (("node id", node_id), ("link source", source), ("link target", target))
        if prop is None
    ]
    if missing:
        raise GraphFormatError(
            f"Could not detect {', '.join(missing)} propert{'y' if len(missing) == 1 else 'ies'}; "
            f"node properties: {node_props}, {collection} properties: {link_props}"
        )

    return PropertyMapping(
        node_id=node_id,
        link_source=source,
        link_target=target,
        link_collection=collection,
    )


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------


def declaration_from_dict(raw: Dict[str, Any]) -> Declaration:
    return Declaration(
        name=str(raw.get("name", "")),
        type=str(raw.get("type", "variable")),
        is_exported=bool(raw.get("isExported", False)),
        is_default=bool(raw.get("isDefault", False)),
        extra={k: v for k, v in raw.items() if k not in _DECLARATION_KEYS},
    )


def dependency_node_from_dict(raw: Dict[str, Any]) -> GraphNode:
    """Dependency-dialect node; an explicit string id wins over the path."""
    node_id = raw.get("id") if isinstance(raw.get("id"), str) and raw.get("id") else raw["path"]
    return GraphNode(
        id=node_id,
        path=raw["path"],
        kind="dependency",
        declarations=[declaration_from_dict(d) for d in raw["declarations"] if isinstance(d, dict)],
        imports=list(raw["imports"]),
        exports=list(raw["exports"]),
        attrs={k: v for k, v in raw.items() if k not in _DEPENDENCY_NODE_KEYS},
    )


def generic_node_from_dict(raw: Dict[str, Any], id_prop: str) -> GraphNode:
    """Generic-dialect node; all original keys are preserved in attrs."""
    node_id = str(raw.get(id_prop))
    return GraphNode(
        id=node_id,
        path=node_id,
        kind="generic",
        attrs=dict(raw),
    )


def link_from_dict(raw: Dict[str, Any]) -> GraphLink:
    return GraphLink(
        source=raw["source"],
        target=raw["target"],
        type=str(raw.get("type", "unknown")),
        imports=list(raw.get("imports") or []),
        attrs={k: v for k, v in raw.items() if k not in _LINK_KEYS},
    )


def generic_link_from_dict(raw: Dict[str, Any], mapping: PropertyMapping) -> GraphLink:
    imports = raw.get("imports")
    return GraphLink(
        source=str(raw.get(mapping.link_source)),
        target=str(raw.get(mapping.link_target)),
        type=str(raw["type"]) if isinstance(raw.get("type"), str) else "dependency",
        imports=list(imports) if isinstance(imports, list) else [],
        attrs=dict(raw),
    )


def parse_graph(data: Any, mapping: Optional[PropertyMapping] = None) -> GraphData:
    """
    Convert decoded JSON into GraphData.

    Parameters
    ----------
    data : Any
        Decoded JSON document.
    mapping : PropertyMapping, optional
        Generic-dialect mapping. Detected automatically when omitted; ignored
        for dependency-dialect input.

    Raises
    ------
    GraphFormatError
        When the document matches neither dialect.
    """
    name = data.get("name") if isinstance(data, dict) else None
    description = data.get("description") if isinstance(data, dict) else None

    if is_dependency_format(data):
        return GraphData(
            nodes=[dependency_node_from_dict(n) for n in data["nodes"]],
            links=[link_from_dict(l) for l in data["links"]],
            name=name,
            description=description,
        )

    if is_generic_format(data):
        mapping = mapping or detect_property_mapping(data)
        raw_links = data.get(mapping.link_collection) or []
        return GraphData(
            nodes=[generic_node_from_dict(n, mapping.node_id) for n in data["nodes"] if isinstance(n, dict)],
            links=[generic_link_from_dict(l, mapping) for l in raw_links if isinstance(l, dict)],
            name=name,
            description=description,
        )

    raise GraphFormatError(
        "Invalid graph data format. Expected either dependency graph format "
        "or generic format with nodes and links/edges."
    )


def load_graph(input_path: str | Path, mapping: Optional[PropertyMapping] = None) -> GraphData:
    """
    Unified entry point.

    Parameters
    ----------
    input_path : str | Path
        A .json file in either dialect.

    Returns
    -------
    GraphData
    """
    path = Path(input_path)
    if not path.exists():
        raise FileNotFoundError(path)
    if path.suffix.lower() != ".json":
        raise GraphFormatError(f"Please provide a JSON file, got: {path.name}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise GraphFormatError(f"Invalid JSON in {path}: {e}") from e

    return parse_graph(data, mapping)

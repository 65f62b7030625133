# src/depviz/loader/converters.py

"""
Conversion between GraphData and the minimal node/link format.

Minimal format:
    {"nodes": [{"id", "label", "type", "metadata"}],
     "links": [{"source", "target", "type", "weight", "metadata"}]}

It is the shape of the bundled sample graph and a compact export target.
"""

from __future__ import annotations

from typing import Any, Dict

from ..model.graph_model import GraphData, GraphLink, GraphNode, last_segment


def to_minimal(graph: GraphData) -> Dict[str, Any]:
    nodes = [
        {
            "id": node.id,
            "label": last_segment(node.path) if node.path else node.id,
            "type": "file",
            "metadata": {
                "path": node.path,
                "imports": len(node.imports),
                "exports": len(node.exports),
                "declarations": len(node.declarations),
            },
        }
        for node in graph.nodes
    ]
    links = [
        {
            "source": link.source_id,
            "target": link.target_id,
            "type": link.type,
            "weight": len(link.imports) or 1,
            "metadata": {"imports": list(link.imports)},
        }
        for link in graph.links
    ]
    return {"nodes": nodes, "links": links}


def from_minimal(data: Dict[str, Any]) -> GraphData:
    """
    Build GraphData from minimal-format data.

    Node paths come from metadata.path, falling back to the label; the
    label, type and metadata are kept as node attributes.
    """
    nodes = []
    for raw in data.get("nodes") or []:
        metadata = raw.get("metadata") or {}
        nodes.append(GraphNode(
            id=str(raw["id"]),
            path=str(metadata.get("path") or raw.get("label") or raw["id"]),
            kind="generic",
            attrs={k: v for k, v in raw.items() if k != "id"},
        ))

    links = []
    for raw in data.get("links") or []:
        metadata = raw.get("metadata") or {}
        links.append(GraphLink(
            source=str(raw["source"]),
            target=str(raw["target"]),
            type=raw.get("type") or "unknown",
            imports=list(metadata.get("imports") or []),
            attrs={k: v for k, v in raw.items() if k not in ("source", "target", "type")},
        ))

    return GraphData(nodes=nodes, links=links)

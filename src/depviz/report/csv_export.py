# src/depviz/report/csv_export.py

"""
CSV and JSON export utilities for graph insights.

This module writes:
  - Components (cluster id, size, density, central node)
  - Node membership (node, component, community)
  - Hub nodes (id, degree, connections)
  - The full insights snapshot as JSON

All functions create parent directories as needed.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Dict, List

from ..model.insights import ClusterInfo, GraphInsights, insights_to_dict
from ..utils.log import info


# ---------------------------------------------------------------------------
# Helper: safe writer
# ---------------------------------------------------------------------------
def _write_csv(path: Path, rows: List[Dict[str, Any]], fieldnames: List[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for r in rows:
            writer.writerow(r)
    info(f"Saved CSV → {path}")


# ---------------------------------------------------------------------------
# CLUSTERS
# ---------------------------------------------------------------------------
def export_clusters_csv(clusters: List[ClusterInfo], path: Path) -> None:
    """
    Write clusters to CSV: id, size, density, central_node
    """
    rows = [
        {
            "id": c.id,
            "size": c.size,
            "density": c.density,
            "central_node": c.central_node or "",
        }
        for c in clusters
    ]
    _write_csv(path, rows, ["id", "size", "density", "central_node"])


# ---------------------------------------------------------------------------
# MEMBERSHIP
# ---------------------------------------------------------------------------
def node_membership(clusters: List[ClusterInfo]) -> Dict[str, str]:
    """node id -> cluster id; the first cluster listing a node wins."""
    membership: Dict[str, str] = {}
    for c in clusters:
        for node_id in c.nodes:
            membership.setdefault(node_id, c.id)
    return membership


def export_membership_csv(insights: GraphInsights, path: Path) -> None:
    """
    Write one row per node: node, component, community

    Nodes outside every community get an empty community cell.
    """
    component_of = node_membership(insights.connected_components)
    community_of = node_membership(insights.communities)

    rows = [
        {
            "node": node_id,
            "component": component_id,
            "community": community_of.get(node_id, ""),
        }
        for node_id, component_id in component_of.items()
    ]
    _write_csv(path, rows, ["node", "component", "community"])


# ---------------------------------------------------------------------------
# HUBS
# ---------------------------------------------------------------------------
def export_hubs_csv(insights: GraphInsights, path: Path) -> None:
    rows = [
        {
            "id": hub.id,
            "degree": hub.degree,
            "connections": ";".join(hub.connections),
        }
        for hub in insights.hub_nodes
    ]
    _write_csv(path, rows, ["id", "degree", "connections"])


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------
def export_insights_json(insights: GraphInsights, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(insights_to_dict(insights), indent=2), encoding="utf-8")
    info(f"Saved insights JSON → {path}")

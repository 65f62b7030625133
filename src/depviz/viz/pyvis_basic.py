# src/depviz/viz/pyvis_basic.py

"""
PyVis and GraphML export.

This module provides:
  - export_pyvis_with_legend(): interactive HTML coloured by community
  - export_graphml(): GraphML file of the deduplicated graph

Visualization is skipped with an info message if pyvis is not installed.
Neither function modifies the input graph.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import networkx as nx

from ..utils.log import info, warn

try:
    from pyvis.network import Network
except Exception:  # pragma: no cover
    Network = None

COMMUNITY_PALETTE = [
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#bcbd22",
    "#17becf",
]
UNGROUPED_COLOR = "#7f7f7f"


def community_colors(G: nx.Graph) -> Dict[str, str]:
    """
    Deterministic colour per community id, in order of first appearance.
    Nodes outside communities share UNGROUPED_COLOR.
    """
    colors: Dict[str, str] = {}
    for _, data in G.nodes(data=True):
        cid = data.get("community") or ""
        if cid and cid not in colors:
            colors[cid] = COMMUNITY_PALETTE[len(colors) % len(COMMUNITY_PALETTE)]
    return colors


def export_pyvis_with_legend(G: nx.Graph, path_html: Path, title: str = "") -> None:
    """
    Create a PyVis HTML visualization with a compact community legend.

    Parameters
    ----------
    G : nx.Graph
        Output of build_nx_graph(), with a `community` attribute per node.
    path_html : Path
        Output HTML path.
    title : str
        Optional heading shown above the graph.
    """
    if Network is None:
        info("pyvis not installed; skipping interactive visualization.")
        return

    net = Network(
        height="750px",
        width="100%",
        directed=False,
        notebook=False,
        bgcolor="#111",
        font_color="#EEE",
        heading=title,
    )
    net.toggle_physics(True)

    colors = community_colors(G)

    # ---- Add nodes ----
    for n, data in G.nodes(data=True):
        community = data.get("community") or ""
        label = data.get("label", n)
        title_html = f"{data.get('path', n)}<br>degree={G.degree(n)}"
        if community:
            title_html += f"<br>community={community}"

        net.add_node(
            n,
            label=label,
            title=title_html,
            color=colors.get(community, UNGROUPED_COLOR),
            value=max(1, G.degree(n)),
        )

    # ---- Add edges ----
    for u, v, ed in G.edges(data=True):
        etype = ed.get("type", "")
        count = ed.get("count", 1)
        net.add_edge(u, v, title=f"{etype} ×{count}" if count > 1 else etype, color="#888888")

    html = net.generate_html()

    # ---- Legend HTML block ----
    legend_html = """
    <div id="legend" style="
        position: fixed;
        top: 10px;
        right: 10px;
        background: rgba(0,0,0,0.8);
        border: 2px solid #333;
        border-radius: 8px;
        padding: 15px;
        color: white;
        font-family: Arial, sans-serif;
        font-size: 12px;
        z-index: 999;
        max-width: 220px;
    ">
        <div style="font-weight: bold; margin-bottom: 10px;
                    border-bottom: 1px solid #555; padding-bottom: 5px;">
            Communities
        </div>
    """

    entries: List[tuple] = list(colors.items()) + [("ungrouped", UNGROUPED_COLOR)]
    for cid, color in entries:
        legend_html += f"""
        <div style="display: flex; align-items: center; margin-bottom: 5px;">
            <div style="
                width: 12px; height: 12px; background: {color};
                border: 1px solid #333; margin-right: 8px; border-radius: 2px;">
            </div>
            <span>{cid.replace("-", " ")}</span>
        </div>
        """

    legend_html += "</div>"

    html = html.replace("</body>", f"{legend_html}\n</body>")

    path_html.parent.mkdir(parents=True, exist_ok=True)
    path_html.write_text(html, encoding="utf-8")
    info(f"PyVis HTML saved → {path_html}")


def export_graphml(G: nx.Graph, path: Path) -> None:
    """Write GraphML, dropping list/dict/None attributes GraphML cannot hold."""
    G_graphml = G.copy()
    for n, attrs in list(G_graphml.nodes(data=True)):
        bad_keys = [k for k, v in attrs.items() if isinstance(v, (list, dict)) or v is None]
        for k in bad_keys:
            del G_graphml.nodes[n][k]
    for u, v, attrs in list(G_graphml.edges(data=True)):
        bad_keys = [k for k, val in attrs.items() if isinstance(val, (list, dict)) or val is None]
        for k in bad_keys:
            del G_graphml.edges[u, v][k]

    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        nx.write_graphml(G_graphml, path)
    except TypeError as e:
        warn(f"GraphML export skipped due to unsupported types: {e}")
        return
    info(f"Saved GraphML → {path}")

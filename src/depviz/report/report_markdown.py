# src/depviz/report/report_markdown.py

"""
Markdown report generation for graph insights.

The report lists:
  - Graph size stats and link-type counts
  - Connectivity summary (components, largest component, isolates)
  - Communities with density and central node
  - Hub nodes (top-k)
  - Summary findings

The output is a Markdown-formatted string.
"""

from __future__ import annotations

from typing import List, Optional

from ..analytics.metrics import insights_summary
from ..build.graph_builder import BuildStats
from ..model.insights import ClusterInfo, GraphInsights


def _cluster_rows(clusters: List[ClusterInfo], top_k: int) -> str:
    md = "| Id | Size | Density | Central node |\n"
    md += "|----|------|---------|--------------|\n"
    for c in clusters[:top_k]:
        md += f"| {c.id} | {c.size} | {c.density:.3f} | {c.central_node or '-'} |\n"
    if len(clusters) > top_k:
        md += f"\n_{len(clusters) - top_k} more not shown._\n"
    return md


def render_report(
    insights: GraphInsights,
    stats: Optional[BuildStats] = None,
    title: str = "Dependency Graph Analysis",
    top_k: int = 10,
) -> str:
    """
    Produce a Markdown report.

    Parameters
    ----------
    insights : GraphInsights
        Output of analyze_graph_structure()
    stats : BuildStats, optional
        Output of build_nx_graph(); adds deduplicated edge and link-type counts
    title : str
        Report title
    top_k : int
        How many rows to list per table

    Returns
    -------
    md : str
        Markdown-formatted report
    """
    md = f"# {title}\n\n"

    # ---------------------------------------------------------------------
    # Graph statistics
    # ---------------------------------------------------------------------
    md += "## Graph Statistics\n"
    md += f"- **Nodes**: {insights.total_nodes}\n"
    md += f"- **Links**: {insights.total_links}\n"
    if stats is not None:
        md += f"- **Distinct connected pairs**: {stats.n_edges}\n"
        if stats.link_types:
            md += "- **Link Types**:\n"
            for t, c in stats.link_types.most_common():
                md += f"  - {t}: {c}\n"
    md += f"- **Average degree**: {insights.average_degree:.2f}\n"
    md += f"- **Density**: {insights.density:.3f}\n"
    md += "\n"

    # ---------------------------------------------------------------------
    # Connectivity
    # ---------------------------------------------------------------------
    md += "## Connectivity\n"
    md += f"- Connected components: **{len(insights.connected_components)}**\n"
    if insights.largest_component is not None:
        md += f"- Largest component nodes: **{insights.largest_component.size}**\n"
    md += f"- Isolated nodes: {len(insights.isolated_nodes)}\n"

    if insights.isolated_nodes:
        preview_iso = ", ".join(insights.isolated_nodes[:10])
        md += f"  - Examples: {preview_iso}\n"

    md += "\n"
    if insights.connected_components:
        md += _cluster_rows(insights.connected_components, top_k) + "\n"

    # ---------------------------------------------------------------------
    # Communities
    # ---------------------------------------------------------------------
    md += "## Communities\n"
    if insights.communities:
        md += _cluster_rows(insights.communities, top_k)
    else:
        md += "_No communities detected (largest component too small)._\n"
    md += "\n"

    # ---------------------------------------------------------------------
    # Hubs
    # ---------------------------------------------------------------------
    md += "## Hub Nodes\n"
    if insights.hub_nodes:
        for hub in insights.hub_nodes[:top_k]:
            md += f"- {hub.id}: {hub.degree} connections\n"
    else:
        md += "_No connected nodes._\n"
    md += "\n"

    # ---------------------------------------------------------------------
    # Summary
    # ---------------------------------------------------------------------
    md += "## Summary\n"
    for line in insights_summary(insights):
        md += f"- {line}\n"
    md += "\n"

    return md

# src/depviz/analytics/metrics.py

"""
Whole-graph metrics and the GraphInsights aggregate.

analyze_graph_structure() is the single entry point used by the CLI and
reports: it builds the nx.Graph once and runs connectivity, community,
hub and isolation analysis over it.
"""

from __future__ import annotations

from typing import List

from ..build.graph_builder import build_nx_graph
from ..model.graph_model import GraphData, last_segment
from ..model.insights import GraphInsights, MostConnectedNode
from ..utils.config_loader import DEFAULT_CONFIG, AnalysisConfig
from ..utils.numbers import round_half_up
from .centrality import find_hub_nodes, find_isolated_nodes
from .communities import find_communities
from .connectivity import find_connected_components


def average_degree(node_count: int, link_count: int) -> float:
    """2 * links / nodes, rounded to 2 decimals; 0 without links or nodes."""
    if link_count <= 0 or node_count <= 0:
        return 0.0
    return round_half_up(link_count * 2 / node_count, 2)


def graph_density(node_count: int, link_count: int) -> float:
    """
    Raw links over the number of possible undirected pairs, rounded to 3
    decimals.

    Parallel links and import/export pairs between the same two files are
    all counted, so the value can exceed 1 for multigraphs.
    """
    max_links = node_count * (node_count - 1) / 2
    if max_links <= 0:
        return 0.0
    return round_half_up(link_count / max_links, 3)


def analyze_graph_structure(
    graph: GraphData,
    config: AnalysisConfig = DEFAULT_CONFIG,
) -> GraphInsights:
    """
    Compute the full structural report for a graph snapshot.

    Never raises for structurally valid input: an empty graph yields zero
    metrics, empty lists and None for the optional fields.
    """
    if graph is None or not graph.nodes:
        return GraphInsights()

    G, _ = build_nx_graph(graph)

    components = find_connected_components(G)
    communities = find_communities(graph, G, components=components, config=config)
    isolated = find_isolated_nodes(G)
    hubs = find_hub_nodes(G, config=config)

    total_nodes = len(graph.nodes)
    total_links = len(graph.links)

    largest = components[0] if components else None
    most_connected = MostConnectedNode(id=hubs[0].id, degree=hubs[0].degree) if hubs else None

    return GraphInsights(
        total_nodes=total_nodes,
        total_links=total_links,
        connected_components=components,
        communities=communities,
        isolated_nodes=isolated,
        hub_nodes=hubs,
        average_degree=average_degree(total_nodes, total_links),
        density=graph_density(total_nodes, total_links),
        largest_component=largest,
        most_connected_node=most_connected,
    )


def insights_summary(insights: GraphInsights) -> List[str]:
    """Human-readable one-line findings for a GraphInsights snapshot."""
    if insights.total_nodes == 0:
        return ["No graph data available"]

    summary: List[str] = [
        f"📊 {insights.total_nodes} nodes, {insights.total_links} connections",
    ]

    if len(insights.connected_components) > 1:
        summary.append(f"🔗 {len(insights.connected_components)} separate components")
        if insights.largest_component is not None:
            share = int(round_half_up(insights.largest_component.size / insights.total_nodes * 100, 0))
            summary.append(
                f"📈 Largest component: {insights.largest_component.size} nodes ({share}%)"
            )
    else:
        summary.append("🔗 All nodes are connected")

    if insights.isolated_nodes:
        summary.append(f"🏝️ {len(insights.isolated_nodes)} isolated nodes")

    if insights.communities:
        summary.append(f"👥 {len(insights.communities)} communities detected")
        avg_size = sum(c.size for c in insights.communities) / len(insights.communities)
        summary.append(f"📏 Average community size: {int(round_half_up(avg_size, 0))} nodes")

    if insights.most_connected_node is not None:
        node = insights.most_connected_node
        summary.append(
            f"⭐ Most connected: {last_segment(node.id)} ({node.degree} connections)"
        )

    percent = int(round_half_up(insights.density * 100, 0))
    if insights.density > 0.7:
        summary.append(f"🎯 Highly connected graph ({percent}% density)")
    elif insights.density < 0.1:
        summary.append(f"🕸️ Sparse graph ({percent}% density)")
    else:
        summary.append(f"⚖️ Moderately connected ({percent}% density)")

    return summary

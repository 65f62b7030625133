# src/depviz/build/graph_builder.py

"""
NetworkX graph construction for export and visualization.

This module is responsible ONLY for:
  - building a NetworkX graph from GraphData
  - assigning node labels, kinds and community membership
  - recording link types on edges
  - returning basic build statistics

It deliberately does NOT perform any analysis. The same graph feeds the
analytics package and the exporters: node order follows GraphData.nodes and
G.adj[n] lists neighbors in link order, which the component traversal and
community detection rely on.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import networkx as nx

from ..model.graph_model import GraphData, last_segment


@dataclass
class BuildStats:
    n_nodes: int
    n_edges: int
    n_links: int
    link_types: Counter


def build_nx_graph(
    graph: GraphData,
    node2comm: Optional[Dict[str, str]] = None,
) -> Tuple[nx.Graph, BuildStats]:
    """
    Build an undirected NetworkX graph from GraphData.

    Parallel links between the same pair collapse into one edge; the edge
    keeps the first link's type and a `count` of contributing links.
    Links with an endpoint that is not a graph node are skipped, so they
    never count towards structure.
    """
    G = nx.Graph()

    for node in graph.nodes:
        label = node.name or last_segment(node.path or node.id)
        G.add_node(
            node.id,
            label=label,
            path=node.path,
            kind=node.kind,
            community=(node2comm or {}).get(node.id, ""),
        )

    link_types: Counter = Counter()
    for link in graph.links:
        link_types[link.type] += 1
        u = link.source_id
        v = link.target_id
        if u not in G or v not in G:
            continue

        if G.has_edge(u, v):
            G[u][v]["count"] += 1
        else:
            G.add_edge(u, v, type=link.type, count=1)

    stats = BuildStats(
        n_nodes=G.number_of_nodes(),
        n_edges=G.number_of_edges(),
        n_links=len(graph.links),
        link_types=link_types,
    )
    return G, stats

# src/depviz/analytics/connectivity.py

"""
Connectivity analysis utilities.

This module provides tools for:
  - identifying connected components (stack-based traversal)
  - building ClusterInfo records with internal density and central node

Component membership order is the pop order of an explicit stack, which
nx.connected_components does not preserve, so the traversal itself stays
here; everything else reads the nx.Graph from build_nx_graph().

Purely analytical: no visualization, no CLI, no file I/O.
"""

from __future__ import annotations

from typing import List, Optional, Set

import networkx as nx

from ..model.insights import ClusterInfo
from ..utils.numbers import round_half_up


def traverse_component(start: str, G: nx.Graph, visited: Set[str]) -> List[str]:
    """
    Collect every node reachable from `start`, marking them in `visited`.

    Members appear in depth-first discovery order; neighbors are pushed in
    G.adj order, i.e. link order.
    """
    component: List[str] = []
    stack: List[str] = [start]

    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        component.append(current)

        for neighbor in G.adj[current]:
            if neighbor not in visited:
                stack.append(neighbor)

    return component


def find_connected_components(G: nx.Graph) -> List[ClusterInfo]:
    """
    Partition the nodes of G into connected components.

    Every node lands in exactly one component; isolated nodes form
    components of size 1. Components are returned largest first, with ties
    kept in discovery order.

    Parameters
    ----------
    G : nx.Graph
        Output of build_nx_graph(); node order is the graph's node order.

    Returns
    -------
    List[ClusterInfo]
        Components with ids "component-<discovery index>".
    """
    visited: Set[str] = set()
    components: List[ClusterInfo] = []

    for node_id in G:
        if node_id in visited:
            continue
        members = traverse_component(node_id, G, visited)
        components.append(
            create_cluster_info(f"component-{len(components)}", members, G)
        )

    return sorted(components, key=lambda c: c.size, reverse=True)


def count_internal_edges(members: List[str], G: nx.Graph) -> int:
    """Number of distinct edges between two different members."""
    sub = G.subgraph(members)
    return sub.number_of_edges() - nx.number_of_selfloops(sub)


def find_central_node(members: List[str], G: nx.Graph) -> Optional[str]:
    """Member with the highest internal degree; the first one wins ties."""
    sub = G.subgraph(members)
    central: Optional[str] = None
    max_degree = -1

    for node_id in members:
        internal_degree = len(sub.adj[node_id])
        if internal_degree > max_degree:
            max_degree = internal_degree
            central = node_id

    return central


def create_cluster_info(cluster_id: str, members: List[str], G: nx.Graph) -> ClusterInfo:
    size = len(members)
    max_edges = size * (size - 1) / 2
    density = count_internal_edges(members, G) / max_edges if max_edges > 0 else 0.0

    return ClusterInfo(
        id=cluster_id,
        nodes=list(members),
        size=size,
        density=round_half_up(density, 3),
        central_node=find_central_node(members, G),
    )

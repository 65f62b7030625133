# src/depviz/analytics/centrality.py

"""
Degree-based centrality for dependency graphs.

This module computes:
  - hub nodes: the highest-degree nodes, capped at a fraction of all
    connected nodes
  - isolated nodes: nodes without a single neighbor

Degree is the number of distinct neighbors, len(G.adj[n]). Parallel links
are already collapsed by build_nx_graph() and a self-loop counts once
(G.degree would count it twice).
"""

from __future__ import annotations

import math
from typing import List

import networkx as nx

from ..model.insights import HubNode
from ..utils.config_loader import DEFAULT_CONFIG, AnalysisConfig


def find_isolated_nodes(G: nx.Graph) -> List[str]:
    """Ids of nodes without neighbors, in node order."""
    return list(nx.isolates(G))


def find_hub_nodes(G: nx.Graph, config: AnalysisConfig = DEFAULT_CONFIG) -> List[HubNode]:
    """
    Rank connected nodes by degree.

    Parameters
    ----------
    G : nx.Graph
        Output of build_nx_graph().
    config : AnalysisConfig
        `hub_fraction` and `max_hubs` bound the result length to
        min(max_hubs, ceil(hub_fraction * connected node count)).

    Returns
    -------
    List[HubNode]
        Highest degree first; equal degrees keep node order.
    """
    hubs = [
        HubNode(id=n, degree=len(nbrs), connections=list(nbrs))
        for n, nbrs in G.adj.items()
        if nbrs
    ]
    hubs.sort(key=lambda h: h.degree, reverse=True)

    limit = min(config.max_hubs, math.ceil(len(hubs) * config.hub_fraction))
    return hubs[:limit]

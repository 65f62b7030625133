# src/depviz/interaction/selection.py

"""
Selection and neighborhood utilities.

This module implements:
  - entities connected to a selected node or link
  - depth-limited neighborhoods (breadth-first)
  - raw incident-link degree
  - resolving a search result into a selection

Neighborhoods use the raw link list rather than build_nx_graph(), so links
to ids that are not graph nodes still show up here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Set

import networkx as nx

from ..model.graph_model import GraphData, GraphLink
from .search import SearchResult


@dataclass(frozen=True)
class Selection:
    """What the view should highlight after a node or link is picked."""

    node_id: Optional[str] = None
    link_id: Optional[str] = None
    connected: Set[str] = field(default_factory=set)


def find_connected_entities(
    graph: GraphData,
    node_id: Optional[str] = None,
    link_id: Optional[str] = None,
) -> Set[str]:
    """
    Ids connected to a selected node, or the two endpoints of a selected link.

    Parameters
    ----------
    graph : GraphData
    node_id : str, optional
        Selected node. Takes precedence over `link_id`.
    link_id : str, optional
        Selected link, as "<source>-<target>". The first link whose id
        matches is used.

    Returns
    -------
    Set[str]
        Empty when nothing is selected or nothing matches.
    """
    connected: Set[str] = set()

    if node_id:
        for link in graph.links:
            source_id = link.source_id
            target_id = link.target_id
            if source_id == node_id:
                connected.add(target_id)
            elif target_id == node_id:
                connected.add(source_id)
    elif link_id:
        link = find_link(graph, link_id)
        if link is not None:
            connected.add(link.source_id)
            connected.add(link.target_id)

    return connected


def find_link(graph: GraphData, link_id: str) -> Optional[GraphLink]:
    for link in graph.links:
        if link.link_id == link_id:
            return link
    return None


def _link_graph(graph: GraphData) -> nx.Graph:
    """Undirected graph of the raw links, dangling endpoints included."""
    G = nx.Graph()
    G.add_edges_from((link.source_id, link.target_id) for link in graph.links)
    return G


def find_neighbors_at_depth(graph: GraphData, node_id: str, depth: int) -> Set[str]:
    """
    The seed plus every node within `depth` hops of it.

    depth <= 0 returns just the seed, as does a seed with no links.
    """
    if depth <= 0:
        return {node_id}

    G = _link_graph(graph)
    if node_id not in G:
        return {node_id}
    return set(nx.bfs_tree(G, source=node_id, depth_limit=depth).nodes())


def calculate_node_degree(graph: GraphData, node_id: str) -> int:
    """Number of links touching a node; parallel links count separately."""
    return sum(
        1 for link in graph.links
        if link.source_id == node_id or link.target_id == node_id
    )


def select_search_result(graph: GraphData, result: SearchResult) -> Selection:
    """Turn a picked search result into the matching node or link selection."""
    if result.type == "node":
        return Selection(
            node_id=result.id,
            connected=find_connected_entities(graph, node_id=result.id),
        )
    return Selection(
        link_id=result.id,
        connected=find_connected_entities(graph, link_id=result.id),
    )

# src/depviz/analytics/communities.py

"""
Community detection utilities.

A greedy, single-pass grouping of nodes by shared-neighborhood similarity,
applied to the largest connected component only. It is a heuristic, not a
modularity optimizer: results depend on node order, so callers that need
exact membership must keep the input order fixed.

Communities are named after the most frequent word in the exported
declarations of their members (or their file names).
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Set

import networkx as nx

from ..model.graph_model import GraphData, last_segment
from ..model.insights import ClusterInfo
from ..utils.config_loader import DEFAULT_CONFIG, AnalysisConfig
from .connectivity import create_cluster_info, find_connected_components

STOP_WORDS = frozenset({
    "get", "set", "is", "has", "use", "make", "create", "init", "handle",
    "on", "to", "from", "with", "for", "of", "the", "and", "or", "not",
})

_SEPARATORS = re.compile(r"[._-]")
_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z])([A-Z][a-z])")
_SOURCE_EXT = re.compile(r"\.(ts|tsx|js|jsx)$")


def neighborhood_similarity(G: nx.Graph, a: str, b: str) -> float:
    """Shared neighbors of a and b over the larger of the two neighborhoods."""
    na = G.adj[a]
    nb = G.adj[b]
    common = na.keys() & nb.keys()
    return len(common) / max(len(na), len(nb), 1)


def find_local_community(
    seed: str,
    G: nx.Graph,
    processed: Set[str],
    component_nodes: List[str],
    config: AnalysisConfig = DEFAULT_CONFIG,
) -> List[str]:
    """
    Grow a community around `seed` and mark its members as processed.

    A candidate joins when its neighborhood similarity to the seed exceeds
    `similarity_threshold`, or when it is a direct neighbor of the seed and
    the similarity exceeds `neighbor_similarity_threshold`.
    """
    community: List[str] = [seed]
    seed_neighbors = G.adj[seed]

    for node_id in component_nodes:
        if node_id in processed or node_id == seed:
            continue

        similarity = neighborhood_similarity(G, seed, node_id)
        connected = node_id in seed_neighbors

        if similarity > config.similarity_threshold or (
            connected and similarity > config.neighbor_similarity_threshold
        ):
            community.append(node_id)

    processed.update(community)
    return community


def find_communities(
    graph: GraphData,
    G: nx.Graph,
    components: Optional[List[ClusterInfo]] = None,
    config: AnalysisConfig = DEFAULT_CONFIG,
) -> List[ClusterInfo]:
    """
    Detect communities inside the largest connected component.

    Parameters
    ----------
    graph : GraphData
        Source graph; declarations are used for naming.
    G : nx.Graph
        Output of build_nx_graph().
    components : List[ClusterInfo], optional
        Precomputed components (largest first). Computed when omitted.
    config : AnalysisConfig
        Size and similarity thresholds.

    Returns
    -------
    List[ClusterInfo]
        Named communities, largest first. Empty when the largest component
        has fewer than `min_component_size` nodes.
    """
    if components is None:
        components = find_connected_components(G)

    largest = components[0] if components else None
    if largest is None or largest.size < config.min_component_size:
        return []

    communities: List[ClusterInfo] = []
    processed: Set[str] = set()

    for node_id in largest.nodes:
        if node_id in processed:
            continue

        members = find_local_community(node_id, G, processed, largest.nodes, config)
        # undersized groups stay processed but are never reported
        if len(members) < config.min_community_size:
            continue

        info = create_cluster_info(f"community-{len(communities)}", members, G)
        name = generate_community_name(members, graph)
        communities.append(
            ClusterInfo(
                id=community_slug(name),
                nodes=info.nodes,
                size=info.size,
                density=info.density,
                central_node=info.central_node,
            )
        )

    return sorted(communities, key=lambda c: c.size, reverse=True)


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------


def extract_words_from_name(name: str) -> List[str]:
    """
    Split an identifier into lower-case words.

    Handles dot.separated, snake_case, kebab-case, camelCase and PascalCase
    names. Single characters and STOP_WORDS are dropped.
    """
    normalized = _SEPARATORS.sub(" ", name)
    normalized = _LOWER_UPPER.sub(r"\1 \2", normalized)
    normalized = _ACRONYM_WORD.sub(r"\1 \2", normalized)

    words = [w.lower() for w in normalized.split()]
    return [w for w in words if len(w) > 1 and w not in STOP_WORDS]


def generate_community_name(members: List[str], graph: GraphData) -> str:
    """
    Name a community after its most frequent meaningful word.

    Exported declaration names are tried first; when the members export
    nothing, their file names are used instead.
    """
    frequency: Dict[str, int] = {}
    nodes_by_id = {node.id: node for node in graph.nodes}

    for node_id in members:
        node = nodes_by_id.get(node_id)
        if node is None:
            continue
        for decl in node.declarations:
            if not decl.is_exported:
                continue
            for word in extract_words_from_name(decl.name):
                frequency[word] = frequency.get(word, 0) + 1

    if not frequency:
        for node_id in members:
            file_name = _SOURCE_EXT.sub("", last_segment(node_id))
            for word in extract_words_from_name(file_name):
                frequency[word] = frequency.get(word, 0) + 1

    best_word = ""
    best_count = 0
    for word, count in frequency.items():
        if count > best_count:
            best_word = word
            best_count = count

    if best_word:
        return best_word[0].upper() + best_word[1:] + " Community"
    return "General Community"


def community_slug(name: str) -> str:
    """Lower-case display name with whitespace runs replaced by hyphens."""
    return re.sub(r"\s+", "-", name.lower())

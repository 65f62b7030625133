# src/depviz/interaction/search.py

"""
Free-text search over graph nodes and links.

Case-insensitive substring matching on a fixed set of properties; results
are deduplicated per entity and returned in graph order (nodes first, then
links) without relevance ranking.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional, Set, Tuple, Union

from ..model.graph_model import GraphData, GraphLink, GraphNode, last_segment

NODE_SEARCH_PROPERTIES = ("id", "path", "name", "label")
LINK_SEARCH_PROPERTIES = ("type", "source", "target", "imports")


@dataclass(frozen=True)
class SearchResult:
    type: Literal["node", "link"]
    id: str
    display_text: str
    matched_property: str
    matched_value: str
    entity: Union[GraphNode, GraphLink]


def _import_label(item: Any) -> Optional[str]:
    """Text of an import entry: the string itself or a specifier's name."""
    if isinstance(item, str):
        return item
    if isinstance(item, dict) and isinstance(item.get("name"), str):
        return item["name"]
    return None


def _match_imports(value: Any, term: str) -> Optional[str]:
    if not isinstance(value, list):
        return None
    matching = [
        label for label in (_import_label(item) for item in value)
        if label is not None and term in label.lower()
    ]
    return ", ".join(matching) if matching else None


def _node_display_text(node: GraphNode) -> str:
    text = node.path or node.id or str(node.get("name") or "")
    return last_segment(text)


def _short_name(nodes_by_id: Dict[str, GraphNode], node_id: str) -> str:
    node = nodes_by_id.get(node_id)
    if node is not None and node.path:
        return last_segment(node.path)
    return node_id


def search_graph_entities(
    graph: GraphData,
    search_term: str,
    max_results: int = 20,
) -> List[SearchResult]:
    """
    Find nodes and links whose text properties contain `search_term`.

    A blank term returns []. Each entity appears at most once, with the
    first property that matched.
    """
    if graph is None or not search_term.strip():
        return []

    term = search_term.strip().lower()
    results: List[SearchResult] = []

    for node in graph.nodes:
        for prop in NODE_SEARCH_PROPERTIES:
            value = node.get(prop)
            if isinstance(value, str) and value and term in value.lower():
                results.append(SearchResult(
                    type="node",
                    id=node.id,
                    display_text=_node_display_text(node),
                    matched_property=prop,
                    matched_value=value,
                    entity=node,
                ))

    nodes_by_id = {node.id: node for node in graph.nodes}
    for link in graph.links:
        for prop in LINK_SEARCH_PROPERTIES:
            value = link.get(prop)
            if prop == "imports":
                matched = _match_imports(value, term)
            elif isinstance(value, str) and value and term in value.lower():
                matched = value
            else:
                matched = None

            if matched is None:
                continue

            source_name = _short_name(nodes_by_id, link.source_id)
            target_name = _short_name(nodes_by_id, link.target_id)
            results.append(SearchResult(
                type="link",
                id=link.link_id,
                display_text=f"{source_name} → {target_name}",
                matched_property=prop,
                matched_value=matched,
                entity=link,
            ))

    seen: Set[Tuple[str, str]] = set()
    unique: List[SearchResult] = []
    for result in results:
        key = (result.type, result.id)
        if key in seen:
            continue
        seen.add(key)
        unique.append(result)

    return unique[:max_results]

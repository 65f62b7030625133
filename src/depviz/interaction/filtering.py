# src/depviz/interaction/filtering.py

"""
Node filtering.

apply_node_filter() narrows a graph to the nodes whose path (or declaration
names) contain a text, or to the nodes that do not; links are kept only
when both endpoints survive. filter_nodes_by_search() is the looser
highlight match that also looks at import metadata.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Set

from ..model.graph_model import GraphData, GraphNode


@dataclass(frozen=True)
class NodeFilter:
    text: str = ""
    include_mode: bool = True
    filter_declarations: bool = False


def _node_matches(node: GraphNode, text: str, filter_declarations: bool) -> bool:
    if filter_declarations:
        return any(text in decl.name.lower() for decl in node.declarations)
    return text in (node.path or "").lower()


def apply_node_filter(graph: GraphData, node_filter: NodeFilter) -> GraphData:
    """
    Return the filtered view of `graph`.

    A blank filter text returns `graph` itself; otherwise a new GraphData
    sharing the node and link objects is built.
    """
    if not node_filter.text.strip():
        return graph

    text = node_filter.text.lower()
    kept = [
        node for node in graph.nodes
        if _node_matches(node, text, node_filter.filter_declarations) == node_filter.include_mode
    ]
    kept_ids = {node.id for node in kept}
    links = [
        link for link in graph.links
        if link.source_id in kept_ids and link.target_id in kept_ids
    ]

    return GraphData(nodes=kept, links=links, name=graph.name, description=graph.description)


def _import_texts(node: GraphNode) -> Iterable[str]:
    for imp in node.imports:
        if not isinstance(imp, dict):
            continue
        source = imp.get("from")
        if isinstance(source, str):
            yield source
        for spec in imp.get("imports") or []:
            if isinstance(spec, dict) and isinstance(spec.get("name"), str):
                yield spec["name"]


def filter_nodes_by_search(nodes: Iterable[GraphNode], query: str) -> Set[str]:
    """Ids of nodes whose path, imports or declaration names contain `query`."""
    if not query.strip():
        return set()

    q = query.lower()
    matched: Set[str] = set()
    for node in nodes:
        texts = [node.path or ""]
        texts.extend(_import_texts(node))
        texts.extend(decl.name for decl in node.declarations)
        if any(q in t.lower() for t in texts):
            matched.add(node.id)
    return matched

"""Tests for the NetworkX graph shared by analysis and export."""

import random

from depviz.build.graph_builder import build_nx_graph
from depviz.model.graph_model import GraphData, GraphLink, GraphNode

from conftest import make_graph, make_node


class TestGraphStructure:
    """Tests for node and neighbor order in build_nx_graph output."""

    def test_links_are_symmetric(self, abcd_graph):
        G, _ = build_nx_graph(abcd_graph)
        assert list(G.adj["A"]) == ["B"]
        assert list(G.adj["B"]) == ["A", "C"]
        assert list(G.adj["C"]) == ["B"]

    def test_isolated_nodes_are_present(self, abcd_graph):
        G, _ = build_nx_graph(abcd_graph)
        assert list(G) == ["A", "B", "C", "D"]
        assert len(G.adj["D"]) == 0

    def test_dangling_links_are_skipped(self):
        graph = make_graph(["A", "B"], [("A", "B"), ("A", "ghost")])
        G, stats = build_nx_graph(graph)
        assert "ghost" not in G
        assert list(G.adj["A"]) == ["B"]
        assert stats.n_edges == 1
        assert stats.n_links == 2

    def test_parallel_and_reverse_links_collapse(self):
        graph = make_graph(["A", "B"], [("A", "B"), ("A", "B"), ("B", "A")])
        G, _ = build_nx_graph(graph)
        assert len(G.adj["A"]) == 1
        assert G["A"]["B"]["count"] == 3

    def test_embedded_endpoints_are_normalized(self):
        a, b, c = make_node("A"), make_node("B"), make_node("C")
        links = [
            GraphLink(source=a, target=b),
            GraphLink(source={"id": "B"}, target={"path": "C"}),
        ]
        G, _ = build_nx_graph(GraphData(nodes=[a, b, c], links=links))
        assert list(G.adj["B"]) == ["A", "C"]

    def test_neighbor_order_follows_link_order(self):
        rng = random.Random(11)
        ids = [f"n{i}" for i in range(30)]
        pairs = [(rng.choice(ids), rng.choice(ids + ["ghost"])) for _ in range(90)]
        G, _ = build_nx_graph(make_graph(ids, pairs))

        expected = {n: [] for n in ids}
        for s, t in pairs:
            if t == "ghost":
                continue
            if t not in expected[s]:
                expected[s].append(t)
            if s != t and s not in expected[t]:
                expected[t].append(s)
        assert {n: list(G.adj[n]) for n in G} == expected


class TestBuildNxGraph:
    """Tests for attributes and build statistics."""

    def test_link_types_are_counted(self):
        graph = make_graph(["A", "B", "C"], [("A", "B"), ("B", "A"), ("B", "C")])
        G, stats = build_nx_graph(graph)
        assert stats.n_nodes == 3
        assert stats.n_edges == 2
        assert stats.n_links == 3
        assert G["A"]["B"]["count"] == 2
        assert G["A"]["B"]["type"] == "import"
        assert stats.link_types["import"] == 3

    def test_node_attributes(self):
        graph = make_graph(["src/utils/token.ts", "src/index.ts"], [("src/index.ts", "src/utils/token.ts")])
        G, _ = build_nx_graph(graph, node2comm={"src/index.ts": "index-community"})
        assert G.nodes["src/utils/token.ts"]["label"] == "token.ts"
        assert G.nodes["src/utils/token.ts"]["community"] == ""
        assert G.nodes["src/index.ts"]["community"] == "index-community"
        assert G.nodes["src/index.ts"]["kind"] == "dependency"

    def test_generic_label_prefers_name(self):
        node = GraphNode(id="n1", path="n1", kind="generic", attrs={"name": "Widget"})
        G, _ = build_nx_graph(GraphData(nodes=[node]))
        assert G.nodes["n1"]["label"] == "Widget"

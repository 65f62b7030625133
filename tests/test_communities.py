"""Tests for community detection and naming."""

import networkx as nx

from depviz.analytics.communities import (
    community_slug,
    extract_words_from_name,
    find_communities,
    generate_community_name,
    neighborhood_similarity,
)
from depviz.build.graph_builder import build_nx_graph
from depviz.model.graph_model import GraphData
from depviz.utils.config_loader import AnalysisConfig

from conftest import make_graph, make_node


class TestFindCommunities:
    """Tests for find_communities."""

    def test_small_largest_component_yields_nothing(self):
        graph = make_graph(
            ["A", "B", "C", "D", "E", "F"],
            [("A", "B"), ("B", "C"), ("C", "D"), ("D", "E")],
        )
        G, _ = build_nx_graph(graph)
        assert find_communities(graph, G) == []

    def test_bridged_triangles(self, two_triangles):
        G, _ = build_nx_graph(two_triangles)
        communities = find_communities(two_triangles, G)

        # the b2/b3 pair is too small to report
        assert len(communities) == 1
        community = communities[0]
        assert community.nodes == ["a1", "a3", "b1", "a2"]
        assert community.size == 4
        assert community.density == 0.667
        assert community.central_node == "a3"
        assert community.id == "a1-community"

    def test_direct_neighbor_joins_on_weak_similarity(self):
        # s-n1 and s-n2 share one neighbor out of four (0.25): only the
        # direct-neighbor threshold admits them
        graph = make_graph(
            ["s", "n1", "n2", "n3", "n4", "x"],
            [("s", "n1"), ("s", "n2"), ("s", "n3"), ("s", "n4"), ("n1", "n2"), ("n4", "x")],
        )
        G, _ = build_nx_graph(graph)
        assert neighborhood_similarity(G, "s", "n1") == 0.25

        communities = find_communities(graph, G)
        assert [c.nodes for c in communities] == [["s", "n2", "n1"]]
        assert communities[0].density == 1.0
        assert communities[0].central_node == "s"

    def test_weak_similarity_without_link_is_rejected(self):
        graph = make_graph(
            ["s", "n1", "n2", "n3", "n4", "x"],
            [("s", "n1"), ("s", "n2"), ("s", "n3"), ("s", "n4"), ("n1", "n2"), ("n4", "x")],
        )
        G, _ = build_nx_graph(graph)
        # x shares n4 with s (0.25) but is not linked to s
        assert neighborhood_similarity(G, "s", "x") == 0.25
        assert "x" not in find_communities(graph, G)[0].nodes

    def test_members_are_disjoint_and_inside_largest_component(self, two_triangles):
        config = AnalysisConfig(min_community_size=1)
        G, _ = build_nx_graph(two_triangles)
        communities = find_communities(two_triangles, G, config=config)

        members = [n for c in communities for n in c.nodes]
        assert len(members) == len(set(members))
        assert set(members) == {"a1", "a2", "a3", "b1", "b2", "b3"}
        assert [c.size for c in communities] == [4, 2]

    def test_threshold_from_config(self, two_triangles):
        G, _ = build_nx_graph(two_triangles)
        config = AnalysisConfig(min_component_size=7)
        assert find_communities(two_triangles, G, config=config) == []

    def test_deterministic_for_same_input(self, two_triangles):
        G, _ = build_nx_graph(two_triangles)
        first = find_communities(two_triangles, G)
        second = find_communities(two_triangles, build_nx_graph(two_triangles)[0])
        assert first == second

    def test_named_after_exported_declarations(self):
        ids = ["a1", "a2", "a3", "b1", "b2", "b3"]
        graph = make_graph(ids, [
            ("a1", "a2"), ("a1", "a3"), ("a2", "a3"),
            ("b1", "b2"), ("b1", "b3"), ("b2", "b3"),
            ("a3", "b1"),
        ])
        graph.nodes[0] = make_node("a1", exports=["AuthService"])
        graph.nodes[2] = make_node("a3", exports=["authGuard", "AuthToken"])
        G, _ = build_nx_graph(graph)

        communities = find_communities(graph, G)
        assert communities[0].id == "auth-community"


class TestSimilarity:
    """Tests for neighborhood_similarity."""

    def test_shared_over_larger_neighborhood(self, two_triangles):
        G, _ = build_nx_graph(two_triangles)
        assert neighborhood_similarity(G, "a1", "a2") == 0.5
        assert neighborhood_similarity(G, "a1", "b2") == 0.0

    def test_isolated_nodes_do_not_divide_by_zero(self):
        G = nx.Graph()
        G.add_nodes_from(["x", "y"])
        assert neighborhood_similarity(G, "x", "y") == 0.0


class TestNaming:
    """Tests for word extraction and community names."""

    def test_extract_words_camel_case(self):
        assert extract_words_from_name("authLogin") == ["auth", "login"]

    def test_extract_words_drops_stop_words(self):
        assert extract_words_from_name("getUserData") == ["user", "data"]

    def test_extract_words_acronyms(self):
        assert extract_words_from_name("HTTPServer") == ["http", "server"]

    def test_extract_words_separators(self):
        assert extract_words_from_name("auth-service.ts") == ["auth", "service", "ts"]
        assert extract_words_from_name("user_store") == ["user", "store"]

    def test_extract_words_drops_single_characters(self):
        assert extract_words_from_name("a_b_cache") == ["cache"]

    def test_name_from_declarations(self):
        graph = GraphData(nodes=[
            make_node("x", exports=["AuthService", "authGuard"]),
            make_node("y", exports=["AuthToken"]),
        ])
        assert generate_community_name(["x", "y"], graph) == "Auth Community"

    def test_unexported_declarations_are_ignored(self, dependency_json):
        from depviz.loader.graph_loader import parse_graph

        graph = parse_graph(dependency_json)
        # "helper" is not exported; AuthService is
        assert generate_community_name(["src/services/auth-service.ts"], graph) == "Auth Community"

    def test_name_falls_back_to_file_names(self):
        graph = GraphData(nodes=[
            make_node("src/cart/cartStore.ts"),
            make_node("src/cart/cartView.tsx"),
        ])
        name = generate_community_name(["src/cart/cartStore.ts", "src/cart/cartView.tsx"], graph)
        assert name == "Cart Community"

    def test_general_community_when_no_words(self):
        graph = GraphData(nodes=[make_node("a"), make_node("b")])
        assert generate_community_name(["a", "b"], graph) == "General Community"

    def test_slug(self):
        assert community_slug("Auth Community") == "auth-community"
        assert community_slug("General  Community") == "general-community"

"""Tests for free-text search."""

from depviz.interaction.search import search_graph_entities
from depviz.loader.graph_loader import parse_graph
from depviz.model.graph_model import GraphData, GraphLink, GraphNode


class TestSearchGraphEntities:
    """Tests for search_graph_entities."""

    def test_blank_term(self, dependency_json):
        graph = parse_graph(dependency_json)
        assert search_graph_entities(graph, "") == []
        assert search_graph_entities(graph, "   ") == []

    def test_case_insensitive_path_match(self):
        node = GraphNode(id="n1", path="services/auth-service.ts")
        graph = GraphData(nodes=[node])

        results = search_graph_entities(graph, "Auth")
        assert len(results) == 1
        result = results[0]
        assert result.type == "node"
        assert result.id == "n1"
        assert result.matched_property == "path"
        assert result.matched_value == "services/auth-service.ts"
        assert result.display_text == "auth-service.ts"
        assert result.entity is node

    def test_nodes_then_links(self, dependency_json):
        graph = parse_graph(dependency_json)
        results = search_graph_entities(graph, "token")

        assert [(r.type, r.matched_property) for r in results] == [("node", "id"), ("link", "target")]
        assert results[0].id == "src/utils/token.ts"
        assert results[1].id == "src/services/auth-service.ts-src/utils/token.ts"
        assert results[1].display_text == "auth-service.ts → token.ts"

    def test_each_entity_once(self, dependency_json):
        graph = parse_graph(dependency_json)
        results = search_graph_entities(graph, "src")
        keys = [(r.type, r.id) for r in results]
        assert len(keys) == len(set(keys))
        assert len(results) == 5

    def test_link_imports_match(self, dependency_json):
        graph = parse_graph(dependency_json)
        results = search_graph_entities(graph, "AuthServ")
        assert len(results) == 1
        assert results[0].type == "link"
        assert results[0].matched_property == "imports"
        assert results[0].matched_value == "AuthService"

    def test_import_specifier_names_match(self):
        graph = GraphData(
            nodes=[GraphNode(id="a", path="a"), GraphNode(id="b", path="b")],
            links=[GraphLink(source="a", target="b", type="import", imports=[{"name": "formatDate"}])],
        )
        results = search_graph_entities(graph, "format")
        assert [r.matched_value for r in results] == ["formatDate"]

    def test_generic_name_property(self):
        node = GraphNode(id="7", path="7", kind="generic", attrs={"id": 7, "name": "Billing"})
        results = search_graph_entities(GraphData(nodes=[node]), "bill")
        assert results[0].matched_property == "name"
        assert results[0].display_text == "7"

    def test_numeric_name_without_path_or_id(self):
        node = GraphNode(id="", path="", kind="generic", attrs={"name": 42, "label": "Widget"})
        results = search_graph_entities(GraphData(nodes=[node]), "widget")
        assert results[0].matched_property == "label"
        assert results[0].display_text == "42"

    def test_max_results(self, dependency_json):
        graph = parse_graph(dependency_json)
        assert len(search_graph_entities(graph, "src", max_results=2)) == 2

    def test_no_match(self, dependency_json):
        graph = parse_graph(dependency_json)
        assert search_graph_entities(graph, "nothing-like-this") == []

"""Pytest configuration and fixtures for depviz tests."""

from typing import Dict, Iterable, List, Optional, Tuple

import pytest

from depviz.model.graph_model import Declaration, GraphData, GraphLink, GraphNode


def make_node(node_id: str, path: Optional[str] = None, exports: Iterable[str] = (), **attrs) -> GraphNode:
    """Dependency node with the given exported declaration names."""
    return GraphNode(
        id=node_id,
        path=path if path is not None else node_id,
        declarations=[Declaration(name=n, type="function", is_exported=True) for n in exports],
        attrs=attrs,
    )


def make_graph(node_ids: List[str], pairs: List[Tuple[str, str]], link_type: str = "import") -> GraphData:
    return GraphData(
        nodes=[make_node(n) for n in node_ids],
        links=[GraphLink(source=s, target=t, type=link_type) for s, t in pairs],
    )


@pytest.fixture
def abcd_graph() -> GraphData:
    """A-B, B-C chain plus an unconnected D."""
    return make_graph(["A", "B", "C", "D"], [("A", "B"), ("B", "C")])


@pytest.fixture
def two_triangles() -> GraphData:
    """Two triangles joined by a single a3-b1 bridge."""
    return make_graph(
        ["a1", "a2", "a3", "b1", "b2", "b3"],
        [
            ("a1", "a2"), ("a1", "a3"), ("a2", "a3"),
            ("b1", "b2"), ("b1", "b3"), ("b2", "b3"),
            ("a3", "b1"),
        ],
    )


@pytest.fixture
def dependency_json() -> Dict:
    """Small graph in the dependency dialect, as produced by the scanner."""
    return {
        "name": "demo",
        "nodes": [
            {
                "path": "src/services/auth-service.ts",
                "imports": [
                    {
                        "type": "import",
                        "from": "../utils/token",
                        "imports": [{"name": "signToken", "isDefault": False, "isNamespace": False}],
                        "sourceFile": "src/services/auth-service.ts",
                        "position": {"line": 1, "column": 0, "offset": 0},
                    }
                ],
                "exports": [],
                "declarations": [
                    {"name": "AuthService", "type": "class", "isExported": True, "isDefault": False},
                    {"name": "helper", "type": "function", "isExported": False, "isDefault": False},
                ],
            },
            {
                "path": "src/utils/token.ts",
                "imports": [],
                "exports": [],
                "declarations": [
                    {"name": "signToken", "type": "function", "isExported": True, "isDefault": True},
                ],
            },
            {
                "path": "src/index.ts",
                "imports": [],
                "exports": [],
                "declarations": [],
            },
        ],
        "links": [
            {
                "source": "src/services/auth-service.ts",
                "target": "src/utils/token.ts",
                "imports": ["signToken"],
                "type": "import",
            },
            {
                "source": "src/index.ts",
                "target": "src/services/auth-service.ts",
                "imports": ["AuthService"],
                "type": "re-export",
            },
        ],
    }

# src/depviz/data/sample_graph.py

"""
Bundled demo graph in minimal format, shown when no file is loaded.
"""

from __future__ import annotations

from ..loader.converters import from_minimal
from ..model.graph_model import GraphData


def _node(idx: int, label: str, ntype: str, complexity: int, size: int) -> dict:
    return {
        "id": f"node_{idx}",
        "label": label,
        "type": ntype,
        "metadata": {"complexity": complexity, "size": size},
    }


def _link(src: int, tgt: int, ltype: str, weight: float, strength: int, frequency: int) -> dict:
    return {
        "source": f"node_{src}",
        "target": f"node_{tgt}",
        "type": ltype,
        "weight": weight,
        "metadata": {"strength": strength, "frequency": frequency},
    }


SAMPLE_GRAPH = {
    "nodes": [
        _node(0, "CategoryModel", "model", 1, 2227),
        _node(1, "CacheConfig", "config", 6, 1103),
        _node(2, "ReportController", "controller", 5, 2455),
        _node(3, "ParserUtility", "utility", 4, 3375),
        _node(4, "SettingsController", "controller", 4, 3916),
        _node(5, "ApiService", "service", 8, 1892),
        _node(6, "UserModel", "model", 7, 2108),
        _node(7, "FormComponent", "component", 3, 4201),
        _node(8, "ValidationUtility", "utility", 9, 1567),
        _node(9, "DashboardView", "view", 2, 3294),
        _node(10, "AuthService", "service", 10, 2841),
        _node(11, "ButtonComponent", "component", 1, 2067),
        _node(12, "DatabaseConfig", "config", 5, 1784),
    ],
    "links": [
        _link(7, 8, "depends", 1.8, 4, 85),
        _link(2, 6, "uses", 2.1, 3, 42),
        _link(5, 10, "calls", 1.5, 5, 91),
        _link(9, 11, "imports", 1.2, 2, 67),
        _link(1, 12, "extends", 2.3, 4, 23),
        _link(3, 8, "references", 1.7, 3, 58),
        _link(0, 6, "depends", 1.9, 2, 74),
    ],
}


def load_sample_graph() -> GraphData:
    return from_minimal(SAMPLE_GRAPH)

# src/depviz/model/insights.py

"""
Result structures produced by the structural analysis.

All of them are frozen snapshots: an analysis call builds fresh instances
and nothing mutates them afterwards.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ClusterInfo:
    """A connected component or a detected community."""

    id: str
    nodes: List[str]
    size: int
    density: float
    central_node: Optional[str] = None


@dataclass(frozen=True)
class HubNode:
    id: str
    degree: int
    connections: List[str]


@dataclass(frozen=True)
class MostConnectedNode:
    id: str
    degree: int


@dataclass(frozen=True)
class GraphInsights:
    total_nodes: int = 0
    total_links: int = 0
    connected_components: List[ClusterInfo] = field(default_factory=list)
    communities: List[ClusterInfo] = field(default_factory=list)
    isolated_nodes: List[str] = field(default_factory=list)
    hub_nodes: List[HubNode] = field(default_factory=list)
    average_degree: float = 0.0
    density: float = 0.0
    largest_component: Optional[ClusterInfo] = None
    most_connected_node: Optional[MostConnectedNode] = None


def insights_to_dict(insights: GraphInsights) -> Dict[str, Any]:
    """JSON-ready representation of a GraphInsights snapshot."""
    return asdict(insights)

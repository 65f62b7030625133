"""
Per-graph directory layout.

A graph analysed with --graph-name or --data-location owns a base directory:

    {base}/config/analysis.ini     optional threshold overrides
    {base}/analysis/               default output folder

Without either option the CLI runs with built-in settings and writes to
data/analysis.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

DATA_ROOT = Path("data")


def resolve_base_dir(graph_name: Optional[str], data_location: Optional[str], *, create: bool = False) -> Optional[Path]:
    """
    Base directory for a graph, or None when neither option is given.

    An explicit data_location wins over data/{graph_name}.
    """
    if data_location:
        base = Path(data_location)
    elif graph_name:
        base = DATA_ROOT / graph_name
    else:
        return None

    if create:
        base.mkdir(parents=True, exist_ok=True)
    return base.resolve()


def analysis_ini_path(base_dir: Path) -> Path:
    return base_dir / "config" / "analysis.ini"


def default_outdir(base_dir: Optional[Path]) -> Path:
    """{base}/analysis, or data/analysis for ad-hoc runs."""
    if base_dir is None:
        return DATA_ROOT / "analysis"
    return base_dir / "analysis"

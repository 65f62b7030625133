"""
Config loading utilities for graph analysis.

Per-graph overrides are read from:

    data/{graph}/config/analysis.ini

Every key is optional; anything missing keeps the built-in default. Example:

    [communities]
    min_component_size = 6
    min_community_size = 3
    similarity_threshold = 0.3
    neighbor_similarity_threshold = 0.1

    [hubs]
    fraction = 0.1
    max_hubs = 10

    [search]
    max_results = 20
"""

from __future__ import annotations

import configparser
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Dict, Tuple

from .log import info, warn
from .paths import analysis_ini_path


@dataclass(frozen=True)
class AnalysisConfig:
    """Thresholds used by the structural analysis and search."""

    min_component_size: int = 6
    min_community_size: int = 3
    similarity_threshold: float = 0.3
    neighbor_similarity_threshold: float = 0.1
    hub_fraction: float = 0.1
    max_hubs: int = 10
    max_search_results: int = 20


DEFAULT_CONFIG = AnalysisConfig()

# ini (section, key) -> AnalysisConfig field
_INI_KEYS: Dict[Tuple[str, str], str] = {
    ("communities", "min_component_size"): "min_component_size",
    ("communities", "min_community_size"): "min_community_size",
    ("communities", "similarity_threshold"): "similarity_threshold",
    ("communities", "neighbor_similarity_threshold"): "neighbor_similarity_threshold",
    ("hubs", "fraction"): "hub_fraction",
    ("hubs", "max_hubs"): "max_hubs",
    ("search", "max_results"): "max_search_results",
}


def _parse_analysis_ini(path: Path) -> Dict[str, object]:
    """
    Parse analysis.ini into a mapping of AnalysisConfig field -> value.
    Unknown sections/keys and unparsable values are skipped with a warning.
    """
    overrides: Dict[str, object] = {}

    parser = configparser.ConfigParser()
    try:
        parser.read(path, encoding="utf-8")
    except configparser.Error as e:
        warn(f"Failed to parse {path}: {e} – using default analysis settings.")
        return overrides

    types = {f.name: f.type for f in fields(AnalysisConfig)}

    for section in parser.sections():
        for key, raw in parser.items(section):
            field_name = _INI_KEYS.get((section, key))
            if field_name is None:
                warn(f"Ignoring unknown analysis.ini key [{section}] {key}")
                continue

            caster = int if types[field_name] in (int, "int") else float
            try:
                overrides[field_name] = caster(raw)
            except ValueError:
                warn(f"Invalid value for [{section}] {key}: {raw!r} – keeping default.")

    return overrides


def load_analysis_config(base_dir: Path) -> AnalysisConfig:
    """
    Load analysis thresholds for a given graph base directory.

    Parameters
    ----------
    base_dir : Path
        Typically data/{graph-name}.
    """
    path = analysis_ini_path(base_dir)
    if not path.exists():
        info(f"No analysis.ini found at {path} – using default analysis settings.")
        return DEFAULT_CONFIG

    overrides = _parse_analysis_ini(path)
    if not overrides:
        return DEFAULT_CONFIG

    info(f"Loaded {len(overrides)} analysis setting(s) from {path}.")
    return replace(DEFAULT_CONFIG, **overrides)

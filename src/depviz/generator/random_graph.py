#!/usr/bin/env python3
"""
Random dependency-graph generator.

Produces dependency-dialect JSON (files with declarations and import
metadata, plus "import" links) for exercising the analyser on graphs of
arbitrary size.

Usage:
    python -m depviz.generator.random_graph 200 --density 1.5 --output sample-graph-200.json
"""

from __future__ import annotations

import argparse
import json
import random
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# module type -> file extensions, typical exports, folders
MODULE_TYPES: Dict[str, Dict[str, List[str]]] = {
    "component": {
        "file_types": [".tsx", ".jsx"],
        "exports": ["Button", "Modal", "Card", "List", "Table", "Form", "Input", "Header", "Footer", "Nav"],
        "folders": ["components", "ui", "views"],
    },
    "service": {
        "file_types": [".ts", ".js"],
        "exports": ["AuthService", "ApiService", "DataService", "CacheService", "StorageService"],
        "folders": ["services", "api", "lib"],
    },
    "utility": {
        "file_types": [".ts", ".js"],
        "exports": ["formatDate", "parseJSON", "validateEmail", "calculateSum", "deepClone"],
        "folders": ["utils", "helpers", "lib"],
    },
    "model": {
        "file_types": [".ts", ".d.ts"],
        "exports": ["User", "Product", "Order", "Customer", "Settings"],
        "folders": ["models", "entities", "types"],
    },
    "types": {
        "file_types": [".ts", ".d.ts"],
        "exports": ["UserType", "ApiResponse", "Config", "State", "Action"],
        "folders": ["types", "interfaces", "@types"],
    },
}


def _kebab(name: str) -> str:
    return re.sub(r"([A-Z])", r"-\1", name).lower().lstrip("-")


def generate_path(rng: random.Random, module_type: str, index: int) -> str:
    spec = MODULE_TYPES[module_type]
    folder = rng.choice(spec["folders"])
    name = _kebab(rng.choice(spec["exports"]))
    return f"src/{folder}/{name}-{index}{rng.choice(spec['file_types'])}"


def _position(line: int, offset: int) -> Dict[str, int]:
    return {"line": line, "column": 0, "offset": offset}


def generate_declarations(rng: random.Random, path: str, module_type: str) -> List[Dict[str, Any]]:
    declarations: List[Dict[str, Any]] = []
    export_names = MODULE_TYPES[module_type]["exports"]

    for i in range(rng.randint(1, 3)):
        decl: Dict[str, Any] = {
            "name": rng.choice(export_names) + (str(i) if i > 0 else ""),
            "type": "function",
            "isExported": True,
            "isDefault": i == 0 and rng.random() > 0.5,
            "sourceFile": path,
            "position": _position(10 + i * 20, 200 + i * 400),
        }

        if module_type == "component":
            decl["parameters"] = [{"name": "props", "type": "Props", "optional": False}]
            decl["returnType"] = "JSX.Element"
        elif module_type in ("service", "utility"):
            decl["type"] = "function" if rng.random() > 0.5 else "class"
            if decl["type"] == "function":
                decl["isAsync"] = rng.random() > 0.5
                decl["parameters"] = [{"name": "data", "type": "any", "optional": False}]
                decl["returnType"] = "Promise<any>" if decl["isAsync"] else "any"
        else:
            decl["type"] = "interface" if rng.random() > 0.5 else "type"
            if decl["type"] == "interface":
                decl["extends"] = ["BaseType"] if rng.random() > 0.7 else []

        declarations.append(decl)

    return declarations


def _import_from(target_path: str) -> str:
    rel = "./" + target_path.replace("src/", "../", 1)
    return re.sub(r"\.[tj]sx?$", "", rel)


def generate_random_dependency_graph(
    node_count: int,
    density: float = 1.5,
    seed: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Build a random dependency-dialect graph.

    Parameters
    ----------
    node_count : int
        Number of files.
    density : float
        Target links per node; floor(node_count * density) links are
        attempted, at most 10 attempts per target link.
    seed : int, optional
        Seed for reproducible output.

    Returns
    -------
    dict
        {"nodes": [...], "links": [...]} in the dependency dialect.
    """
    rng = random.Random(seed)
    module_types = list(MODULE_TYPES)

    nodes: List[Dict[str, Any]] = []
    for i in range(node_count):
        module_type = rng.choice(module_types)
        path = generate_path(rng, module_type, i)
        nodes.append({
            "path": path,
            "imports": [],
            "exports": [],
            "declarations": generate_declarations(rng, path, module_type),
        })

    target_links = int(node_count * density)
    max_attempts = target_links * 10
    links: List[Dict[str, Any]] = []
    seen_pairs = set()
    attempts = 0

    while len(links) < target_links and attempts < max_attempts:
        attempts += 1
        src_idx = rng.randint(0, node_count - 1)
        tgt_idx = rng.randint(0, node_count - 1)
        if src_idx == tgt_idx or (src_idx, tgt_idx) in seen_pairs:
            continue
        seen_pairs.add((src_idx, tgt_idx))

        source = nodes[src_idx]
        target = nodes[tgt_idx]
        available = [d["name"] for d in target["declarations"] if d["isExported"]]
        if not available:
            continue

        imported = rng.sample(available, min(rng.randint(1, 3), len(available)))
        defaults = {d["name"]: d["isDefault"] for d in target["declarations"]}

        source["imports"].append({
            "type": "import",
            "from": _import_from(target["path"]),
            "imports": [
                {"name": name, "isDefault": defaults.get(name, False), "isNamespace": False}
                for name in imported
            ],
            "sourceFile": source["path"],
            "position": _position(1 + len(source["imports"]), len(source["imports"]) * 50),
        })
        links.append({
            "source": source["path"],
            "target": target["path"],
            "imports": imported,
            "type": "import",
        })

    return {"nodes": nodes, "links": links}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate a random dependency graph JSON file.")
    p.add_argument("node_count", type=int, help="Number of nodes to generate")
    p.add_argument("--density", type=float, default=1.5, help="Average links per node (default: 1.5)")
    p.add_argument("--output", help="Output filename under data/ (default: sample-graph-{node_count}.json)")
    p.add_argument("--seed", type=int, default=None, help="Random seed for reproducible graphs")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    if args.node_count <= 0:
        sys.exit("❌ node_count must be a positive integer")
    if args.density < 0:
        sys.exit("❌ density must be a non-negative number")

    print(f"🎲 Generating dependency graph with {args.node_count} nodes and density {args.density} …")
    graph = generate_random_dependency_graph(args.node_count, args.density, seed=args.seed)
    n_nodes = len(graph["nodes"])
    n_links = len(graph["links"])
    print(f"✅ Generated {n_nodes} nodes and {n_links} links")

    out_path = Path("data") / (args.output or f"sample-graph-{args.node_count}.json")
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(graph, indent=2), encoding="utf-8")
    print(f"💾 Saved to: {out_path}")

    print("\nStatistics:")
    print(f"  Nodes: {n_nodes}")
    print(f"  Links: {n_links}")
    print(f"  Average degree: {n_links * 2 / n_nodes:.2f}")
    print(f"  Actual density: {n_links / n_nodes:.2f}")


if __name__ == "__main__":
    main()

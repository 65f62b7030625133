#!/usr/bin/env python3
"""
Dependency Graph Analysis
-------------------------------------------------------
Loads a dependency graph (dependency or generic JSON dialect), optionally
filters it, and runs connectivity, community, hub and isolation analysis.
Answers ad-hoc selection and search queries, and exports a Markdown report,
CSVs, an insights JSON, GraphML and a PyVis HTML view. Configurable via CLI
(input path, output dir, filter, search, selection, depth, limits) and a
per-graph config/analysis.ini.
"""

from __future__ import annotations

import argparse
import time
from pathlib import Path
from typing import Optional

from depviz.analytics.metrics import analyze_graph_structure, insights_summary
from depviz.build.graph_builder import build_nx_graph
from depviz.data.sample_graph import load_sample_graph
from depviz.interaction.filtering import NodeFilter, apply_node_filter
from depviz.interaction.search import search_graph_entities
from depviz.interaction.selection import find_connected_entities, find_neighbors_at_depth
from depviz.loader.graph_loader import GraphFormatError, PropertyMapping, load_graph
from depviz.report.csv_export import (
    export_clusters_csv,
    export_hubs_csv,
    export_insights_json,
    export_membership_csv,
    node_membership,
)
from depviz.report.report_markdown import render_report
from depviz.utils.config_loader import DEFAULT_CONFIG, load_analysis_config
from depviz.utils.log import log
from depviz.utils.paths import default_outdir, resolve_base_dir
from depviz.viz.pyvis_basic import export_graphml, export_pyvis_with_legend


# ──────────────────────────────────────────────────────────────────────────────
# CLI
# ──────────────────────────────────────────────────────────────────────────────


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Analyse the structure of a dependency graph.")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--input", help="Path to a graph JSON file (dependency or generic dialect).")
    src.add_argument("--sample", action="store_true", help="Analyse the bundled sample graph.")
    p.add_argument(
        "--graph-name",
        help="Graph name (uses data/{graph-name} as base for config and outputs).",
    )
    p.add_argument(
        "--data-location",
        help="Explicit data directory (overrides --graph-name).",
    )
    p.add_argument(
        "--outdir",
        help="Output directory (default: {base}/analysis when graph/data specified, else data/analysis)",
    )
    p.add_argument("--viz-html", default="graph.html", help="Filename for PyVis HTML under outdir")
    p.add_argument("--graphml", default="graph.graphml", help="Filename for GraphML under outdir")
    p.add_argument("--no-export", action="store_true", help="Print results only; write no files")
    p.add_argument("--topk", type=int, default=10, help="Rows per table in the report")

    # Generic-dialect mapping overrides
    p.add_argument("--node-id-prop", help="Generic dialect: node property holding the id")
    p.add_argument("--source-prop", help="Generic dialect: link property holding the source id")
    p.add_argument("--target-prop", help="Generic dialect: link property holding the target id")
    p.add_argument(
        "--link-collection",
        choices=["links", "edges"],
        default="links",
        help="Generic dialect: top-level key holding the links",
    )

    # Filtering
    p.add_argument("--filter", default="", help="Keep nodes whose path contains this text")
    p.add_argument("--exclude", action="store_true", help="Drop matching nodes instead of keeping them")
    p.add_argument(
        "--filter-declarations",
        action="store_true",
        help="Match --filter against declaration names instead of paths",
    )

    # Queries
    p.add_argument("--search", help="Search nodes and links for this text")
    p.add_argument("--max-results", type=int, default=0, help="Search result cap (0 = config default)")
    p.add_argument("--select-node", help="Print entities connected to this node id")
    p.add_argument("--select-link", help="Print endpoints of this link id (source-target)")
    p.add_argument("--depth", type=int, default=0, help="With --select-node: print the N-hop neighborhood")
    return p.parse_args(argv)


def _mapping_from_args(args: argparse.Namespace) -> Optional[PropertyMapping]:
    if not (args.node_id_prop and args.source_prop and args.target_prop):
        return None
    return PropertyMapping(
        node_id=args.node_id_prop,
        link_source=args.source_prop,
        link_target=args.target_prop,
        link_collection=args.link_collection,
    )


# ──────────────────────────────────────────────────────────────────────────────
# Main orchestration
# ──────────────────────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    base_dir = resolve_base_dir(args.graph_name, args.data_location, create=True)

    config = load_analysis_config(base_dir) if base_dir is not None else DEFAULT_CONFIG

    start_time = time.time()

    if args.sample:
        log("📥 Loading bundled sample graph …")
        graph = load_sample_graph()
        graph_label = "sample"
    else:
        if not args.input:
            raise SystemExit("Please provide --input or --sample.")
        input_path = Path(args.input)
        log(f"📥 Loading graph from {input_path}")
        try:
            graph = load_graph(input_path, _mapping_from_args(args))
        except FileNotFoundError:
            raise SystemExit(f"❌ Graph file not found: {input_path}")
        except GraphFormatError as e:
            raise SystemExit(f"❌ {e}")
        graph_label = args.graph_name or (base_dir.name if base_dir else input_path.stem)

    print(f"   Loaded {len(graph.nodes)} nodes and {len(graph.links)} links.")

    if args.filter.strip():
        graph = apply_node_filter(
            graph,
            NodeFilter(
                text=args.filter,
                include_mode=not args.exclude,
                filter_declarations=args.filter_declarations,
            ),
        )
        mode = "excluding" if args.exclude else "keeping"
        print(f"🔎 Filter {mode} '{args.filter}': {len(graph.nodes)} nodes, {len(graph.links)} links remain.")

    # Structure
    print("🔗 Structural analysis …")
    insights = analyze_graph_structure(graph, config=config)
    largest = insights.largest_component.size if insights.largest_component else 0
    print(
        f"   Components: {len(insights.connected_components)} | "
        f"Largest: {largest} | "
        f"Isolated: {len(insights.isolated_nodes)} | "
        f"Communities: {len(insights.communities)}"
    )
    print(f"   Average degree: {insights.average_degree:.2f} | Density: {insights.density:.3f}")
    for line in insights_summary(insights):
        print(f"   {line}")

    if insights.hub_nodes:
        print("   Top hubs:")
        for i, hub in enumerate(insights.hub_nodes[:5], start=1):
            print(f"   {i:>2}. {hub.id} ({hub.degree})")

    # Queries
    if args.search:
        limit = args.max_results or config.max_search_results
        results = search_graph_entities(graph, args.search, max_results=limit)
        print(f"🔍 Search '{args.search}': {len(results)} result(s)")
        for r in results:
            print(f"   [{r.type}] {r.display_text}  ({r.matched_property}: {r.matched_value})")

    if args.select_node:
        connected = find_connected_entities(graph, node_id=args.select_node)
        print(f"🎯 {args.select_node} is connected to {len(connected)} node(s): {', '.join(sorted(connected))}")
        if args.depth > 0:
            hood = find_neighbors_at_depth(graph, args.select_node, args.depth)
            print(f"   Within {args.depth} hop(s): {len(hood)} node(s): {', '.join(sorted(hood))}")
    elif args.select_link:
        endpoints = find_connected_entities(graph, link_id=args.select_link)
        if endpoints:
            print(f"🎯 Link {args.select_link} connects: {', '.join(sorted(endpoints))}")
        else:
            print(f"[WARN] No link with id {args.select_link}")

    if args.no_export:
        print(f"⏱️ Total execution time: {time.time() - start_time:.1f}s")
        return

    outdir = Path(args.outdir) if args.outdir else default_outdir(base_dir)
    outdir.mkdir(parents=True, exist_ok=True)

    # Exports
    G, build_stats = build_nx_graph(graph, node2comm=node_membership(insights.communities))
    print(f"🧱 Export graph: {build_stats.n_nodes} nodes, {build_stats.n_edges} distinct edges.")

    export_clusters_csv(insights.connected_components, outdir / "components.csv")
    export_clusters_csv(insights.communities, outdir / "communities.csv")
    export_membership_csv(insights, outdir / "membership.csv")
    export_hubs_csv(insights, outdir / "hubs.csv")
    export_insights_json(insights, outdir / "insights.json")
    export_graphml(G, outdir / args.graphml)
    export_pyvis_with_legend(G, outdir / args.viz_html, title=f"{graph_label} dependency graph")

    print("📝 Rendering report …")
    report_md = render_report(
        insights,
        stats=build_stats,
        title=f"{graph_label} Dependency Graph Analysis",
        top_k=args.topk,
    )
    report_path = outdir / "report.md"
    report_path.write_text(report_md, encoding="utf-8")
    print(f"📄 Saved report → {report_path}")

    elapsed = time.time() - start_time
    print(f"⏱️ Total execution time: {elapsed:.1f}s")
    print("✔️ Analysis complete.")


if __name__ == "__main__":
    main()

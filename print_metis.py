#!/usr/bin/env python3
import argparse
import sys
from typing import List, Optional

from graph_loader import load
from metis_convert import BoundsError, ConfigurationError, check_options, convert
from metis_writer import format_labels, write_metis


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Convert a directed graph to METIS adjacency-list format.")
    ap.add_argument("-g", "--graph", required=True, metavar="<string>", help="Graph basename")
    ap.add_argument("-d", "--directed", action="store_true",
                    help="Only output directed edges (without inserting the backwards edge).")
    ap.add_argument("-r", "--remove-degree-zero", action="store_true", help="Remove degree zero nodes.")
    ap.add_argument("-o", "--out", default=None, help="Write to this file instead of stdout.")
    ap.add_argument("-n", "--num-nodes", type=int, default=None,
                    help="Declared node count; ids up to this count without edges become degree-zero nodes.")
    ap.add_argument("--labels-out", default=None,
                    help="Write the source label of each METIS vertex, one per line, to this file.")
    ap.add_argument("--keep-external-targets", action="store_true",
                    help="JSON input: keep edge targets that are not keys in the JSON.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Report progress on stderr.")
    args = ap.parse_args(argv)

    try:
        check_options(args.directed, args.remove_degree_zero)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Loading graph {args.graph}...", file=sys.stderr)
    try:
        graph = load(args.graph, keep_external_targets=args.keep_external_targets, num_nodes=args.num_nodes)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.verbose:
        print(f"Nodes: {graph.node_count()}  Arcs: {graph.arc_count()}", file=sys.stderr)

    try:
        metis = convert(graph, directed=args.directed, remove_degree_zero=args.remove_degree_zero)
    except BoundsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Writing METIS graph: {metis.num_nodes} nodes, {metis.num_edges} edges", file=sys.stderr)

    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            write_metis(metis, f)
    else:
        write_metis(metis, sys.stdout)

    if args.labels_out:
        with open(args.labels_out, "w", encoding="utf-8") as f:
            f.writelines(format_labels(metis, graph.labels()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

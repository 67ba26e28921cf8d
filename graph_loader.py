#!/usr/bin/env python3
import json
import os
from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple

import networkx as nx

ADJLIST_SUFFIXES = (".adjlist", ".al")
CANDIDATE_SUFFIXES = (".adjlist", ".al", ".edgelist", ".el", ".txt", ".json")


class Graph:
    """
    Directed graph with a dense node index space [0, node_count()).

    Integer labels are used as indices directly, so ids missing from the
    input show up as degree-zero nodes. Any other labelling is renumbered
    in sorted label order.
    """

    def __init__(self, digraph: nx.DiGraph, num_nodes: Optional[int] = None):
        labels = list(digraph.nodes())
        if all(_is_index(n) for n in labels):
            size = max(labels) + 1 if labels else 0
            self._labels: Optional[List[Hashable]] = None
            self.digraph = digraph
        else:
            ordered = sorted(labels, key=_label_key)
            size = len(ordered)
            self._labels = ordered
            self.digraph = nx.relabel_nodes(digraph, {n: i for i, n in enumerate(ordered)})
        if num_nodes is not None:
            size = max(size, num_nodes)
        self._num_nodes = size

    def node_count(self) -> int:
        return self._num_nodes

    def arc_count(self) -> int:
        return self.digraph.number_of_edges()

    def labels(self) -> List[Hashable]:
        # original label per node index
        if self._labels is None:
            return list(range(self._num_nodes))
        # indices past the relabelled nodes come from a declared node count
        return list(self._labels) + list(range(len(self._labels), self._num_nodes))

    def iter_successors(self) -> Iterator[Tuple[int, List[int]]]:
        G = self.digraph
        for i in range(self._num_nodes):
            if i in G:
                yield i, sorted(G.successors(i))
            else:
                yield i, []


def _is_index(n: Any) -> bool:
    return isinstance(n, int) and not isinstance(n, bool) and n >= 0


def _label_key(n: Any) -> Tuple[str, Any]:
    # numbers order by value, everything else by text, one group per type
    if isinstance(n, (int, float)):
        return type(n).__name__, n
    return type(n).__name__, str(n)


def _int_labels(G: nx.DiGraph) -> nx.DiGraph:
    # text readers hand back string labels; use ints when every label is one
    mapping = {}
    for n in G.nodes():
        try:
            mapping[n] = int(n)
        except (TypeError, ValueError):
            return G
    return nx.relabel_nodes(G, mapping)


def load_crawler_json(path: str, keep_external_targets: bool = False) -> nx.DiGraph:
    with open(path, "r", encoding="utf-8") as f:
        data: Dict[str, Any] = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object of nodes, got {type(data).__name__}")

    G = nx.DiGraph()
    G.add_nodes_from(data.keys())
    for u, payload in data.items():
        if payload is None:
            continue
        if not isinstance(payload, dict):
            raise ValueError(f"{path}: node {u!r} must map to an object, got {type(payload).__name__}")
        following = payload.get("following") or []
        if not isinstance(following, list):
            raise ValueError(f"{path}: 'following' of node {u!r} must be a list")
        for v in following:
            if keep_external_targets or v in data:
                G.add_edge(u, v)
    return G


def resolve_path(basename: str) -> str:
    if os.path.isfile(basename):
        return basename
    tried = [basename]
    for suffix in CANDIDATE_SUFFIXES:
        path = basename + suffix
        if os.path.isfile(path):
            return path
        tried.append(path)
    raise FileNotFoundError(f"No graph found for basename {basename!r} (tried: {', '.join(tried)})")


def read_digraph(path: str, keep_external_targets: bool = False) -> nx.DiGraph:
    suffix = os.path.splitext(path)[1].lower()
    if suffix == ".json":
        G = load_crawler_json(path, keep_external_targets=keep_external_targets)
    elif suffix in ADJLIST_SUFFIXES:
        G = nx.read_adjlist(path, create_using=nx.DiGraph)
    else:
        G = nx.read_edgelist(path, create_using=nx.DiGraph, data=False)
    return _int_labels(G)


def load(basename: str, keep_external_targets: bool = False, num_nodes: Optional[int] = None) -> Graph:
    G = read_digraph(resolve_path(basename), keep_external_targets=keep_external_targets)
    return Graph(G, num_nodes=num_nodes)

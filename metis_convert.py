#!/usr/bin/env python3
from typing import Iterable, List, NamedTuple, Optional, Tuple


class ConfigurationError(ValueError):
    """Conversion options that cannot be combined."""


class BoundsError(IndexError):
    """A node or target index outside the adjacency table."""


class MetisGraph(NamedTuple):
    num_nodes: int
    num_edges: int
    adjacency: List[List[int]]
    # original index -> compacted index, only set when degree-zero nodes are removed
    index_mapping: Optional[List[int]] = None


def check_options(directed: bool, remove_degree_zero: bool) -> None:
    if directed and remove_degree_zero:
        raise ConfigurationError("-d and -r are not compatible.")


def check_in_range(index: int, size: int) -> None:
    if not 0 <= index < size:
        raise BoundsError(f"size mismatch: index {index} outside adjacency table of {size} nodes")


def build_adjacency(
    num_nodes: int,
    successor_lists: Iterable[Tuple[int, Iterable[int]]],
    directed: bool = False,
) -> Tuple[List[List[int]], int]:
    """
    Build per-node adjacency lists in a single pass over `successor_lists`.

    In directed mode each list is the node's sorted successors. Otherwise
    every edge is mirrored exactly once and self-loops are dropped; the
    second return value counts the undirected edges inserted.

    Nodes must arrive in ascending index order. Node i's list then starts
    with the entries appended by earlier nodes, all < i and ascending, which
    is the prefix the duplicate scan walks with a cursor that never resets.
    """
    adjacency: List[List[int]] = [[] for _ in range(num_nodes)]
    undirected_edges = 0

    for i, successors in successor_lists:
        check_in_range(i, num_nodes)
        outgoing = sorted(successors)

        if directed:
            for t in outgoing:
                check_in_range(t, num_nodes)
            adjacency[i] = outgoing
            continue

        own = adjacency[i]
        inherited = len(own)
        j = 0
        previous = None
        for t in outgoing:
            check_in_range(t, num_nodes)
            if t == previous:
                continue
            previous = t

            if t > i:
                own.append(t)
                adjacency[t].append(i)
                undirected_edges += 1
            elif t < i:
                while j < inherited and own[j] < t:
                    j += 1
                if j == inherited or own[j] != t:
                    own.append(t)
                    adjacency[t].append(i)
                    undirected_edges += 1

    if not directed:
        for neighbors in adjacency:
            neighbors.sort()

    return adjacency, undirected_edges


def compaction_map(adjacency: List[List[int]]) -> Tuple[List[int], int]:
    # each index maps to the number of non-empty lists before it
    mapping: List[int] = []
    new_index = 0
    for neighbors in adjacency:
        mapping.append(new_index)
        if neighbors:
            new_index += 1
    return mapping, new_index


def convert(graph, directed: bool = False, remove_degree_zero: bool = False) -> MetisGraph:
    """
    Turn a loaded graph (node_count / arc_count / iter_successors) into METIS form.

    Header edge count is the source arc count in directed mode and the
    number of mirrored edges otherwise.
    """
    check_options(directed, remove_degree_zero)

    num_nodes = graph.node_count()
    adjacency, undirected_edges = build_adjacency(num_nodes, graph.iter_successors(), directed=directed)

    index_mapping = None
    if remove_degree_zero:
        index_mapping, num_nodes = compaction_map(adjacency)

    num_edges = graph.arc_count() if directed else undirected_edges
    return MetisGraph(num_nodes, num_edges, adjacency, index_mapping)

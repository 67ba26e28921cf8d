#!/usr/bin/env python3
from typing import Hashable, Iterator, Sequence, TextIO

from metis_convert import MetisGraph


def format_metis(metis: MetisGraph) -> Iterator[str]:
    """
    Yield METIS adjacency-list lines: "<nodes> <edges>" then one line per node,
    neighbors 1-indexed. With a compaction map, empty nodes get no line at all.
    """
    yield f"{metis.num_nodes} {metis.num_edges}\n"

    mapping = metis.index_mapping
    for neighbors in metis.adjacency:
        if mapping is None:
            targets = neighbors
        elif neighbors:
            targets = [mapping[t] for t in neighbors]
        else:
            continue
        # metis indices start at 1
        yield " ".join(str(t + 1) for t in targets) + "\n"


def write_metis(metis: MetisGraph, out: TextIO) -> None:
    for line in format_metis(metis):
        out.write(line)


def format_labels(metis: MetisGraph, labels: Sequence[Hashable]) -> Iterator[str]:
    # line k holds the source label of METIS vertex k, in the same order as format_metis
    for neighbors, label in zip(metis.adjacency, labels):
        if metis.index_mapping is not None and not neighbors:
            continue
        yield f"{label}\n"

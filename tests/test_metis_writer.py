import io

from metis_convert import MetisGraph
from metis_writer import format_labels, format_metis, write_metis


def test_undirected_lines_are_one_indexed():
    metis = MetisGraph(4, 3, [[1, 2], [0, 2], [0, 1], []])
    assert "".join(format_metis(metis)) == "4 3\n2 3\n1 3\n1 2\n\n"


def test_compacted_output_skips_empty_nodes_and_remaps():
    metis = MetisGraph(2, 1, [[2], [], [0]], index_mapping=[0, 1, 1])
    assert list(format_metis(metis)) == ["2 1\n", "2\n", "1\n"]


def test_write_metis_to_stream():
    out = io.StringIO()
    write_metis(MetisGraph(3, 3, [[1], [2], [0]]), out)
    assert out.getvalue() == "3 3\n2\n3\n1\n"


def test_empty_graph_writes_only_header():
    assert list(format_metis(MetisGraph(0, 0, []))) == ["0 0\n"]


def test_labels_follow_retained_vertices():
    metis = MetisGraph(2, 1, [[2], [], [0]], index_mapping=[0, 1, 1])
    assert list(format_labels(metis, ["a", "b", "c"])) == ["a\n", "c\n"]
    assert list(format_labels(metis._replace(index_mapping=None), ["a", "b", "c"])) == ["a\n", "b\n", "c\n"]

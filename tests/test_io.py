import io

import networkx as nx
import pytest

from mstsolve.errors import GraphFormatError
from mstsolve.graph import WeightedGraph
from mstsolve.io import parse_text, read_graph, text_to_bin, write_graph
from mstsolve.nx_utils import from_networkx, hypercube_idx, random_graph, to_networkx


def test_parse_header_on_one_line():
    g = parse_text(io.StringIO("3 2\n0 1 4\n1 2 -0.5\n"))
    assert g.vertex_count == 3
    assert [tuple(e) for e in g.edges] == [(0, 1, 4.0), (1, 2, -0.5)]


def test_parse_header_on_two_lines():
    g = parse_text(io.StringIO("8\n2\n4 5 0.35\n4 7 0.37\n"))
    assert g.vertex_count == 8
    assert g.edge_count == 2


@pytest.mark.parametrize(
    "text, lineno",
    [
        ("3 2\n0 1 4\n", None),
        ("3 1\n0 x 4\n", 2),
        ("3 1\n0 3 4\n", 2),
        ("3 1\n0 1 nan\n", 2),
        ("3 1\n0 1 2\n1 2 3\n", 3),
        ("0 0\n", None),
    ],
)
def test_malformed_text(text, lineno):
    with pytest.raises(GraphFormatError) as excinfo:
        parse_text(io.StringIO(text))
    assert excinfo.value.lineno == lineno


def test_text_file_round_trip(tmp_path):
    g = WeightedGraph(4, [(0, 1, 3), (1, 2, 0.25), (3, 3, -1)])
    path = tmp_path / "g.txt"
    write_graph(g, path)
    assert path.read_text() == "4 3\n0 1 3\n1 2 0.25\n3 3 -1\n"
    assert [tuple(e) for e in read_graph(path).edges] == [tuple(e) for e in g.edges]


def test_binary_conversion(tmp_path):
    src = tmp_path / "g.txt"
    dst = tmp_path / "g.bin"
    src.write_text("3 2\n0 1 7\n1 2 -2\n")
    text_to_bin(src, dst)

    data = dst.read_bytes()
    assert len(data) == 4 * (2 + 3 * 2)
    assert data[:8] == (3).to_bytes(4, "little") + (2).to_bytes(4, "little")
    g = read_graph(dst, binary=True)
    assert [tuple(e) for e in g.edges] == [(0, 1, 7.0), (1, 2, -2.0)]


def test_binary_float_weights(tmp_path):
    g = WeightedGraph(2, [(0, 1, 0.125)])
    path = tmp_path / "g.bin"
    with pytest.raises(ValueError):
        write_graph(g, path, binary=True)
    write_graph(g, path, binary=True, float_weights=True)
    assert read_graph(path, binary=True, float_weights=True).edges[0].weight == 0.125


def test_truncated_binary(tmp_path):
    path = tmp_path / "g.bin"
    path.write_bytes((3).to_bytes(4, "little") + (1).to_bytes(4, "little") + b"\x00\x00")
    with pytest.raises(GraphFormatError):
        read_graph(path, binary=True)


def test_networkx_bridge():
    g = from_networkx(nx.hypercube_graph(3), nodename_to_idx=hypercube_idx)
    assert g.vertex_count == 8
    assert g.edge_count == 12
    assert all(e.weight == 1.0 for e in g.edges)

    multi = to_networkx(WeightedGraph(2, [(0, 1, 1.0), (0, 1, 2.0)]))
    assert multi.number_of_edges() == 2
    assert sorted(w for _, _, w in multi.edges(data="weight")) == [1.0, 2.0]


def test_from_networkx_reads_weight_attribute():
    nxg = nx.Graph()
    nxg.add_edge("a", "b", cost=2.5)
    nxg.add_edge("b", "c")
    g = from_networkx(nxg, weight="cost", default=9.0)
    assert [tuple(e) for e in g.edges] == [(0, 1, 2.5), (1, 2, 9.0)]


def test_random_graph_shape():
    g = random_graph(10, density=0.5, min_weight=3, max_weight=4, seed=1)
    assert g.edge_count == 22
    assert len({(e.u, e.v) for e in g.edges}) == 22
    assert all(e.u < e.v and 3 <= e.weight <= 4 for e in g.edges)
    assert random_graph(1, seed=0).edge_count == 0
    with pytest.raises(ValueError):
        random_graph(5, density=1.5)


def test_binary_write_checks_weights_before_opening(tmp_path):
    g = WeightedGraph(3, [(0, 1, 7), (1, 2, 0.5)])
    path = tmp_path / "g.bin"
    with pytest.raises(ValueError):
        write_graph(g, path, binary=True)
    assert not path.exists()

'''
Reading and writing graphs.

Text format:

<nvertices> <nedges>
<v1> <v2> <w>
<v1> <v2> <w>
...

The reader only looks at whitespace-separated tokens, so a header split over
two lines (V, then E) reads the same way.

Binary format: the same fields as little-endian 4-byte unsigned ints, except
weights, which are 4-byte signed ints, or 8-byte doubles when
``float_weights`` is set.
'''
import os
import struct
from typing import BinaryIO, Iterator

from .edge import Edge
from .errors import GraphFormatError, MSTError
from .graph import WeightedGraph

PathLike = str | os.PathLike

INT_SIZE = 4
DOUBLE = struct.Struct('<d')


def _tokens(f) -> Iterator[tuple[int, str]]:
    for lineno, line in enumerate(f, start=1):
        for token in line.split():
            yield lineno, token


def _parse(tokens: Iterator[tuple[int, str]], kind, what: str) -> tuple[int, int | float]:
    try:
        lineno, token = next(tokens)
    except StopIteration:
        raise GraphFormatError(f'unexpected end of file while reading {what}') from None
    try:
        return lineno, kind(token)
    except ValueError:
        raise GraphFormatError(f'bad {what}: {token!r}', lineno) from None


def _build(nvertices: int, edges: list[Edge], lineno: int | None = None) -> WeightedGraph:
    try:
        return WeightedGraph(nvertices, edges)
    except (MSTError, ValueError) as exc:
        raise GraphFormatError(str(exc), lineno) from exc


def parse_text(f) -> WeightedGraph:
    tokens = _tokens(f)
    _, nvertices = _parse(tokens, int, 'vertex count')
    _, nedges = _parse(tokens, int, 'edge count')
    if nedges < 0:
        raise GraphFormatError(f'edge count must be non-negative, got {nedges}')

    edges = []
    for _ in range(nedges):
        lineno, u = _parse(tokens, int, 'vertex')
        _, v = _parse(tokens, int, 'vertex')
        _, w = _parse(tokens, float, 'weight')
        for vertex in (u, v):
            if not 0 <= vertex < max(nvertices, 0):
                raise GraphFormatError(f'vertex {vertex} is not in [0, {nvertices})', lineno)
        try:
            edges.append(Edge(u, v, w))
        except ValueError as exc:
            raise GraphFormatError(str(exc), lineno) from None

    extra = next(tokens, None)
    if extra is not None:
        raise GraphFormatError(f'trailing data after {nedges} edges: {extra[1]!r}', extra[0])
    return _build(nvertices, edges)


def _read_int(f: BinaryIO, signed: bool = False) -> int:
    data = f.read(INT_SIZE)
    if len(data) != INT_SIZE:
        raise GraphFormatError('unexpected end of binary graph file')
    return int.from_bytes(data, byteorder='little', signed=signed)


def parse_bin(f: BinaryIO, float_weights: bool = False) -> WeightedGraph:
    nvertices = _read_int(f)
    nedges = _read_int(f)
    edges = []
    for _ in range(nedges):
        u = _read_int(f)
        v = _read_int(f)
        if float_weights:
            data = f.read(DOUBLE.size)
            if len(data) != DOUBLE.size:
                raise GraphFormatError('unexpected end of binary graph file')
            w = DOUBLE.unpack(data)[0]
        else:
            w = _read_int(f, signed=True)
        try:
            edges.append(Edge(u, v, w))
        except ValueError as exc:
            raise GraphFormatError(str(exc)) from None
    return _build(nvertices, edges)


def read_graph(fname: PathLike, binary: bool = False, float_weights: bool = False) -> WeightedGraph:
    if binary:
        with open(fname, 'rb') as f:
            return parse_bin(f, float_weights=float_weights)
    with open(fname, 'r') as f:
        return parse_text(f)


def _format_weight(w: float) -> str:
    return str(int(w)) if w.is_integer() else repr(w)


def write_graph(graph: WeightedGraph, fname: PathLike, binary: bool = False, float_weights: bool = False) -> None:
    if binary:
        if not float_weights:
            for edge in graph.edges:
                if not edge.weight.is_integer():
                    raise ValueError(f'weight of {edge!r} is not integral; write with float_weights=True')
        to_bin = lambda num: int(num).to_bytes(length=INT_SIZE, byteorder='little')
        with open(fname, 'wb') as f:
            f.write(to_bin(graph.vertex_count))
            f.write(to_bin(graph.edge_count))
            for edge in graph.edges:
                f.write(to_bin(edge.u))
                f.write(to_bin(edge.v))
                if float_weights:
                    f.write(DOUBLE.pack(edge.weight))
                else:
                    f.write(int(edge.weight).to_bytes(length=INT_SIZE, byteorder='little', signed=True))
    else:
        with open(fname, 'w') as f:
            f.write(f'{graph.vertex_count} {graph.edge_count}\n')
            for edge in graph.edges:
                f.write(f'{edge.u} {edge.v} {_format_weight(edge.weight)}\n')


def text_to_bin(infile_name: PathLike, outfile_name: PathLike, float_weights: bool = False) -> None:
    graph = read_graph(infile_name)
    write_graph(graph, outfile_name, binary=True, float_weights=float_weights)

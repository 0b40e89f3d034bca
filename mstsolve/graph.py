from typing import Iterable, Iterator

from .edge import Edge
from .errors import InvalidSizeError, VertexOutOfRangeError
from .union_find import DisjointSet


class WeightedGraph:
    '''Immutable undirected edge-weighted graph on vertices ``0..n-1``.

    Parallel edges and self-loops are kept as given.
    '''

    def __init__(self, nvertices: int, edges: Iterable[Edge | tuple[int, int, float]] = ()) -> None:
        if nvertices < 1:
            raise InvalidSizeError(nvertices)
        self._nvertices = nvertices

        checked = []
        for edge in edges:
            if not isinstance(edge, Edge):
                edge = Edge(*edge)
            for vertex in edge.endpoints():
                if not 0 <= vertex < nvertices:
                    raise VertexOutOfRangeError(vertex, nvertices)
            checked.append(edge)
        self._edges = tuple(checked)

        self._adj: list[list[Edge]] = [[] for _ in range(nvertices)]
        for edge in self._edges:
            self._adj[edge.u].append(edge)
            if not edge.is_self_loop():
                self._adj[edge.v].append(edge)

    @property
    def vertex_count(self) -> int:
        return self._nvertices

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def adjacent(self, vertex: int) -> tuple[Edge, ...]:
        if not 0 <= vertex < self._nvertices:
            raise VertexOutOfRangeError(vertex, self._nvertices)
        return tuple(self._adj[vertex])

    def degree(self, vertex: int) -> int:
        return len(self.adjacent(vertex))

    def component_count(self) -> int:
        ds = DisjointSet(self._nvertices)
        for edge in self._edges:
            ds.union(edge.u, edge.v)
        return ds.count

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self):
        return f'WeightedGraph(nvertices={self._nvertices}, nedges={len(self._edges)})'

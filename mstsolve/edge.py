import math
import operator


class Edge:
    '''An immutable weighted, undirected edge between two vertex indices.

    Edges order by weight only. Equal-weight edges are left unordered here;
    the priority queue settles those ties by insertion order. Equality is
    identity, so parallel edges of a multigraph stay distinct.
    '''

    __slots__ = ('u', 'v', 'weight')

    def __init__(self, u: int, v: int, weight: float) -> None:
        weight = float(weight)
        if not math.isfinite(weight):
            raise ValueError(f'edge weight must be finite, got {weight}')
        object.__setattr__(self, 'u', operator.index(u))
        object.__setattr__(self, 'v', operator.index(v))
        object.__setattr__(self, 'weight', weight)

    @classmethod
    def from_line(cls, s: str) -> 'Edge':
        parts = s.split()
        if len(parts) != 3:
            raise ValueError(f'expected "<u> <v> <weight>", got {s.strip()!r}')
        return Edge(int(parts[0]), int(parts[1]), float(parts[2]))

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def either(self) -> int:
        return self.u

    def other(self, vertex: int) -> int:
        if vertex == self.u:
            return self.v
        if vertex == self.v:
            return self.u
        raise ValueError(f'{vertex} is not an endpoint of {self}')

    def endpoints(self) -> tuple[int, int]:
        return self.u, self.v

    def is_self_loop(self) -> bool:
        return self.u == self.v

    def __lt__(self, other: 'Edge') -> bool:
        return self.weight < other.weight

    def __le__(self, other: 'Edge') -> bool:
        return self.weight <= other.weight

    def __gt__(self, other: 'Edge') -> bool:
        return self.weight > other.weight

    def __ge__(self, other: 'Edge') -> bool:
        return self.weight >= other.weight

    def __iter__(self):
        return iter((self.u, self.v, self.weight))

    def __reduce__(self):
        return (Edge, (self.u, self.v, self.weight))

    def __repr__(self):
        return f'({self.u}, {self.v}, {self.weight})'

    def __str__(self):
        return f'{self.u}-{self.v} {self.weight:.5f}'

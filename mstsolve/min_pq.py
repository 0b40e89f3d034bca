import itertools
from heapq import heapify, heappop, heappush
from typing import Iterable, Iterator

from .edge import Edge
from .errors import UnderflowError


class MinPQ:
    '''Binary min-heap of edges keyed on weight.

    Entries are ``(weight, seq, edge)`` where ``seq`` is a running insertion
    counter, so equal weights come out in the order they went in.
    '''

    def __init__(self, edges: Iterable[Edge] = ()) -> None:
        self._counter = itertools.count()
        self._heap = [(e.weight, next(self._counter), e) for e in edges]
        heapify(self._heap)

    def insert(self, edge: Edge) -> None:
        heappush(self._heap, (edge.weight, next(self._counter), edge))

    def extract_min(self) -> Edge:
        if not self._heap:
            raise UnderflowError('extract_min() on an empty priority queue')
        return heappop(self._heap)[2]

    def peek(self) -> Edge:
        if not self._heap:
            raise UnderflowError('peek() on an empty priority queue')
        return self._heap[0][2]

    def is_empty(self) -> bool:
        return not self._heap

    def size(self) -> int:
        return len(self._heap)

    def drain(self) -> Iterator[Edge]:
        while self._heap:
            yield self.extract_min()

    __len__ = size

    def __bool__(self) -> bool:
        return bool(self._heap)

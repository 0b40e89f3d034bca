import logging
from typing import Iterator

from .check import CheckMode, apply_check
from .events import EdgeEvent, EventKind, Listener
from .graph import WeightedGraph
from .min_pq import MinPQ
from .result import MSTResult
from .union_find import DisjointSet

logger = logging.getLogger(__name__)


class KruskalMST:
    '''Minimum spanning tree (or forest) by Kruskal's algorithm.

    Edges come out of a :class:`MinPQ` lightest first; an edge is kept when
    its endpoints are not yet connected in a :class:`DisjointSet`. Weights
    may be zero or negative. On a disconnected graph the loop runs out of
    edges early and the result is a minimum spanning forest.
    '''

    name = 'kruskal'

    def __init__(self, check: CheckMode = CheckMode.OFF) -> None:
        self.check = CheckMode(check)

    def events(self, graph: WeightedGraph) -> Iterator[EdgeEvent]:
        pq = MinPQ()
        for e in graph.edges:
            pq.insert(e)

        uf = DisjointSet(graph.vertex_count)
        taken = 0
        weight = 0.0

        # perform kruskals
        while not pq.is_empty() and taken < graph.vertex_count - 1:
            e = pq.extract_min()
            v = e.either()
            w = e.other(v)
            if not uf.connected(v, w):
                uf.union(v, w)
                taken += 1
                weight += e.weight
                logger.debug('accepted %s', e)
                yield EdgeEvent(EventKind.ACCEPTED, e, weight)
            else:
                logger.debug('rejected %s', e)
                yield EdgeEvent(EventKind.REJECTED, e, weight)

    def compute(self, graph: WeightedGraph, listener: Listener = None) -> MSTResult:
        result = MSTResult.collect(self.events(graph), listener)
        logger.info('kruskal: %d edges, total weight %f', len(result), result.total_weight)
        apply_check(self.check, graph, result)
        return result

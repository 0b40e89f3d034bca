import logging
from typing import Iterator

from .check import CheckMode, apply_check
from .events import EdgeEvent, EventKind, Listener
from .graph import WeightedGraph
from .min_pq import MinPQ
from .result import MSTResult

logger = logging.getLogger(__name__)


class LazyPrimMST:
    '''Lazy Prim: grow a tree from a root, leaving stale edges in the queue.

    A new tree is started from every vertex not reached yet, so a
    disconnected graph yields a spanning forest.
    '''

    name = 'prim'

    def __init__(self, check: CheckMode = CheckMode.OFF) -> None:
        self.check = CheckMode(check)

    def events(self, graph: WeightedGraph) -> Iterator[EdgeEvent]:
        marked = [False] * graph.vertex_count
        weight = 0.0

        for root in range(graph.vertex_count):
            if marked[root]:
                continue

            pq = MinPQ()
            marked[root] = True
            for e in graph.adjacent(root):
                if not marked[e.other(root)]:
                    pq.insert(e)

            while not pq.is_empty():
                e = pq.extract_min()
                v = e.either()
                w = e.other(v)
                if marked[v] and marked[w]:
                    # both ends joined the tree after e was queued
                    yield EdgeEvent(EventKind.REJECTED, e, weight)
                    continue

                weight += e.weight
                yield EdgeEvent(EventKind.ACCEPTED, e, weight)

                new = w if marked[v] else v
                marked[new] = True
                for f in graph.adjacent(new):
                    if not marked[f.other(new)]:
                        pq.insert(f)

    def compute(self, graph: WeightedGraph, listener: Listener = None) -> MSTResult:
        result = MSTResult.collect(self.events(graph), listener)
        logger.info('prim: %d edges, total weight %f', len(result), result.total_weight)
        apply_check(self.check, graph, result)
        return result

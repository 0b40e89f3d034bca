import logging
from typing import Iterator

from .check import CheckMode, apply_check
from .events import EdgeEvent, EventKind, Listener
from .graph import WeightedGraph
from .result import MSTResult
from .union_find import DisjointSet

logger = logging.getLogger(__name__)


class BoruvkaMST:
    '''Borůvka rounds: every component takes its cheapest outgoing edge.

    Ties go to the edge that appears first in the graph, which keeps the
    choice of edges a strict total order and the rounds cycle-free.
    '''

    name = 'boruvka'

    def __init__(self, check: CheckMode = CheckMode.OFF) -> None:
        self.check = CheckMode(check)

    def events(self, graph: WeightedGraph) -> Iterator[EdgeEvent]:
        ds = DisjointSet(graph.vertex_count)
        edges = graph.edges
        live = [i for i, e in enumerate(edges) if not e.is_self_loop()]
        weight = 0.0
        rounds = 0

        while live:
            rounds += 1
            best_edge_index: dict[int, int] = {}
            for i in live:
                e = edges[i]
                for root in (ds.find(e.u), ds.find(e.v)):
                    best = best_edge_index.get(root)
                    if best is None or e.weight < edges[best].weight:
                        best_edge_index[root] = i

            for i in sorted(set(best_edge_index.values())):
                e = edges[i]
                if ds.union(e.u, e.v):
                    weight += e.weight
                    yield EdgeEvent(EventKind.ACCEPTED, e, weight)

            # drop edges that now sit inside a single component
            live = [i for i in live if ds.find(edges[i].u) != ds.find(edges[i].v)]
            logger.debug('boruvka round %d: %d components, %d edges left', rounds, ds.count, len(live))

    def compute(self, graph: WeightedGraph, listener: Listener = None) -> MSTResult:
        result = MSTResult.collect(self.events(graph), listener)
        logger.info('boruvka: %d edges, total weight %f', len(result), result.total_weight)
        apply_check(self.check, graph, result)
        return result

'''Independent optimality checks for a computed spanning forest.

None of this is needed to compute an MST. It re-derives correctness from
first principles, so it is slow on purpose (roughly E * V * lg* V for the
cut conditions) and meant for tests and opt-in runtime checks.
'''

import logging
from dataclasses import dataclass
from enum import Enum

from .edge import Edge
from .errors import OptimalityError
from .graph import WeightedGraph
from .result import MSTResult
from .union_find import DisjointSet

logger = logging.getLogger(__name__)

FLOATING_POINT_EPSILON = 1e-12


class ViolationKind(Enum):
    WEIGHT_MISMATCH = 'weight mismatch'
    CYCLE_DETECTED = 'cycle detected'
    NOT_SPANNING = 'not spanning'
    CUT_OPTIMALITY_VIOLATED = 'cut optimality violated'


@dataclass(frozen=True)
class Violation:
    kind: ViolationKind
    message: str
    edge: Edge | None = None
    other: Edge | None = None

    def __str__(self):
        return f'{self.kind.value}: {self.message}'


class CheckMode(Enum):
    OFF = 'off'
    WARN = 'warn'
    STRICT = 'strict'


def _check_weight(result: MSTResult) -> list[Violation]:
    total = sum(e.weight for e in result.edges)
    if abs(total - result.total_weight) > FLOATING_POINT_EPSILON:
        return [Violation(ViolationKind.WEIGHT_MISMATCH,
                          f'weight of edges does not equal total_weight: {total:f} vs. {result.total_weight:f}')]
    return []


def _replay(graph: WeightedGraph, edges, skip: Edge | None = None) -> tuple[DisjointSet, list[Violation]]:
    uf = DisjointSet(graph.vertex_count)
    cycles = []
    for e in edges:
        if e is skip:
            continue
        if not uf.union(e.u, e.v):
            cycles.append(Violation(ViolationKind.CYCLE_DETECTED, f'edge {e} closes a cycle', edge=e))
    return uf, cycles


def _check_spanning(graph: WeightedGraph, uf: DisjointSet) -> list[Violation]:
    return [Violation(ViolationKind.NOT_SPANNING, f'edge {e} joins two components of the forest', edge=e)
            for e in graph.edges if not uf.connected(e.u, e.v)]


def _check_cuts(graph: WeightedGraph, result: MSTResult) -> list[Violation]:
    violations = []
    for e in result.edges:
        # all edges in the forest except e
        uf, _ = _replay(graph, result.edges, skip=e)

        # e must be a minimum weight edge crossing the cut
        for f in graph.edges:
            if f.weight < e.weight and not uf.connected(f.u, f.v):
                violations.append(Violation(ViolationKind.CUT_OPTIMALITY_VIOLATED,
                                            f'edge {f} is lighter than {e} across its cut',
                                            edge=f, other=e))
    return violations


def verify(graph: WeightedGraph, result: MSTResult) -> list[Violation]:
    '''Return every optimality violation of ``result``; empty means optimal.

    The weight, acyclicity, spanning and cut-optimality checks run
    independently of each other.
    '''
    violations = _check_weight(result)

    uf, cycles = _replay(graph, result.edges)
    violations.extend(cycles)
    violations.extend(_check_spanning(graph, uf))
    violations.extend(_check_cuts(graph, result))
    return violations


def check(graph: WeightedGraph, result: MSTResult) -> None:
    violations = verify(graph, result)
    if violations:
        raise OptimalityError(violations)


def apply_check(mode: CheckMode, graph: WeightedGraph, result: MSTResult) -> None:
    if mode is CheckMode.OFF:
        return
    violations = verify(graph, result)
    if not violations:
        logger.debug('optimality check passed for %d edges', len(result))
        return
    if mode is CheckMode.STRICT:
        raise OptimalityError(violations)
    for v in violations:
        logger.warning('MST optimality check: %s', v)

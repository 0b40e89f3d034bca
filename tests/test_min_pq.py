import random

import pytest

from mstsolve.edge import Edge
from mstsolve.errors import UnderflowError
from mstsolve.min_pq import MinPQ


def test_extracts_lightest_first():
    pq = MinPQ()
    for w in [5.0, -1.0, 3.0, 0.0]:
        pq.insert(Edge(0, 1, w))
    assert pq.size() == 4
    assert [pq.extract_min().weight for _ in range(4)] == [-1.0, 0.0, 3.0, 5.0]
    assert pq.is_empty()


def test_empty_queue_underflows():
    pq = MinPQ()
    with pytest.raises(UnderflowError):
        pq.extract_min()
    with pytest.raises(UnderflowError):
        pq.peek()


def test_ties_come_out_in_insertion_order():
    edges = [Edge(i, i + 1, 2.0) for i in range(6)]
    pq = MinPQ()
    for e in edges:
        pq.insert(e)
    assert [pq.extract_min() for _ in edges] == edges


def test_heapified_constructor_keeps_ties_stable():
    edges = [Edge(0, 1, 1.0), Edge(1, 2, 0.5), Edge(2, 3, 1.0), Edge(3, 4, 0.5)]
    pq = MinPQ(edges)
    assert list(pq.drain()) == [edges[1], edges[3], edges[0], edges[2]]
    assert len(pq) == 0 and not pq


def test_interleaved_operations_never_decrease():
    rng = random.Random(3)
    pq = MinPQ()
    extracted = []
    for _ in range(300):
        if pq and rng.random() < 0.4:
            extracted.append(pq.extract_min().weight)
        else:
            # keep inserts above everything already extracted
            floor = extracted[-1] if extracted else 0.0
            pq.insert(Edge(0, 1, floor + rng.uniform(0, 10)))
    extracted.extend(e.weight for e in pq.drain())
    assert extracted == sorted(extracted)


def test_peek_does_not_remove():
    pq = MinPQ([Edge(0, 1, 4.0), Edge(0, 2, 1.0)])
    assert pq.peek().weight == 1.0
    assert pq.size() == 2

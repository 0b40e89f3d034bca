import networkx as nx
import pytest

from mstsolve.boruvka import BoruvkaMST
from mstsolve.check import CheckMode, verify
from mstsolve.errors import UnknownStrategyError
from mstsolve.events import EventKind
from mstsolve.graph import WeightedGraph
from mstsolve.kruskal import KruskalMST
from mstsolve.nx_utils import arbitrary_weight, from_networkx, random_graph
from mstsolve.prim import LazyPrimMST
from mstsolve.strategy import STRATEGIES, get_strategy


@pytest.mark.parametrize("name, cls", [("kruskal", KruskalMST), ("prim", LazyPrimMST), ("BORUVKA", BoruvkaMST)])
def test_get_strategy_builds_by_name(name, cls):
    strategy = get_strategy(name, check=CheckMode.WARN)
    assert isinstance(strategy, cls)
    assert strategy.check is CheckMode.WARN


def test_unknown_strategy():
    with pytest.raises(UnknownStrategyError) as excinfo:
        get_strategy("dijkstra")
    assert "kruskal" in str(excinfo.value)
    assert isinstance(excinfo.value, KeyError)


@pytest.mark.parametrize("name", sorted(STRATEGIES))
@pytest.mark.parametrize(
    "nvertices, edges, weight, count",
    [
        (4, [(0, 1, 1.0), (1, 2, 2.0), (2, 3, 3.0), (0, 3, 4.0)], 6.0, 3),
        (4, [(0, 1, 5.0), (2, 3, 5.0)], 10.0, 2),
        (2, [(1, 1, 0.5), (0, 1, 1.0)], 1.0, 1),
        (3, [(0, 1, -3.0), (1, 2, 1.0)], -2.0, 2),
        (3, [(0, 1, 2.0), (0, 1, 1.0), (1, 2, 0.0), (1, 2, 0.0)], 1.0, 2),
        (5, [], 0.0, 0),
    ],
)
def test_strategies_on_small_graphs(name, nvertices, edges, weight, count):
    g = WeightedGraph(nvertices, edges)
    result = get_strategy(name).compute(g)
    assert result.total_weight == pytest.approx(weight)
    assert len(result) == count
    assert all(not e.is_self_loop() for e in result)
    assert verify(g, result) == []


@pytest.mark.parametrize("seed", range(4))
def test_strategies_agree_on_random_graphs(seed):
    g = random_graph(40, density=0.15, min_weight=1, max_weight=10, seed=seed)
    weights = {name: get_strategy(name).compute(g).total_weight for name in STRATEGIES}
    assert weights["prim"] == pytest.approx(weights["kruskal"])
    assert weights["boruvka"] == pytest.approx(weights["kruskal"])


def test_strategies_on_caveman_forest():
    g = from_networkx(nx.caveman_graph(6, 5), decide_weight=arbitrary_weight(1, 20, seed=4))
    for name in STRATEGIES:
        result = get_strategy(name).compute(g)
        assert len(result) == g.vertex_count - 6
        assert verify(g, result) == []


def test_prim_reports_stale_edges_as_rejected():
    g = WeightedGraph(3, [(0, 1, 1.0), (0, 2, 3.0), (1, 2, 2.0)])
    kinds = [(ev.kind, ev.edge.weight) for ev in LazyPrimMST().events(g)]
    assert kinds == [
        (EventKind.ACCEPTED, 1.0),
        (EventKind.ACCEPTED, 2.0),
        (EventKind.REJECTED, 3.0),
    ]


def test_boruvka_only_emits_acceptances():
    g = random_graph(20, density=0.4, seed=9)
    events = list(BoruvkaMST().events(g))
    assert all(ev.accepted for ev in events)
    assert len(events) == g.vertex_count - g.component_count()

from typing import Protocol

from .boruvka import BoruvkaMST
from .errors import UnknownStrategyError
from .events import Listener
from .graph import WeightedGraph
from .kruskal import KruskalMST
from .prim import LazyPrimMST
from .result import MSTResult


class MSTStrategy(Protocol):
    name: str

    def compute(self, graph: WeightedGraph, listener: Listener = None) -> MSTResult:
        ...


STRATEGIES = {
    KruskalMST.name: KruskalMST,
    LazyPrimMST.name: LazyPrimMST,
    BoruvkaMST.name: BoruvkaMST,
}


def get_strategy(name: str, **options) -> MSTStrategy:
    '''Build the strategy registered under ``name``; ``options`` go to its constructor.'''
    try:
        cls = STRATEGIES[name.lower()]
    except KeyError:
        raise UnknownStrategyError(name, sorted(STRATEGIES)) from None
    return cls(**options)

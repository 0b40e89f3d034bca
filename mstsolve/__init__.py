"""Minimum spanning trees and forests of undirected weighted graphs."""

from .boruvka import BoruvkaMST
from .check import CheckMode, Violation, ViolationKind, check, verify
from .edge import Edge
from .errors import (
    GraphFormatError,
    InvalidSizeError,
    MSTError,
    OptimalityError,
    UnderflowError,
    UnknownStrategyError,
    VertexOutOfRangeError,
)
from .events import EdgeEvent, EventKind
from .graph import WeightedGraph
from .io import read_graph, text_to_bin, write_graph
from .kruskal import KruskalMST
from .min_pq import MinPQ
from .prim import LazyPrimMST
from .result import MSTResult
from .strategy import STRATEGIES, MSTStrategy, get_strategy
from .union_find import DisjointSet

__all__ = [
    "BoruvkaMST",
    "CheckMode",
    "DisjointSet",
    "Edge",
    "EdgeEvent",
    "EventKind",
    "GraphFormatError",
    "InvalidSizeError",
    "KruskalMST",
    "LazyPrimMST",
    "MSTError",
    "MSTResult",
    "MSTStrategy",
    "MinPQ",
    "OptimalityError",
    "STRATEGIES",
    "UnderflowError",
    "UnknownStrategyError",
    "VertexOutOfRangeError",
    "Violation",
    "ViolationKind",
    "WeightedGraph",
    "check",
    "get_strategy",
    "read_graph",
    "text_to_bin",
    "verify",
    "write_graph",
]

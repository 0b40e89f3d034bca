import random
from typing import Any, Callable

import networkx as nx
import numpy as np

from .edge import Edge
from .graph import WeightedGraph


def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rng = random.Random(seed)
    return lambda _a, _b: rng.randint(low, high)


def from_networkx(g: nx.Graph,
                  weight: str='weight',
                  decide_weight: Callable[[Any, Any], float] | None=None,
                  nodename_to_idx: Callable[[Any], int] | None=None,
                  default: float=1.0) -> WeightedGraph:
    '''Convert a networkx graph to a WeightedGraph.

    The weight of each edge comes from ``decide_weight(u, v)`` when given,
    otherwise from its ``weight`` attribute (``default`` if missing). Without
    ``nodename_to_idx``, nodes are numbered in iteration order.
    '''
    if nodename_to_idx is None:
        index = {node: i for i, node in enumerate(g.nodes)}
        nodename_to_idx = index.__getitem__

    edges = []
    for u, v, data in g.edges(data=True):
        if decide_weight is not None:
            w = decide_weight(u, v)
        else:
            w = data.get(weight, default)
        edges.append(Edge(nodename_to_idx(u), nodename_to_idx(v), w))
    return WeightedGraph(g.number_of_nodes(), edges)


def to_networkx(graph: WeightedGraph, weight: str='weight') -> nx.MultiGraph:
    g = nx.MultiGraph()
    g.add_nodes_from(range(graph.vertex_count))
    for edge in graph.edges:
        g.add_edge(edge.u, edge.v, **{weight: edge.weight})
    return g


def random_graph(nvertices: int,
                 density: float=0.5,
                 min_weight: int=1,
                 max_weight: int=100,
                 seed: int | None=None) -> WeightedGraph:
    '''Random simple graph with ``int(density * V * (V-1) / 2)`` edges.

    Weights are integers drawn uniformly from ``[min_weight, max_weight]``.
    '''
    if not 0.0 <= density <= 1.0:
        raise ValueError(f'density must be in [0, 1], got {density}')
    rng = np.random.default_rng(seed)
    total_edges = int(density * nvertices * (nvertices-1) / 2)

    # sample distinct slots of the upper triangle, ensures no self-loops
    iu, ju = np.triu_indices(nvertices, k=1)
    if total_edges == 0:
        return WeightedGraph(nvertices)
    chosen = np.sort(rng.choice(iu.size, size=total_edges, replace=False))
    weights = rng.integers(min_weight, max_weight, endpoint=True, size=total_edges)

    edges = [Edge(int(iu[k]), int(ju[k]), int(w)) for k, w in zip(chosen, weights)]
    return WeightedGraph(nvertices, edges)


def hypercube_idx(node: tuple[int, ...]) -> int:
    return sum(node[-i-1] * 2**i for i in range(len(node)))

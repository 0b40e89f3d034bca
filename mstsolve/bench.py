## Benchmark the MST strategies against each other on generated graphs

import time
from typing import Any, Callable

import networkx as nx

from . import nx_utils
from .graph import WeightedGraph
from .strategy import STRATEGIES, get_strategy

# Which impl is the one being benchmarked against
BASELINE = 'kruskal'

WEIGHT_TOLERANCE = 1e-9


def create_arb_weight_test(g_fxn: Callable[..., nx.Graph],
                           g_args: tuple[Any, ...],
                           min_weight: int,
                           max_weight: int,
                           seed: int,
                           nodename_to_idx: Callable[[Any], int] | None=None) -> Callable[[], WeightedGraph]:
    def inner():
        g = g_fxn(*g_args)
        return nx_utils.from_networkx(g,
                                      decide_weight=nx_utils.arbitrary_weight(min_weight, max_weight, seed),
                                      nodename_to_idx=nodename_to_idx)

    return inner


def default_tests(min_weight: int=1, max_weight: int=1000, seed: int=0) -> dict[str, Callable[[], WeightedGraph]]:
    def make(g_fxn, g_args, nodename_to_idx=None):
        return create_arb_weight_test(g_fxn, g_args, min_weight, max_weight, seed, nodename_to_idx)

    return {
        '2-degree Circulant n=2000': make(nx.circulant_graph, (2000, [1, 2])),
        'Hypercube d=10, n=1024': make(nx.hypercube_graph, (10,), nx_utils.hypercube_idx),
        'Caveman Graph, 50 groups of size k=10, n=500': make(nx.caveman_graph, (50, 10)),
        'Connected Caveman Graph, 50 groups of size k=10, n=500': make(nx.connected_caveman_graph, (50, 10)),
        'Binomial Graph, p=0.01 n=1000': make(nx.fast_gnp_random_graph, (1000, 0.01, seed)),
    }


def run_benchmarks(tests: dict[str, Callable[[], WeightedGraph]],
                   reps: int=3,
                   impls: list[str] | None=None,
                   quiet: bool=False) -> dict[str, dict[str, dict[str, Any]]]:
    impls = impls or list(STRATEGIES)
    all_metrics: dict[str, dict[str, dict[str, Any]]] = {impl: {} for impl in impls}

    for (test_name, test_gen) in tests.items():
        if not quiet:
            print(f'Generating graph for test "{test_name}"...')
        graph = test_gen()

        for impl in impls:
            strategy = get_strategy(impl)
            compute_times = []
            weights = []
            for _ in range(reps):
                start = time.perf_counter()
                result = strategy.compute(graph)
                compute_times.append(time.perf_counter() - start)
                weights.append(result.total_weight)

            metrics: dict[str, Any] = {
                'compute_times': compute_times,
                'avg_compute_time': sum(compute_times)/len(compute_times),
            }
            if max(weights) - min(weights) <= WEIGHT_TOLERANCE:
                metrics['weight'] = weights[0]
            else:
                print(f'!!! Error on {impl}: inconsistent outputs')
            all_metrics[impl][test_name] = metrics

            if not quiet:
                print(f'  {impl}: {metrics["avg_compute_time"]:0.4f}s, weight={metrics.get("weight")}')
        if not quiet:
            print()

    return all_metrics


def inconsistent_tests(all_metrics: dict[str, dict[str, dict[str, Any]]], baseline: str=BASELINE) -> list[tuple[str, str]]:
    bad = []
    for impl, all_tests in all_metrics.items():
        for test, metrics in all_tests.items():
            expected = all_metrics[baseline][test].get('weight')
            got = metrics.get('weight')
            if expected is None or got is None or abs(expected - got) > WEIGHT_TOLERANCE:
                bad.append((impl, test))
    return bad


def print_stats(all_metrics: dict[str, dict[str, dict[str, Any]]], baseline: str=BASELINE) -> None:
    bad = set(inconsistent_tests(all_metrics, baseline))
    for impl in all_metrics:
        if impl == baseline:
            continue

        print(f'Performance of {impl}:')
        speedups = []
        for (test, metrics) in all_metrics[impl].items():
            print(f'  {test} ({len(metrics["compute_times"])} runs):')
            if (impl, test) in bad:
                print('    Inconsistent result on this test')
                continue

            speedup = all_metrics[baseline][test]['avg_compute_time'] / metrics['avg_compute_time']
            speedups.append(speedup)
            print(f'    Compute time = {metrics["avg_compute_time"]:0.4f}s, speedup vs {baseline} = {speedup:0.2f}x')

        if speedups:
            print(f'Average computation time speedup of {impl}: {sum(speedups)/len(speedups):0.2f}')
        print()

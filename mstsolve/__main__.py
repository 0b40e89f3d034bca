import argparse
import logging
import os
import sys

from . import bench
from .check import CheckMode
from .errors import GraphFormatError, OptimalityError
from .io import read_graph, text_to_bin, write_graph
from .nx_utils import random_graph
from .strategy import STRATEGIES, get_strategy


def solve(args: argparse.Namespace) -> int:
    graph = read_graph(args.filename, binary=args.binary, float_weights=args.float_weights)
    strategy = get_strategy(args.algorithm, check=CheckMode(args.check))
    listener = print if args.verbose else None
    result = strategy.compute(graph, listener=listener)

    print('Final MST sum:', f'{result.total_weight:g}')
    if args.verbose:
        print(result)
    return 0


def gen(args: argparse.Namespace) -> int:
    total_edges = int(args.density * args.nvertices * (args.nvertices-1) / 2)

    if not args.quiet:
        print(f'Generating a graph on {args.nvertices} vertices...')
        print(f'  Density: {args.density} ({total_edges} edges)')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    graph = random_graph(args.nvertices, args.density, args.min_weight, args.max_weight, seed=args.seed)

    if args.verbose:
        print()
        print('Graph edges:')
        for edge in graph.edges:
            print(f'  {edge}')

    write_graph(graph, args.outfile, binary=args.binary)
    return 0


def convert(args: argparse.Namespace) -> int:
    text_to_bin(args.infile, args.outfile, float_weights=args.float_weights)
    return 0


def run_bench(args: argparse.Namespace) -> int:
    tests = bench.default_tests(args.min_weight, args.max_weight, args.seed)
    all_metrics = bench.run_benchmarks(tests, reps=args.reps, quiet=args.quiet)
    bench.print_stats(all_metrics)
    return 1 if bench.inconsistent_tests(all_metrics) else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='mstsolve',
                                     description='Minimum spanning trees and forests of weighted graphs')
    check_default = os.getenv('MSTSOLVE_CHECK', 'off').strip().lower()
    check_choices = [m.value for m in CheckMode]
    if check_default not in check_choices:
        parser.error(f'MSTSOLVE_CHECK must be one of {", ".join(check_choices)}, got {check_default!r}')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('solve', help='compute the MST of a graph file')
    p.add_argument('filename')
    p.add_argument('-b', '--binary', action='store_true', help='read the binary graph format')
    p.add_argument('--float-weights', action='store_true', help='binary weights are 8-byte doubles')
    p.add_argument('-a', '--algorithm', default='kruskal', choices=sorted(STRATEGIES))
    p.add_argument('--check',
                   default=check_default,
                   choices=check_choices,
                   help='verify optimality after computing (default: $MSTSOLVE_CHECK or off)')
    p.add_argument('-v', '--verbose', action='store_true')
    p.set_defaults(func=solve)

    p = sub.add_parser('gen', help='generate a random graph for benchmarking')
    p.add_argument('nvertices', type=int)
    p.add_argument('-o', '--outfile', default='graph.txt')
    p.add_argument('-d', '--density', default=0.5, type=float)
    p.add_argument('--min-weight', default=1, type=int)
    p.add_argument('--max-weight', default=100, type=int)
    p.add_argument('-s', '--seed', default=None, type=int)
    p.add_argument('-b', '--binary', action='store_true', help='write the binary graph format')
    p.add_argument('-v', '--verbose', action='store_true')
    p.add_argument('-q', '--quiet', action='store_true')
    p.set_defaults(func=gen)

    p = sub.add_parser('convert', help='convert a text graph to the binary format')
    p.add_argument('-i', '--infile', required=True)
    p.add_argument('-o', '--outfile', required=True)
    p.add_argument('--float-weights', action='store_true', help='write weights as 8-byte doubles')
    p.set_defaults(func=convert)

    p = sub.add_parser('bench', help='benchmark the MST strategies against each other')
    p.add_argument('--reps', default=3, type=int,
                   help='the number of times to repeat each experiment')
    p.add_argument('-s', '--seed', default=0, type=int,
                   help='the seed value to use for generating random graphs')
    p.add_argument('--min-weight', default=1, type=int,
                   help='the minimum edge weight in random graphs')
    p.add_argument('--max-weight', default=1000, type=int,
                   help='the maximum edge weight in random graphs')
    p.add_argument('-q', '--quiet', action='store_true')
    p.set_defaults(func=run_bench)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if getattr(args, 'verbose', False):
        logging.basicConfig(level=logging.DEBUG)

    try:
        return args.func(args)
    except FileNotFoundError as exc:
        print(f'ERROR: file not found: {exc.filename}', file=sys.stderr)
    except GraphFormatError as exc:
        print(f'ERROR: malformed graph: {exc}', file=sys.stderr)
    except ValueError as exc:
        print(f'ERROR: {exc}', file=sys.stderr)
    except OptimalityError as exc:
        print(f'ERROR: {exc}', file=sys.stderr)
    return 1


if __name__ == '__main__':  # pragma: no cover
    raise SystemExit(main())

"""
Heaps Command-Line Interface (CLI)

Small front-end over the max-heap and heapsort routines:
- sort:  heapsort a list of numbers
- drain: build a heap and print values in extraction order
- top:   print the k largest values
- bench: run the timing/space benchmark and write a CSV

Usage examples:
    python -m heaps.cli sort 4 1 7 3 8 2
    python -m heaps.cli drain 5 3 8 1 9 2
    python -m heaps.cli top 5 3 8 1 9 2 -k 3
    python -m heaps.cli bench --path results.csv --rounds 4
"""

import argparse
import logging
import sys

from . import config
from .algorithms.heapsort import heapsort
from .benchmark import run_benchmarks
from .datastructures.max_heap import MaxHeap

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def number(text):
    """argparse type: int when the token is integral, float otherwise."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")


def print_values(values):
    print(" ".join(str(v) for v in values))


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------

def cmd_sort(args):
    """Heapsort the given values (ascending unless --reverse)."""
    out = heapsort(args.values)
    if args.reverse:
        out.reverse()
    print_values(out)


def cmd_drain(args):
    """Print values in the order extract_max returns them."""
    heap = MaxHeap.build_heap(args.values)
    out = []
    while heap:
        out.append(heap.extract_max())
    print_values(out)


def cmd_top(args):
    """Print the k largest values, largest first."""
    heap = MaxHeap.build_heap(args.values)
    out = []
    for _ in range(min(args.k, len(heap))):
        out.append(heap.extract_max())
    print_values(out)


def cmd_bench(args):
    """Run the benchmark suite and write the CSV report."""
    rows = run_benchmarks(args.path, base_input=args.base_input, rounds=args.rounds, iterations=args.iterations)
    print(f"Wrote {len(rows)} benchmark rows to {args.path}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m heaps.cli", description="Max-heap and heapsort tools")
    p.add_argument("--log-level", default=config.LOG_LEVEL, type=str.upper, choices=LOG_LEVELS)
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("sort", help="Heapsort values")
    s.add_argument("values", nargs="*", type=number)
    s.add_argument("--reverse", action="store_true", help="Print largest first")
    s.set_defaults(func=cmd_sort)

    s = sub.add_parser("drain", help="Extract every value from a max-heap")
    s.add_argument("values", nargs="*", type=number)
    s.set_defaults(func=cmd_drain)

    s = sub.add_parser("top", help="Show the k largest values")
    s.add_argument("values", nargs="*", type=number)
    s.add_argument("-k", type=int, default=1)
    s.set_defaults(func=cmd_top)

    s = sub.add_parser("bench", help="Benchmark heap operations to CSV")
    s.add_argument("--path", default=config.BENCH_OUTPUT_CSV)
    s.add_argument("--base-input", type=int, default=config.BENCH_BASE_INPUT)
    s.add_argument("--rounds", type=int, default=config.BENCH_ROUNDS)
    s.add_argument("--iterations", type=int, default=config.BENCH_ITERATIONS)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m heaps.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    # Defaults (HEAPS_LOG_LEVEL) bypass the choices check
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    args.func(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Timing and space benchmarks for MaxHeap operations and heapsort.

Input sizes grow exponentially (base * 2**i) so the O(log n), O(n) and
O(n log n) curves are easy to tell apart in the resulting CSV.
"""

from __future__ import annotations

import csv
import logging
import random
import statistics
import sys
import time
from typing import Callable, List, Optional, Union

from . import config
from .algorithms.heapsort import heapsort
from .datastructures.max_heap import MaxHeap

logger = logging.getLogger(__name__)

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Average Space (bytes)",
]

# Element values fed to the heap are drawn from [0, MAX_KEY]
MAX_KEY = 1000000

# Each benchmark returns what it built: a heap, or the sorted list for heapsort
Result = Union[MaxHeap, List[int]]


# ----------------------------
# Helper Functions
# ----------------------------

def random_keys(size: int, rng: Optional[random.Random] = None) -> List[int]:
    """Unordered integer keys to load into a heap; pass ``rng`` for reproducible input."""
    rng = rng or random
    return [rng.randint(0, MAX_KEY) for _ in range(size)]


def time_operation(operation: Callable[[List[int]], Result], size: int, iterations: int = 5):
    """Time ``operation`` on fresh random keys ``iterations`` times.

    Key generation is excluded from the timing. Returns ``(mean_ms, stdev_ms)``.
    """
    samples = []
    for _ in range(iterations):
        keys = random_keys(size)
        t0 = time.perf_counter()
        operation(keys)
        samples.append((time.perf_counter() - t0) * 1000)

    spread = statistics.stdev(samples) if len(samples) > 1 else 0.0
    return statistics.mean(samples), spread


def measure_space(result: Result) -> int:
    """Estimate bytes held by a benchmark result: container, backing list and elements."""
    if isinstance(result, MaxHeap):
        storage = result.to_list()
        total = sys.getsizeof(result) + sys.getsizeof(storage)
    else:
        storage = result
        total = sys.getsizeof(storage)
    for item in storage:
        total += sys.getsizeof(item)
    return total


def average_space(operation: Callable[[List[int]], Result], size: int, samples: int = 3) -> float:
    """Mean of ``measure_space`` over ``samples`` independent runs of ``operation``."""
    return statistics.mean(measure_space(operation(random_keys(size))) for _ in range(samples))


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_insert(keys):
    heap = MaxHeap()
    for key in keys:
        heap.insert(key)
    return heap


def bench_extract_max(keys):
    heap = MaxHeap(keys)
    while heap:
        heap.extract_max()
    return heap


def bench_peek(keys):
    heap = MaxHeap(keys)
    for _ in range(min(3, len(keys))):
        heap.peek()
    return heap


def bench_build_heap(keys):
    return MaxHeap.build_heap(keys)


def bench_heapsort(keys):
    return heapsort(keys)


OPERATIONS = {
    "insert": bench_insert,
    "extract_max": bench_extract_max,
    "peek": bench_peek,
    "build_heap": bench_build_heap,
    "heapsort": bench_heapsort,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(
    output_file: str = config.BENCH_OUTPUT_CSV,
    base_input: int = config.BENCH_BASE_INPUT,
    rounds: int = config.BENCH_ROUNDS,
    iterations: int = config.BENCH_ITERATIONS,
):
    """Run exponential performance tests and write one CSV row per (operation, size).

    Returns the rows written (without the header).
    """
    if base_input <= 0 or rounds <= 0 or iterations <= 0:
        raise ValueError("base_input, rounds and iterations must be positive")

    input_sizes = [base_input * (2 ** i) for i in range(rounds)]
    rows = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time = time_operation(op_func, size, iterations)
                avg_space = average_space(op_func, size)
                row = [size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"]
                writer.writerow(row)
                rows.append(row)
                logger.info(
                    "%-12s | Size: %-8d | Avg Time: %.3f ms | Std: %.3f ms | Space: %.0f bytes",
                    op_name, size, avg_time, std_time, avg_space,
                )

    logger.info("Benchmark completed. Results saved to %s", output_file)
    return rows

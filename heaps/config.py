"""
Package defaults.

Values are read once at import time; each can be overridden through the
environment variable named next to it.
"""

import os

# Logging level applied by the CLI (HEAPS_LOG_LEVEL)
LOG_LEVEL = os.environ.get("HEAPS_LOG_LEVEL", "WARNING").upper()

# Benchmark sizes are BENCH_BASE_INPUT * 2**i for i in range(BENCH_ROUNDS)
BENCH_BASE_INPUT = int(os.environ.get("HEAPS_BENCH_BASE_INPUT", "100"))
BENCH_ROUNDS = int(os.environ.get("HEAPS_BENCH_ROUNDS", "8"))
BENCH_ITERATIONS = int(os.environ.get("HEAPS_BENCH_ITERATIONS", "5"))
BENCH_OUTPUT_CSV = os.environ.get("HEAPS_BENCH_OUTPUT", "max_heap_performance.csv")

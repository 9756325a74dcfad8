"""Binary max-heap priority queue and in-place heapsort."""

from .algorithms import heapsort, heapsort_inplace
from .datastructures import MaxHeap
from .errors import HeapInvariantError

__all__ = [
    "MaxHeap",
    "HeapInvariantError",
    "heapsort",
    "heapsort_inplace",
]

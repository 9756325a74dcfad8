"""
Heapsort built on the max-heap sift primitives.

The list is heapified in place, then the root (current maximum) is swapped
to the end of the shrinking active region and the new root is sifted down
within that region. The result is ascending order, O(n log n) worst case,
with no auxiliary storage. Heapsort is not stable.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, MutableSequence, TypeVar

from ..datastructures.max_heap import heapify, sift_down

T = TypeVar("T")

logger = logging.getLogger(__name__)


def heapsort_inplace(data: MutableSequence[T]) -> None:
    """Sort ``data`` ascending in place."""
    swaps = heapify(data)
    for end in range(len(data) - 1, 0, -1):
        data[0], data[end] = data[end], data[0]
        swaps += 1 + sift_down(data, 0, end)
    logger.debug("heapsort: n=%d swaps=%d", len(data), swaps)


def heapsort(sequence: Iterable[T]) -> List[T]:
    """Return a new ascending list with the elements of ``sequence``.

    The input is never modified.
    """
    out = list(sequence)
    heapsort_inplace(out)
    return out

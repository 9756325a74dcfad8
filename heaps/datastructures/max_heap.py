from __future__ import annotations

import logging
from typing import Generic, Iterable, Iterator, List, MutableSequence, Optional, Sequence, TypeVar

from ..errors import HeapInvariantError

T = TypeVar("T")

logger = logging.getLogger(__name__)


# -----------------------------
# Index arithmetic
# -----------------------------
def parent_index(idx: int) -> int:
    """Index of the parent of ``idx`` (floor of ``(idx - 1) / 2``)."""
    if idx <= 0:
        raise IndexError("root has no parent")
    return (idx - 1) // 2


def left_index(idx: int) -> int:
    return 2 * idx + 1


def right_index(idx: int) -> int:
    return 2 * idx + 2


# -----------------------------
# Sift primitives
# -----------------------------
def sift_up(data: MutableSequence[T], idx: int) -> int:
    """Move ``data[idx]`` toward the root while it beats its parent.

    Returns the number of swaps performed (0 when already in place).
    """
    swaps = 0
    while idx > 0:
        parent = (idx - 1) // 2
        if not data[idx] > data[parent]:
            break
        data[parent], data[idx] = data[idx], data[parent]
        idx = parent
        swaps += 1
    return swaps


def sift_down(data: MutableSequence[T], idx: int, end: Optional[int] = None) -> int:
    """Move ``data[idx]`` toward the leaves while a child beats it.

    Only ``data[:end]`` is treated as the live heap, which lets heapsort
    keep its sorted tail in the same list. Returns the number of swaps.
    """
    n = len(data) if end is None else end
    swaps = 0
    while True:
        left = 2 * idx + 1
        right = left + 1
        largest = idx
        if left < n and data[left] > data[largest]:
            largest = left
        if right < n and data[right] > data[largest]:
            largest = right
        if largest == idx:
            break
        data[idx], data[largest] = data[largest], data[idx]
        idx = largest
        swaps += 1
    return swaps


def heapify(data: MutableSequence[T]) -> int:
    """Transform ``data`` into a max-heap in-place in O(n) time.

    Returns the total number of swaps; a list that is already a valid
    max-heap comes back untouched with a count of 0.
    """
    n = len(data)
    swaps = 0
    for i in reversed(range(n // 2)):
        swaps += sift_down(data, i, n)
    logger.debug("heapify: n=%d swaps=%d", n, swaps)
    return swaps


def find_violation(data: Sequence[T], end: Optional[int] = None) -> Optional[int]:
    """Return the first index in ``data[:end]`` that beats its parent, or None."""
    n = len(data) if end is None else end
    for i in range(1, n):
        if data[i] > data[(i - 1) // 2]:
            return i
    return None


def is_max_heap(data: Sequence[T], end: Optional[int] = None) -> bool:
    """Return True if every parent in ``data[:end]`` is >= its children."""
    return find_violation(data, end) is None


class MaxHeap(Generic[T]):
    """A binary max-heap over a Python list.

    Index 0 is the root; the children of ``i`` live at ``2i+1`` and ``2i+2``.
    Querying or removing from an empty heap returns ``None`` instead of
    raising.
    """

    __slots__ = ("_data",)

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._data: List[T] = []
        if it is not None:
            self._data = list(it)
            heapify(self._data)  # Bulk build in O(n) instead of repeated inserts

    @classmethod
    def build_heap(cls, it: Iterable[T]) -> "MaxHeap[T]":
        """Build a heap from an unordered iterable with bottom-up heapify (O(n))."""
        return cls(it)

    # -----------------------------
    # Public API
    # -----------------------------
    def insert(self, value: T) -> None:
        """Insert value into the heap (O(log n))."""
        self._data.append(value)
        sift_up(self._data, len(self._data) - 1)

    def peek(self) -> Optional[T]:
        """Return the largest item without removing it, or None if empty (O(1))."""
        return self._data[0] if self._data else None

    def extract_max(self) -> Optional[T]:
        """Remove and return the largest item, or None if empty (O(log n))."""
        data = self._data
        if not data:
            return None
        top = data[0]
        last = data.pop()
        if data:
            data[0] = last
            sift_down(data, 0)
        return top

    def pushpop(self, value: T) -> T:
        """Insert value then extract the max in a single O(log n) operation."""
        if self._data and self._data[0] > value:
            value, self._data[0] = self._data[0], value
            sift_down(self._data, 0)
        return value

    def replace(self, value: T) -> Optional[T]:
        """Extract the max, then insert value. Returns None if the heap was empty."""
        if not self._data:
            self._data.append(value)
            return None
        top = self._data[0]
        self._data[0] = value
        sift_down(self._data, 0)
        return top

    def clear(self) -> None:
        self._data.clear()

    # -----------------------------
    # Tree accessors
    # -----------------------------
    def get(self, idx: int) -> Optional[T]:
        """Element at storage index ``idx``, or None when out of range."""
        if 0 <= idx < len(self._data):
            return self._data[idx]
        return None

    def parent(self, idx: int) -> Optional[T]:
        """Parent of the element at ``idx``; None for the root or out of range."""
        if idx <= 0 or idx >= len(self._data):
            return None
        return self._data[parent_index(idx)]

    def left(self, idx: int) -> Optional[T]:
        return self.get(left_index(idx))

    def right(self, idx: int) -> Optional[T]:
        return self.get(right_index(idx))

    def check_invariant(self) -> None:
        """Raise HeapInvariantError if any parent is smaller than a child."""
        data = self._data
        i = find_violation(data)
        if i is not None:
            p = parent_index(i)
            raise HeapInvariantError(
                f"heap property violated: data[{p}]={data[p]!r} < data[{i}]={data[i]!r}"
            )

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return bool(self._data)

    def to_list(self) -> List[T]:
        return list(self._data)

    def __iter__(self) -> Iterator[T]:
        # Iterate over the internal array (heap order, not sorted order)
        return iter(self._data)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"MaxHeap({self._data!r})"

import os
import random
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from heaps.datastructures.max_heap import (
    MaxHeap,
    find_violation,
    heapify,
    is_max_heap,
    left_index,
    parent_index,
    right_index,
    sift_down,
    sift_up,
)
from heaps.errors import HeapInvariantError


# ----------------------------
# Index arithmetic
# ----------------------------

def test_index_arithmetic():
    assert [left_index(i) for i in range(4)] == [1, 3, 5, 7]
    assert [right_index(i) for i in range(4)] == [2, 4, 6, 8]
    for i in range(1, 100):
        p = parent_index(i)
        assert i in (left_index(p), right_index(p))


def test_root_has_no_parent_index():
    with pytest.raises(IndexError):
        parent_index(0)


def test_tree_accessors():
    heap = MaxHeap([7, 6, 5, 4, 3, 2, 1])

    assert [heap.parent(i) for i in range(8)] == [None, 7, 7, 6, 6, 5, 5, None]
    assert [heap.left(i) for i in range(4)] == [6, 4, 2, None]
    assert [heap.right(i) for i in range(4)] == [5, 3, 1, None]
    assert heap.get(0) == 7
    assert heap.get(7) is None
    assert heap.get(-1) is None


# ----------------------------
# Sift primitives
# ----------------------------

def test_sift_up_counts_swaps():
    data = [9, 5, 8, 1, 2, 3, 10]
    assert sift_up(data, 6) == 2
    assert data[0] == 10
    assert is_max_heap(data)


def test_sift_down_examples():
    data = [1, 2, 0]
    sift_down(data, 0)
    assert data == [2, 1, 0]

    data = [1, 0, 2]
    sift_down(data, 0)
    assert data == [2, 0, 1]

    data = [1, 2, 0, 4]
    sift_down(data, 0)
    assert data == [2, 4, 0, 1]


def test_sift_down_respects_end():
    data = [1, 5, 9]
    assert sift_down(data, 0, end=2) == 1
    assert data == [5, 1, 9]


def test_sift_is_noop_when_local_order_holds():
    data = [9, 7, 8, 4, 2]
    assert sift_down(data, 0) == 0
    assert sift_up(data, 4) == 0
    assert data == [9, 7, 8, 4, 2]


def test_heapify_examples():
    data = [0, 1, 2, 3]
    heapify(data)
    assert data == [3, 1, 2, 0]

    data = [8, 2, 9, 4, 7]
    heapify(data)
    assert data == [9, 7, 8, 4, 2]

    data = [9, 8, 7, 6, 5, 4, 3, 2, 1]
    heapify(data)
    assert data == [9, 8, 7, 6, 5, 4, 3, 2, 1]


def test_heapify_on_valid_heap_makes_no_swaps():
    rng = random.Random(7)
    for _ in range(50):
        data = [rng.randint(-50, 50) for _ in range(rng.randint(0, 60))]
        heapify(data)
        snapshot = list(data)
        assert heapify(data) == 0
        assert data == snapshot


def test_build_heap_does_not_alias_input():
    src = [3, 9, 1]
    heap = MaxHeap.build_heap(src)
    heap.insert(100)
    assert src == [3, 9, 1]
    assert heap.peek() == 100


# ----------------------------
# Public operations
# ----------------------------

def test_insert_then_peek():
    heap = MaxHeap()
    for v in [5, 3, 8, 1, 9, 2]:
        heap.insert(v)
    assert heap.peek() == 9
    assert len(heap) == 6


def test_extract_max_order():
    heap = MaxHeap()
    for v in [5, 3, 8, 1, 9, 2]:
        heap.insert(v)
    out = [heap.extract_max() for _ in range(6)]
    assert out == [9, 8, 5, 3, 2, 1]
    assert len(heap) == 0


def test_insert_layout():
    heap = MaxHeap()
    heap.insert(0)
    assert heap.to_list() == [0]
    heap.insert(1)
    assert heap.to_list() == [1, 0]
    heap.insert(-5)
    assert heap.to_list() == [1, 0, -5]
    heap.insert(-1)
    assert heap.to_list() == [1, 0, -5, -1]


def test_extract_max_layout():
    heap = MaxHeap([3, 2, 1])
    assert heap.extract_max() == 3
    assert heap.to_list() == [2, 1]

    heap = MaxHeap([5, 4, 1, 3])
    assert heap.extract_max() == 5
    assert heap.to_list() == [4, 3, 1]


def test_empty_heap_returns_none():
    heap = MaxHeap()
    assert heap.peek() is None
    assert heap.extract_max() is None
    assert len(heap) == 0
    assert not heap


def test_single_element_extract_leaves_empty_heap():
    heap = MaxHeap([42])
    assert heap.extract_max() == 42
    assert heap.extract_max() is None
    assert heap.to_list() == []


def test_duplicates():
    heap = MaxHeap()
    for v in [5, 5, 5]:
        heap.insert(v)
    assert len(heap) == 3
    assert [heap.extract_max() for _ in range(3)] == [5, 5, 5]
    assert heap.extract_max() is None


def test_pushpop():
    heap = MaxHeap([5, 3, 1])
    assert heap.pushpop(4) == 5
    assert heap.peek() == 4
    assert heap.pushpop(10) == 10
    assert sorted(heap) == [1, 3, 4]
    assert MaxHeap().pushpop(7) == 7


def test_replace():
    heap = MaxHeap([5, 3, 1])
    assert heap.replace(2) == 5
    assert heap.peek() == 3
    heap.check_invariant()

    empty = MaxHeap()
    assert empty.replace(8) is None
    assert empty.to_list() == [8]


def test_clear():
    heap = MaxHeap([1, 2, 3])
    heap.clear()
    assert len(heap) == 0
    assert heap.peek() is None


# ----------------------------
# Invariant probing
# ----------------------------

def test_check_invariant_detects_corruption():
    heap = MaxHeap()
    heap._data = [1, 5]
    assert not is_max_heap(heap._data)
    with pytest.raises(HeapInvariantError):
        heap.check_invariant()


def test_random_operations_preserve_invariant():
    rng = random.Random(1234)
    for _ in range(30):
        heap = MaxHeap()
        shadow = []
        inserts = extracts = 0
        for _ in range(300):
            if shadow and rng.random() < 0.4:
                expected = max(shadow)
                assert heap.peek() == expected
                assert heap.extract_max() == expected
                shadow.remove(expected)
                extracts += 1
            else:
                v = rng.randint(-1000, 1000)
                heap.insert(v)
                shadow.append(v)
                inserts += 1
            heap.check_invariant()
            assert len(heap) == inserts - extracts
            assert sorted(heap) == sorted(shadow)


def test_build_heap_matches_repeated_insert():
    rng = random.Random(99)
    for n in range(0, 40):
        data = [rng.uniform(-1, 1) for _ in range(n)]
        bulk = MaxHeap.build_heap(data)
        one_by_one = MaxHeap()
        for v in data:
            one_by_one.insert(v)
        bulk.check_invariant()
        one_by_one.check_invariant()
        drained_bulk = [bulk.extract_max() for _ in range(n)]
        drained_one = [one_by_one.extract_max() for _ in range(n)]
        assert drained_bulk == drained_one == sorted(data, reverse=True)


def test_find_violation_reports_first_offending_index():
    assert find_violation([9, 7, 8, 4, 2]) is None
    assert find_violation([9, 7, 8, 4, 10]) == 4
    assert find_violation([9, 7, 8, 4, 10], end=4) is None

    heap = MaxHeap()
    heap._data = [9, 7, 8, 4, 10]
    with pytest.raises(HeapInvariantError, match=r"data\[1\]=7 < data\[4\]=10"):
        heap.check_invariant()

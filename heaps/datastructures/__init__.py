from .max_heap import MaxHeap, heapify, is_max_heap, sift_down, sift_up

__all__ = [
    "MaxHeap",
    "heapify",
    "is_max_heap",
    "sift_down",
    "sift_up",
]

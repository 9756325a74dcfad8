from .heapsort import heapsort, heapsort_inplace

__all__ = [
    "heapsort",
    "heapsort_inplace",
]

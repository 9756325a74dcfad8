"""Exceptions raised by the heaps package."""


class HeapInvariantError(AssertionError):
    """A max-heap was found with a parent smaller than one of its children.

    This always indicates a defect in the sift logic, never bad caller input.
    """

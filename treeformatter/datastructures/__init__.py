from .heap import Heap, HeapIndexError, build_min_heap, max_order, min_order

__all__ = [
    "Heap",
    "HeapIndexError",
    "build_min_heap",
    "max_order",
    "min_order",
]

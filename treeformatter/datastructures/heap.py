from __future__ import annotations
import logging
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class HeapIndexError(IndexError):
    """Raised when a heap index falls outside ``1..last_node_index()``."""


def min_order(parent: Any, child: Any) -> bool:
    """Return True when *parent* must sink below *child* in a min-heap."""
    return parent > child


def max_order(parent: Any, child: Any) -> bool:
    """Return True when *parent* must sink below *child* in a max-heap."""
    return parent < child


class Heap(Generic[T]):
    """A 1-indexed, array-backed binary heap.

    Implementation notes
    --------------------
    • Slot 0 holds a sentinel and is never exposed; the root lives at index 1,
      so ``parent = i // 2``, ``left = 2 * i`` and ``right = 2 * i + 1``.
    • ``push`` appends and restores the ordering; ``append`` only appends.
      The caller picks which one it wants.
    • Ordering is an injected ``out_of_order(parent, child)`` predicate.
      Equal values never compare out of order, so they are not swapped.
    • ``remove`` pops the tail slot and does not reorder anything.
    """

    __slots__ = ("_slots", "_out_of_order")

    def __init__(self, out_of_order: Optional[Callable[[T, T], bool]] = None) -> None:
        self._slots: List[Any] = [None]
        self._out_of_order: Callable[[T, T], bool] = out_of_order or min_order

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _check_index(self, index: int) -> int:
        if not 1 <= index <= self.last_node_index():
            raise HeapIndexError(
                f"heap index {index} out of range 1..{self.last_node_index()}"
            )
        return index

    # -----------------------------
    # Structural accessors
    # -----------------------------
    @staticmethod
    def parent_index(index: int) -> int:
        return index // 2

    @staticmethod
    def left_child_index(index: int) -> int:
        return index * 2

    @staticmethod
    def right_child_index(index: int) -> int:
        return index * 2 + 1

    def has_parent(self, index: int) -> bool:
        return index > 1

    def has_left_child(self, index: int) -> bool:
        return self.left_child_index(index) < self.size()

    def has_right_child(self, index: int) -> bool:
        return self.right_child_index(index) < self.size()

    def parent(self, index: int) -> T:
        return self.get(self.parent_index(index))

    def left_child(self, index: int) -> T:
        return self.get(self.left_child_index(index))

    def right_child(self, index: int) -> T:
        return self.get(self.right_child_index(index))

    # -----------------------------
    # Public API
    # -----------------------------
    def push(self, value: T) -> None:
        """Append *value* and bubble it up into place (O(log n))."""
        self._slots.append(value)
        self.bubble_up(self.last_node_index())

    def append(self, value: T) -> None:
        """Append *value* at the next free index without reordering (O(1))."""
        self._slots.append(value)

    def bubble_up(self, index: int) -> None:
        """Swap the value at *index* with its parent until the ordering holds."""
        self._check_index(index)
        slots = self._slots
        swaps = 0
        while index > 1:
            parent = index // 2
            if not self._out_of_order(slots[parent], slots[index]):
                break
            slots[parent], slots[index] = slots[index], slots[parent]
            index = parent
            swaps += 1
        logger.debug("bubble_up settled at index %d after %d swap(s)", index, swaps)

    def get(self, index: int) -> T:
        """Return the value at 1-based *index*.

        Raises:
            HeapIndexError: if *index* is not in ``1..last_node_index()``.
        """
        return self._slots[self._check_index(index)]

    def swap(self, first: int, second: int) -> None:
        """Exchange the values at two logical indices."""
        slots = self._slots
        self._check_index(first)
        self._check_index(second)
        slots[first], slots[second] = slots[second], slots[first]

    def size(self) -> int:
        """Number of slots, sentinel included."""
        return len(self._slots)

    def last_node_index(self) -> int:
        return self.size() - 1

    def last_node(self) -> T:
        return self.get(self.last_node_index())

    def is_empty(self) -> bool:
        return self.size() == 1

    def peek_min(self) -> T:
        """Return the root value (the minimum under min ordering)."""
        return self.get(1)

    def remove(self) -> Optional[T]:
        """Pop and return the tail value, or None if the heap is empty.

        This is a raw pop of the last slot: it is not necessarily the
        minimum and the remaining slots are left untouched.
        """
        if self.is_empty():
            return None
        return self._slots.pop()

    def is_heap(self) -> bool:
        """Check the ordering between every node and its parent."""
        slots = self._slots
        return not any(
            self._out_of_order(slots[i // 2], slots[i])
            for i in range(2, len(slots))
        )

    def __len__(self) -> int:
        return self.size() - 1

    def to_list(self) -> List[T]:
        return list(self._slots[1:])

    def __iter__(self) -> Iterator[T]:
        # Array order (level by level), not sorted order
        return iter(self.to_list())

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.to_list()) + "]"

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Heap({self.to_list()!r})"


def build_min_heap(values: Iterable[T]) -> Heap[T]:
    """Push every item of *values* into a fresh min-heap, in order."""
    heap: Heap[T] = Heap(min_order)
    for value in values:
        heap.push(value)
    return heap

"""
Row layout for printing a 1-indexed heap as a triangle.

Depth ``k`` of the tree covers array indices ``[2**k, 2**(k+1) - 1]``. The
root row gets the widest spacing; every following row doubles its node count
and halves its spacing unit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Row:
    """One printed row of the tree."""

    depth: int
    start: int
    end: int  # clipped to the last populated index
    row_size: int  # nominal width, 2 ** depth
    spacing_unit: int

    @property
    def indices(self) -> range:
        return range(self.start, self.end + 1)


def max_row_size(node_count: int) -> int:
    """Return the spacing unit of the root row.

    This is the floor power of two <= *node_count*, found by shifting right
    until one bit is left and counting the shifts (20 -> 16). Values below
    2 give 1.
    """
    count = 0
    while node_count > 1:
        node_count >>= 1
        count += 1
    return 2 ** count


def digit_width(number: int) -> int:
    """Number of characters in ``str(number)``."""
    return len(str(number))


def iter_rows(last_node_index: int, node_count: int) -> Iterator[Row]:
    """Yield the rows covering indices ``1..last_node_index`` top to bottom."""
    if last_node_index < 1:
        return

    depth = 0
    row_size = 1
    start = final = 1
    spacing_unit = max_row_size(node_count)

    while True:
        yield Row(depth, start, min(final, last_node_index), row_size, spacing_unit)

        start = final + 1
        if start > last_node_index:
            break

        depth += 1
        row_size *= 2
        final = start + row_size - 1
        spacing_unit //= 2

"""
Row Renderer: turns a finished heap into printable tree rows.

Each row is built from the ``Row`` descriptors in ``layout``. Nodes are zero
padded to a fixed width, and the blank ``unit`` (one node's width of spaces)
is the building block for all horizontal padding:

    padding = unit * (spacing_unit - 1)
    row     = padding node (padding unit padding node)*

so the last node on a row is never followed by padding.

Lines are built as rich ``Text``: the row body is unstyled so columns line up
exactly, while headers and annotation labels carry styles that the console
renders or drops.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, TextIO

from rich.console import Console
from rich.text import Text

from ..config import FormatterConfig
from ..datastructures.heap import Heap
from .layout import Row, digit_width, iter_rows, max_row_size
from .style import BOLD, FAINT, FAINT_BOLD, make_console

PADDING = " "  # between nodes in the tree


def format_node(value: int, node_width: int) -> str:
    """Zero-pad *value* to *node_width* digits."""
    return f"{value:0{node_width}d}"


def format_row(heap: Heap[int], row: Row, node_width: int) -> str:
    """Render the nodes of *row* as a single line (no line break)."""
    unit = PADDING * node_width
    padding = unit * max(row.spacing_unit - 1, 0)
    separator = padding + unit + padding
    nodes = [format_node(heap.get(i), node_width) for i in row.indices]
    return padding + separator.join(nodes)


def _annotation(row: Row, label_width: int) -> Text:
    return Text.assemble(
        (str(row.row_size).ljust(label_width), FAINT),
        " : ",
        (str(row.spacing_unit).ljust(label_width), FAINT),
        " ",
        ("|", BOLD),
        " ",
    )


def row_lines(
    heap: Heap[int],
    node_width: int,
    node_count: Optional[int] = None,
    annotate: bool = False,
) -> List[Text]:
    """Return the tree rows as ``Text``, root first.

    *node_count* drives the root spacing and defaults to ``len(heap)``.
    With *annotate*, each row is prefixed by ``"row_size : spacing_unit | "``.
    """
    if node_count is None:
        node_count = len(heap)
    label_width = digit_width(max_row_size(node_count))

    lines: List[Text] = []
    for row in iter_rows(heap.last_node_index(), node_count):
        line = Text(format_row(heap, row, node_width))
        if annotate:
            line = _annotation(row, label_width) + line
        lines.append(line)
    return lines


def render_rows(
    heap: Heap[int],
    node_width: int,
    node_count: Optional[int] = None,
    annotate: bool = False,
) -> List[str]:
    """The tree rows as plain strings, for callers that want data."""
    return [line.plain for line in row_lines(heap, node_width, node_count, annotate)]


def heap_summary(heap: Heap[int]) -> Text:
    """``Heap (N): [v1, v2, ...]`` in array order."""
    return Text.assemble((f"Heap ({len(heap)}): ", FAINT_BOLD), (str(heap), FAINT))


def render_report(heap: Heap[int], config: FormatterConfig) -> List[Text]:
    """All output lines for one run: optional summary, header, then rows."""
    lines: List[Text] = []
    if config.show_array:
        lines.append(heap_summary(heap))
        lines.append(Text())
    lines.append(Text("Tree:", BOLD))
    lines.extend(
        row_lines(heap, config.node_width, node_count=config.node_count, annotate=config.annotate)
    )
    return lines


def _emit(lines: Iterable[Text], config: FormatterConfig,
          stream: Optional[TextIO], console: Optional[Console]) -> None:
    console = console or make_console(config.color, file=stream)
    for line in lines:
        console.print(line)


def print_tree(heap: Heap[int], config: FormatterConfig,
               stream: Optional[TextIO] = None, console: Optional[Console] = None) -> None:
    """Write just the tree rows to *stream* (stdout by default) or *console*."""
    lines = row_lines(heap, config.node_width, node_count=config.node_count, annotate=config.annotate)
    _emit(lines, config, stream, console)


def print_report(heap: Heap[int], config: FormatterConfig,
                 stream: Optional[TextIO] = None, console: Optional[Console] = None) -> None:
    """Write the full report (summary, header and rows)."""
    _emit(render_report(heap, config), config, stream, console)

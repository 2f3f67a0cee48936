from .layout import Row, digit_width, iter_rows, max_row_size
from .printer import (
    format_row,
    heap_summary,
    print_report,
    print_tree,
    render_report,
    render_rows,
    row_lines,
)
from .style import make_console

__all__ = [
    "Row",
    "digit_width",
    "format_row",
    "heap_summary",
    "iter_rows",
    "make_console",
    "max_row_size",
    "print_report",
    "print_tree",
    "render_report",
    "render_rows",
    "row_lines",
]

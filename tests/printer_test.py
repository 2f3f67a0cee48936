import io
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from treeformatter.config import FormatterConfig
from treeformatter.datastructures.heap import Heap, build_min_heap
from treeformatter.render.layout import Row
from treeformatter.render.printer import (
    format_node,
    format_row,
    heap_summary,
    print_report,
    print_tree,
    render_report,
    render_rows,
    row_lines,
)
from treeformatter.render.style import BOLD, FAINT, FAINT_BOLD, make_console


def _styles(text):
    return {(text.plain[span.start:span.end], str(span.style)) for span in text.spans}


def test_format_node_zero_pads():
    assert format_node(7, 2) == "07"
    assert format_node(42, 2) == "42"
    assert format_node(3, 3) == "003"


def test_format_row_pads_before_each_node_but_not_after_last():
    heap = build_min_heap([1, 3, 8])
    row = Row(depth=1, start=2, end=3, row_size=2, spacing_unit=2)
    # padding = one 2-wide unit, separator = padding + unit + padding
    assert format_row(heap, row, 2) == "  03      08"


def test_render_rows_small_tree():
    heap = build_min_heap([5, 3, 8, 1])
    assert render_rows(heap, 1) == ["   1", " 3   8", "5"]


def test_render_rows_two_digit_width():
    heap = build_min_heap([1, 3, 8])
    assert render_rows(heap, 2) == ["  01", "03  08"]


def test_single_node_has_no_padding():
    assert render_rows(build_min_heap([7]), 2) == ["07"]


def test_empty_heap_renders_nothing():
    assert render_rows(Heap(), 2) == []


def test_twenty_nodes_layout():
    heap = build_min_heap(range(20))
    rows = render_rows(heap, 2, node_count=20)
    assert len(rows) == 5
    assert rows[0] == " " * 30 + "00"
    assert [len(r.split()) for r in rows] == [1, 2, 4, 8, 5]
    assert rows[-1] == "15  16  17  18  19"
    printed = [int(tok) for r in rows for tok in r.split()]
    assert printed == heap.to_list()


def test_annotated_rows():
    heap = build_min_heap([1, 3, 8])
    assert render_rows(heap, 2, annotate=True) == ["1 : 2 | " + "  01", "2 : 1 | " + "03  08"]


def test_annotation_labels_are_styled_and_row_body_is_not():
    line = row_lines(build_min_heap([4]), 1, annotate=True)[0]
    assert line.plain == "1 : 1 | 4"
    assert _styles(line) == {("1", FAINT), ("|", BOLD)}


def test_heap_summary():
    summary = heap_summary(build_min_heap([5, 3, 8, 1]))
    assert summary.plain == "Heap (4): [1, 3, 8, 5]"
    assert ("Heap (4): ", FAINT_BOLD) in _styles(summary)


def test_render_report_layout():
    heap = build_min_heap([1, 3, 8])
    config = FormatterConfig(node_count=3)
    lines = render_report(heap, config)
    assert [line.plain for line in lines] == ["Heap (3): [1, 3, 8]", "", "Tree:", "  01", "03  08"]


def test_render_report_without_array():
    heap = build_min_heap([1, 3, 8])
    config = FormatterConfig(node_count=3, show_array=False)
    assert [line.plain for line in render_report(heap, config)] == ["Tree:", "  01", "03  08"]


def test_print_tree_writes_rows_to_stream():
    heap = build_min_heap([5, 3, 8, 1])
    out = io.StringIO()
    print_tree(heap, FormatterConfig(value_range=10, node_count=4, color=False), out)
    assert out.getvalue() == "   1\n 3   8\n5\n"


def test_print_tree_styles_annotations_on_a_color_terminal(monkeypatch):
    monkeypatch.setenv("TERM", "xterm-256color")
    monkeypatch.delenv("NO_COLOR", raising=False)
    heap = build_min_heap([1, 3, 8])
    config = FormatterConfig(node_count=3, annotate=True, color=True)
    out = io.StringIO()
    print_tree(heap, config, console=make_console(config.color, file=out, force_terminal=True))
    text = out.getvalue()
    assert "\033[" in text
    assert "03  08" in text


def test_color_off_writes_no_escape_codes_even_on_a_terminal():
    heap = build_min_heap([1, 3, 8])
    config = FormatterConfig(node_count=3, annotate=True, color=False)
    out = io.StringIO()
    print_report(heap, config, console=make_console(config.color, file=out, force_terminal=True))
    assert out.getvalue() == "Heap (3): [1, 3, 8]\n\nTree:\n1 : 2 |   01\n2 : 1 | 03  08\n"


def test_wide_rows_are_not_wrapped():
    heap = build_min_heap(range(100))
    config = FormatterConfig(value_range=1000, node_count=100, color=False, show_array=False)
    out = io.StringIO()
    print_report(heap, config, stream=out)
    lines = out.getvalue().splitlines()
    assert lines[1] == " " * (63 * 3) + "000"
    assert len(lines) == 1 + 7

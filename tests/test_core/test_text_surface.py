# tests/test_core/test_text_surface.py
"""TextSurface Tests
====================

Unit tests for `LineBuffer`, the in-memory `TextSurface`.
"""

import pytest

from iad.core.TextSurface import LineBuffer, TextSurface
from tests.stubs import StubSurface


def test_line_buffer_and_stub_satisfy_protocol() -> None:
    """Both the buffer and the recording stub are structural text surfaces."""
    assert isinstance(LineBuffer(), TextSurface)
    assert isinstance(StubSurface(["x"]), TextSurface)


def test_relative_line_access() -> None:
    """`line_at` is relative to the cursor line and None past the buffer."""
    buffer = LineBuffer(["one", "two", "three"], cursor_y=1)

    assert buffer.current_line() == "two"
    assert buffer.line_at(-1) == "one"
    assert buffer.line_at(1) == "three"
    assert buffer.line_at(2) is None
    assert buffer.line_at(-2) is None


def test_replace_span_marks_modified() -> None:
    """Span replacement edits the current line only."""
    buffer = LineBuffer(["a|b|c", "keep"])
    buffer.replace_span(2, 3, "BEE")

    assert buffer.text == ["a|BEE|c", "keep"]
    assert buffer.modified


def test_replace_span_out_of_bounds() -> None:
    """A span outside the line is a programming error."""
    buffer = LineBuffer(["abc"])
    with pytest.raises(IndexError):
        buffer.replace_span(2, 9, "x")
    assert not buffer.modified


def test_cursor_is_clamped() -> None:
    """Cursor positions never leave the text."""
    buffer = LineBuffer(["abc", "de"], cursor_y=7, cursor_x=9)
    assert (buffer.cursor_y, buffer.cursor_x) == (1, 2)

    buffer.set_cursor(-4)
    assert buffer.get_cursor() == 0


def test_insert_lines_after_current_line() -> None:
    """Inserted lines follow the current one; the cursor moves onto the first."""
    buffer = LineBuffer(["header", "tail"])
    buffer.insert_lines(["x", "y"])

    assert buffer.text == ["header", "x", "y", "tail"]
    assert (buffer.cursor_y, buffer.cursor_x) == (1, 0)


def test_insert_lines_takes_over_empty_line() -> None:
    """An empty current line is replaced rather than left above the insert."""
    buffer = LineBuffer(["first", ""], cursor_y=1)
    buffer.insert_lines(["ACTOR", "|||"])

    assert buffer.text == ["first", "ACTOR", "|||"]
    assert buffer.cursor_y == 1


def test_selection_is_ordered_span() -> None:
    """Backward selections are normalized; an empty one is no selection."""
    buffer = LineBuffer(["Harrison Ford"], cursor_x=2)
    assert buffer.selection() is None

    buffer.selection_start = 10
    assert buffer.selection() == (2, 10)

    buffer.selection_start = 2
    assert buffer.selection() is None


def test_string_round_trip() -> None:
    """`from_string` and `to_string` convert between text and lines."""
    buffer = LineBuffer.from_string("ACTOR\nFord, Harrison|Blade Runner (1982)||Rick Deckard")
    assert buffer.text[0] == "ACTOR"
    assert buffer.to_string().endswith("Rick Deckard")
    assert LineBuffer.from_string("").text == [""]

# tests/test_core/test_field_locator.py
"""Field Locator Tests
======================

Unit tests for `locate_field`, `field_span` and `field_count`.

Verifies that:

1. The field under the cursor is found on pipe-delimited lines, including
   empty fields and a cursor sitting on a delimiter.
2. Tag-prefixed lines are a single field and `|` there is plain text.
3. Out-of-range cursor columns are clamped rather than rejected.
"""

import pytest

from iad.core.FieldTransformer import FieldSpan, field_count, field_span, is_tag_line, locate_field


LINE = "Ford, Harrison|Blade Runner (1982)||Rick Deckard"


@pytest.mark.parametrize(
    "offset, expected",
    [
        (0, FieldSpan(1, 0, 14)),
        (5, FieldSpan(1, 0, 14)),
        (14, FieldSpan(1, 0, 14)),  # on the delimiter: field to its left
        (15, FieldSpan(2, 15, 34)),
        (35, FieldSpan(3, 35, 35)),  # empty attribute field
        (36, FieldSpan(4, 36, 48)),
        (48, FieldSpan(4, 36, 48)),
    ],
)
def test_locate_field_on_pipe_line(offset: int, expected: FieldSpan) -> None:
    """Each cursor column maps to the enclosing 1-based field and its span."""
    assert locate_field(LINE, offset) == expected


def test_locate_field_text() -> None:
    """`FieldSpan.text` slices the field out of the line."""
    span = locate_field(LINE, 20)
    assert span.text(LINE) == "Blade Runner (1982)"


def test_locate_field_tag_line_ignores_separators() -> None:
    """On a tag line the remainder after the prefix is field 1, pipes included."""
    line = "PL: One | two | three"
    assert locate_field(line, 12) == FieldSpan(1, 4, len(line))
    assert field_count(line) == 1


def test_locate_field_clamps_offset() -> None:
    """Negative and too large offsets are clamped to the line."""
    assert locate_field("a|b", -3) == FieldSpan(1, 0, 1)
    assert locate_field("a|b", 99) == FieldSpan(2, 2, 3)


def test_locate_field_empty_line() -> None:
    """An empty line has one empty field."""
    assert locate_field("", 0) == FieldSpan(1, 0, 0)


def test_field_span_by_index() -> None:
    """`field_span` returns spans by number and None past the last field."""
    assert field_span(LINE, 2) == FieldSpan(2, 15, 34)
    assert field_span(LINE, 4) == FieldSpan(4, 36, 48)
    assert field_span(LINE, 5) is None
    assert field_span(LINE, 0) is None
    assert field_span("PL: text", 1) == FieldSpan(1, 4, 8)
    assert field_span("PL: text", 2) is None


def test_field_count_and_tag_detection() -> None:
    """Field counts follow the delimiters; tags need two capitals and ': '."""
    assert field_count(LINE) == 4
    assert field_count("no fields here") == 1
    assert is_tag_line("MV: Blade Runner (1982)")
    assert not is_tag_line("Mv: lower case")
    assert not is_tag_line("MVX: three letters")

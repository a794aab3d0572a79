# iad/core/FieldTransformer.py
"""FieldTransformer Module
========================
Field-level text manipulation for pipe-delimited and tag-prefixed records.

A record line is either pipe-delimited::

    Ford, Harrison|Blade Runner (1982)||Rick Deckard

or tag-prefixed, where a two-letter upper-case tag owns the whole line::

    PL: A blade runner must pursue and terminate four replicants.

Every operation here works on a single line and a cursor column, and is a
pure function of its inputs: nothing is cached between calls, a `FieldSpan`
is recomputed every time.

Key Features:
-------------
- Field Locator: `locate_field`, `field_count`, `field_span`.
- Field Copier: `copy_field` copies the field under the cursor from the
  previous or next line, keeping the exact three-way donor classification
  (terminated field / final unterminated field / too few fields).
- Name Swapper: `swap_name` rewrites "First Middle Last" as
  "Last, First Middle".
- Name span detection (`locate_name`) shared with the numeral counter and
  the link markup helpers.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from iad.core.EditResult import (
    AlreadyPunctuatedError,
    EditResult,
    FieldCountError,
    InsufficientTokensError,
    NoSyntaxError,
    SpanEdit,
    TransformError,
)


logger = logging.getLogger("iad")

FIELD_SEPARATOR = "|"
# A record line owned by a two-letter tag, e.g. "PL: " or "MV: ".
TAG_PREFIX_RE = re.compile(r"^[A-Z]{2}: ")
# Looser prefix accepted around names: "NM: ", "#BY: ", "@Director: ".
NAME_TAG_PREFIX_RE = re.compile(r"^[#@]*[A-Za-z]+: ")
NAME_COLON_BOUNDARY = ": "
# Trailing disambiguation suffix on a name, e.g. " (III)".
NUMERAL_SUFFIX_RE = re.compile(r"\s+\(([IVXL]+)\)$")

DIRECTIONS = ("previous", "next")


@dataclass(frozen=True)
class FieldSpan:
    """A field of a record line, as seen from a cursor column.

    Attributes:
        index: 1-based field number.
        start: Column of the first character of the field.
        end: Column just after the field (the delimiter or line end).
    """

    index: int
    start: int
    end: int

    def text(self, line: str) -> str:
        return line[self.start : self.end]


## ==================== Field Locator ====================
def is_tag_line(line: str) -> bool:
    """Tells whether `line` is a tag-prefixed record line."""
    return TAG_PREFIX_RE.match(line) is not None


def field_count(line: str) -> int:
    """Number of fields on `line`: one per tag line, `|` count + 1 otherwise."""
    if is_tag_line(line):
        return 1
    return line.count(FIELD_SEPARATOR) + 1


def locate_field(line: str, offset: int) -> FieldSpan:
    """Finds the field that contains the cursor column `offset`.

    The search runs backward to the previous `|` (or line start) and forward
    to the next `|` (or line end). A cursor sitting on a delimiter belongs to
    the field on its left, which may be empty. On a tag line the whole text
    after the prefix is field 1 and `|` characters are ordinary text.

    Args:
        line: The record line.
        offset: Cursor column; clamped into `0..len(line)`.

    Returns:
        The enclosing `FieldSpan`. This never fails.

    Example:
        >>> locate_field("a|bc|d", 3)
        FieldSpan(index=2, start=2, end=4)
    """
    offset = min(max(offset, 0), len(line))

    tag = TAG_PREFIX_RE.match(line)
    if tag:
        return FieldSpan(1, tag.end(), len(line))

    start = line.rfind(FIELD_SEPARATOR, 0, offset) + 1
    end = line.find(FIELD_SEPARATOR, offset)
    if end == -1:
        end = len(line)
    index = line.count(FIELD_SEPARATOR, 0, start) + 1
    return FieldSpan(index, start, end)


def field_span(line: str, index: int) -> Optional[FieldSpan]:
    """Returns the span of field `index` on `line`, or None if it has fewer fields."""
    if index < 1:
        return None

    tag = TAG_PREFIX_RE.match(line)
    if tag:
        return FieldSpan(1, tag.end(), len(line)) if index == 1 else None

    start = 0
    for _ in range(index - 1):
        pos = line.find(FIELD_SEPARATOR, start)
        if pos == -1:
            return None
        start = pos + 1
    end = line.find(FIELD_SEPARATOR, start)
    return FieldSpan(index, start, len(line) if end == -1 else end)


## ==================== Field Copier ====================
def _donor_field(donor: Optional[str], index: int, direction: str) -> tuple[str, bool]:
    """Extracts field `index` from the donor line.

    Returns:
        A `(text, terminated)` pair; `terminated` is True when the donor field
        is closed by a `|` (the donor carries more fields after it).

    Raises:
        NoSyntaxError: No donor line, or a donor with no field structure.
        FieldCountError: The donor lacks field `index`.
    """
    if donor is None:
        raise NoSyntaxError.on(direction)

    tag = TAG_PREFIX_RE.match(donor)
    if tag:
        if index == 1:
            return donor[tag.end() :], False
        raise FieldCountError.on(direction)

    delimiters = donor.count(FIELD_SEPARATOR)
    if delimiters == 0:
        raise NoSyntaxError.on(direction)

    parts = donor.split(FIELD_SEPARATOR)
    if delimiters >= index:
        return parts[index - 1], True
    # Exactly one delimiter short: the last field is valid when it has text.
    if delimiters == index - 1 and parts[-1]:
        return parts[-1], False
    raise FieldCountError.on(direction)


def _copy_field(
    line: str,
    offset: int,
    donor: Optional[str],
    direction: str,
    field: Optional[int],
    insert_separator: bool,
) -> SpanEdit:
    if direction not in DIRECTIONS:
        raise ValueError(f"direction must be one of {DIRECTIONS}, got {direction!r}")

    index = field if field is not None else locate_field(line, offset).index
    text, terminated = _donor_field(donor, index, direction)

    span = field_span(line, index)
    if span is None:
        # Current line is short: pad with delimiters and append at the end.
        padding = FIELD_SEPARATOR * (index - field_count(line))
        start = end = len(line)
        text = padding + text
    else:
        start, end = span.start, span.end

    tag_mode = is_tag_line(line)
    followed_by_separator = end < len(line) and line[end] == FIELD_SEPARATOR
    if insert_separator and terminated and not tag_mode and not followed_by_separator:
        text += FIELD_SEPARATOR

    return SpanEdit(start, end, text, start + len(text))


def copy_field(
    line: str,
    offset: int,
    donor: Optional[str],
    direction: str = "previous",
    field: Optional[int] = None,
    insert_separator: bool = True,
) -> EditResult:
    """Copies a field from an adjacent line into the same field of `line`.

    The field number N is the field under `offset` unless `field` is given.
    The donor line is classified three ways:

    1. It has at least N delimiters: field N is terminated and copied.
    2. It has exactly N-1 delimiters and text after the last one: that final,
       unterminated field is still valid and copied.
    3. Anything else fails with `FieldCountError`.

    A donor with no delimiter at all (or no donor line) fails with
    `NoSyntaxError`. When the copied field was terminated on the donor and
    the target field is not already followed by `|`, a separator is appended
    so the next field can be typed straight away.

    Args:
        line: The current line.
        offset: Cursor column on `line`.
        donor: The previous or next line, or None when there is none.
        direction: "previous" or "next"; used in failure messages.
        field: Explicit 1-based field number overriding the cursor field.
        insert_separator: Whether to add the trailing `|` described above.

    Returns:
        An `EditResult`; on failure `line` must be left untouched.
    """
    try:
        edit = _copy_field(line, offset, donor, direction, field, insert_separator)
    except TransformError as e:
        logger.debug(f"copy_field ({direction}) failed: {e}")
        return EditResult.failure(e)
    return EditResult.success(edit)


## ==================== Name span ====================
def locate_name(line: str, offset: int) -> tuple[int, int]:
    """Finds the name around `offset`, excluding surrounding blanks.

    Boundaries are `|`, `": "` and a leading tag prefix such as `NM: ` or
    `#BY: `; the name ends at the next `|` or at the end of the line.

    Returns:
        A `(start, end)` column pair; `start == end` for an empty name.
    """
    offset = min(max(offset, 0), len(line))

    start = line.rfind(FIELD_SEPARATOR, 0, offset) + 1
    colon = line.rfind(NAME_COLON_BOUNDARY, 0, offset)
    if colon != -1:
        start = max(start, colon + len(NAME_COLON_BOUNDARY))
    tag = NAME_TAG_PREFIX_RE.match(line)
    if tag:
        start = max(start, tag.end())

    end = line.find(FIELD_SEPARATOR, max(offset, start))
    if end == -1:
        end = len(line)

    while start < end and line[start].isspace():
        start += 1
    while end > start and line[end - 1].isspace():
        end -= 1
    return start, end


## ==================== Name Swapper ====================
def _swap_name(line: str, offset: int, given: int) -> SpanEdit:
    given = max(1, given)
    start, end = locate_name(line, offset)
    name = line[start:end]

    if "," in name:
        raise AlreadyPunctuatedError()

    suffix = ""
    numeral = NUMERAL_SUFFIX_RE.search(name)
    if numeral:
        suffix = f" ({numeral.group(1)})"
        name = name[: numeral.start()]

    tokens = name.split()
    # Need `given` separating spaces, i.e. at least one token left over.
    if len(tokens) <= given:
        raise InsufficientTokensError()

    head = " ".join(tokens[:given])
    tail = " ".join(tokens[given:])
    text = f"{tail}, {head}{suffix}"
    return SpanEdit(start, end, text, start + len(text))


def swap_name(line: str, offset: int, given: int = 1) -> EditResult:
    """Rewrites the name at `offset` as "Surname, Given names".

    The first `given` space-separated tokens are moved behind a comma:
    with `given=1`, "Philip Seymour Hoffman" becomes
    "Seymour Hoffman, Philip"; with `given=2` it becomes
    "Hoffman, Philip Seymour". A trailing numeral suffix such as " (II)"
    stays at the end. Applying the swap a second time fails, since the
    name then holds a comma.

    Failures:
        - `AlreadyPunctuatedError` if the name already contains a comma.
        - `InsufficientTokensError` if fewer than `given` spaces separate
          its tokens.
    """
    try:
        edit = _swap_name(line, offset, given)
    except TransformError as e:
        logger.debug(f"swap_name(given={given}) failed: {e}")
        return EditResult.failure(e)
    return EditResult.success(edit)

# iad/core/LinkMarkup.py
"""Cross-reference ("qv") markup for names and titles in free text.

Trivia, biographies and plot summaries refer to other entries with::

    'Harrison Ford' (qv)
    _Blade Runner (1982)_ (qv)

`insert_link` wraps a region of the current line in the right form, picking
title markup when the text ends in a year token.
"""

from __future__ import annotations

import logging
import re

from iad.core.EditResult import (
    AlreadyLinkedError,
    EditResult,
    NothingToDoError,
    SpanEdit,
    TransformError,
)
from iad.core.FieldTransformer import locate_name


logger = logging.getLogger("iad")

LINK_MARKER = "(qv)"
# "(1982)", "(????)", "(1982/II)" at the end of a title.
TITLE_YEAR_RE = re.compile(r"\((\d{4}|\?{4})(/[IVXL]+)?\)$")


def is_title(text: str) -> bool:
    """Tells whether `text` looks like a title, i.e. ends with a year token."""
    return TITLE_YEAR_RE.search(text.strip()) is not None


def link_markup(text: str) -> str:
    """Returns the cross-reference markup for a name or title."""
    if is_title(text):
        return f"_{text}_ {LINK_MARKER}"
    return f"'{text}' {LINK_MARKER}"


def _insert_link(line: str, start: int, end: int) -> SpanEdit:
    start, end = sorted((min(max(start, 0), len(line)), min(max(end, 0), len(line))))
    if start == end:
        start, end = locate_name(line, start)
    else:
        # Drop blanks picked up at the edges of a selection.
        while start < end and line[start].isspace():
            start += 1
        while end > start and line[end - 1].isspace():
            end -= 1

    text = line[start:end]
    if not text:
        raise NothingToDoError()
    if LINK_MARKER in text or line[end:].lstrip().startswith(LINK_MARKER):
        raise AlreadyLinkedError()

    markup = link_markup(text)
    return SpanEdit(start, end, markup, start + len(markup))


def insert_link(line: str, start: int, end: int) -> EditResult:
    """Wraps `line[start:end]` in link markup.

    An empty region (`start == end`) selects the name around the cursor,
    bounded like a name field. Text that is already followed by or contains
    ``(qv)`` is rejected with `AlreadyLinkedError`.
    """
    try:
        edit = _insert_link(line, start, end)
    except TransformError as e:
        logger.debug(f"insert_link failed: {e}")
        return EditResult.failure(e)
    return EditResult.success(edit)

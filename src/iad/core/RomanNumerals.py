# iad/core/RomanNumerals.py
"""RomanNumerals Module
=====================
Increment and decrement the roman numeral suffix that tells apart people
sharing a name, e.g. ``Evans, Peter (III)``.

The counter is a small state machine over ``{absent, 1..50}``:

- ``absent`` +1 appends ``(I)``; ``absent`` -1 has nothing to do.
- ``v`` ±1 inside the table replaces the numeral.
- ``50`` +1 reports the end of the range and leaves the text alone.
- ``1`` -1 removes the suffix together with its separating space.

A numeral outside the table (``(LX)``, ``(IIII)``) is left alone in both
directions and reported as nothing to do, so a name never ends up with two
suffixes.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from iad.core.EditResult import (
    EditResult,
    NothingToDoError,
    RangeExhaustedError,
    SpanEdit,
    TransformError,
)
from iad.core.FieldTransformer import locate_name


logger = logging.getLogger("iad")

ROMAN_NUMERALS: tuple[str, ...] = (
    "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X",
    "XI", "XII", "XIII", "XIV", "XV", "XVI", "XVII", "XVIII", "XIX", "XX",
    "XXI", "XXII", "XXIII", "XXIV", "XXV", "XXVI", "XXVII", "XXVIII", "XXIX", "XXX",
    "XXXI", "XXXII", "XXXIII", "XXXIV", "XXXV", "XXXVI", "XXXVII", "XXXVIII", "XXXIX", "XL",
    "XLI", "XLII", "XLIII", "XLIV", "XLV", "XLVI", "XLVII", "XLVIII", "XLIX", "L",
)
MAX_NUMERAL = len(ROMAN_NUMERALS)

_NUMERAL_VALUES = {numeral: value for value, numeral in enumerate(ROMAN_NUMERALS, 1)}
_SUFFIX_RE = re.compile(r" \(([IVXL]+)\)$")


def numeral_value(numeral: str) -> Optional[int]:
    """Returns the value of a bare numeral ("IV" -> 4), or None outside the table."""
    return _NUMERAL_VALUES.get(numeral)


def numeral_suffix(value: int) -> str:
    """Returns the parenthesized suffix for `value`, e.g. 3 -> "(III)"."""
    if not 1 <= value <= MAX_NUMERAL:
        raise ValueError(f"numeral value out of range: {value}")
    return f"({ROMAN_NUMERALS[value - 1]})"


def next_numeral_value(value: Optional[int], step: int) -> Optional[int]:
    """Computes the next counter state.

    Args:
        value: Current suffix value, or None when the name has no suffix.
        step: +1 or -1.

    Returns:
        The new value, or None when the suffix must be removed.

    Raises:
        ValueError: `step` is not +1 or -1.
        RangeExhaustedError: Incrementing past the last numeral.
        NothingToDoError: Decrementing a name without a suffix.
    """
    if step not in (1, -1):
        raise ValueError(f"step must be +1 or -1, got {step!r}")

    if value is None:
        if step < 0:
            raise NothingToDoError()
        return 1

    new_value = value + step
    if new_value > MAX_NUMERAL:
        raise RangeExhaustedError()
    if new_value < 1:
        return None
    return new_value


def _step_numeral(line: str, offset: int, step: int) -> SpanEdit:
    start, end = locate_name(line, offset)
    name = line[start:end]
    if not name:
        raise NothingToDoError()

    match = _SUFFIX_RE.search(name)
    value = numeral_value(match.group(1)) if match else None
    new_value = next_numeral_value(value, step)
    if match and value is None:
        raise NothingToDoError()

    if value is None:
        # Only reachable on increment: append a fresh suffix.
        text = f" {numeral_suffix(1)}"
        return SpanEdit(end, end, text, end + len(text))

    suffix_start = start + match.start()
    if new_value is None:
        return SpanEdit(suffix_start, end, "", suffix_start)
    text = f" {numeral_suffix(new_value)}"
    return SpanEdit(suffix_start, end, text, suffix_start + len(text))


def step_numeral(line: str, offset: int, step: int) -> EditResult:
    """Adds `step` (+1/-1) to the numeral suffix of the name at `offset`."""
    try:
        edit = _step_numeral(line, offset, step)
    except TransformError as e:
        logger.debug(f"step_numeral({step:+d}) failed: {e}")
        return EditResult.failure(e)
    return EditResult.success(edit)

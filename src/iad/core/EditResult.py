# iad/core/EditResult.py
"""EditResult Module
==================
Result and error types shared by every line transformation in `iad.core`.

Transformations never hand exceptions back to the host editor. Internally
they raise a `TransformError` subclass; the public entry points convert it
into a failed `EditResult`, and the command layer turns that into a status
message. A successful result carries a single `SpanEdit`: one replacement on
the current line plus the column the cursor should land on.

Classes:
--------
- `SpanEdit`: A replacement of `line[start:end]` with `text`.
- `EditResult`: Tagged success/failure result.
- `TransformError` and its subclasses: user-facing failure reasons.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


## ==================== Errors ====================
class TransformError(Exception):
    """Base class for all recoverable transformation failures.

    The exception text is the short, user-facing status message.
    """

    default_message = "Cannot transform this line"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class NoSyntaxError(TransformError):
    """The adjacent line has no recognizable field structure."""

    default_message = "No valid syntax found on adjacent line."

    @classmethod
    def on(cls, direction: str) -> "NoSyntaxError":
        return cls(f"No valid syntax found on {direction} line.")


class FieldCountError(TransformError):
    """The adjacent line has fewer fields than the copy requires."""

    default_message = "Not enough data fields on adjacent line."

    @classmethod
    def on(cls, direction: str) -> "FieldCountError":
        return cls(f"Not enough data fields on {direction} line.")


class AlreadyPunctuatedError(TransformError):
    default_message = "Name already has a comma"


class InsufficientTokensError(TransformError):
    default_message = "Name has not enough parts"


class RangeExhaustedError(TransformError):
    default_message = "End of numeral range"


class NothingToDoError(TransformError):
    default_message = "Nothing to do"


class AlreadyLinkedError(TransformError):
    default_message = "Already linked"


## ==================== Results ====================
@dataclass(frozen=True)
class SpanEdit:
    """A single replacement on one line.

    Attributes:
        start: First column replaced.
        end: Column after the last replaced character.
        text: Replacement text.
        cursor: Cursor column after the edit has been applied.
    """

    start: int
    end: int
    text: str
    cursor: int

    def apply(self, line: str) -> str:
        """Returns `line` with this edit applied."""
        return line[: self.start] + self.text + line[self.end :]


@dataclass(frozen=True)
class EditResult:
    """Outcome of a transformation: either an edit or a failure reason."""

    edit: Optional[SpanEdit] = None
    error: Optional[TransformError] = None

    @classmethod
    def success(cls, edit: SpanEdit) -> "EditResult":
        return cls(edit=edit)

    @classmethod
    def failure(cls, error: TransformError) -> "EditResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.edit is not None

    @property
    def message(self) -> str:
        """The failure text, or an empty string for a successful edit."""
        return self.error.message if self.error is not None else ""

    def apply(self, line: str) -> str:
        """Returns the edited line, or `line` unchanged when the result failed."""
        return self.edit.apply(line) if self.edit is not None else line

# iad/core/TextSurface.py
"""TextSurface Module
===================
The capability interface through which every command reaches the host
editor, and `LineBuffer`, an in-memory implementation of it.

The commands in `SubmissionMode` never touch a window, keymap or undo list.
They only need to read the current line and its neighbours, replace a span
on the current line, move the cursor along that line, show a transient status
message and, for templates, insert whole lines. Any editor that can provide
these operations can host the extension; `LineBuffer` is what the command
line tools and the test-suite use.

Classes:
--------
- `TextSurface`: Structural protocol expected by `SubmissionMode`.
- `LineBuffer`: A list-of-lines buffer with a cursor, a selection and a
  status message, modelled after the editor state attributes
  (`text`, `cursor_y`, `cursor_x`, `status_message`).
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, Sequence, runtime_checkable


logger = logging.getLogger("iad")


@runtime_checkable
class TextSurface(Protocol):
    """Operations a host editor must provide to run submission commands."""

    def current_line(self) -> str:
        """Returns the text of the line holding the cursor."""
        ...

    def line_at(self, offset: int) -> Optional[str]:
        """Returns the line `offset` lines away from the current one, or None."""
        ...

    def replace_span(self, start: int, end: int, text: str) -> None:
        """Replaces columns `[start, end)` of the current line with `text`."""
        ...

    def get_cursor(self) -> int:
        """Returns the cursor column on the current line."""
        ...

    def set_cursor(self, column: int) -> None:
        """Moves the cursor to `column` on the current line."""
        ...

    def set_status_message(self, message: str) -> None:
        """Shows a short, transient status message."""
        ...

    def insert_lines(self, lines: Sequence[str]) -> None:
        """Inserts `lines` after the current line and moves onto the first one."""
        ...

    def selection(self) -> Optional[tuple[int, int]]:
        """Returns the selected column span on the current line, or None."""
        ...


## ==================== LineBuffer ====================
class LineBuffer:
    """In-memory `TextSurface` over a list of lines.

    Attributes:
        text (list[str]): The buffer, one string per line.
        cursor_y (int): Current line index.
        cursor_x (int): Current column.
        selection_start (Optional[int]): Column where the selection starts on
            the current line, or None when nothing is selected.
        status_message (str): Last status message.
        modified (bool): Set once any edit has been applied.
    """

    def __init__(
        self,
        text: Optional[Sequence[str]] = None,
        cursor_y: int = 0,
        cursor_x: int = 0,
    ) -> None:
        self.text: list[str] = list(text) if text else [""]
        self.cursor_y = cursor_y
        self.cursor_x = cursor_x
        self.selection_start: Optional[int] = None
        self.status_message = "Ready"
        self.modified = False
        self._ensure_cursor_in_bounds()

    @classmethod
    def from_string(cls, content: str, cursor_y: int = 0, cursor_x: int = 0) -> "LineBuffer":
        return cls(content.splitlines() or [""], cursor_y, cursor_x)

    def to_string(self) -> str:
        return "\n".join(self.text)

    def _ensure_cursor_in_bounds(self) -> None:
        """Clamps the cursor to the existing text."""
        self.cursor_y = min(max(self.cursor_y, 0), len(self.text) - 1)
        self.cursor_x = min(max(self.cursor_x, 0), len(self.text[self.cursor_y]))

    # --- TextSurface protocol ---
    def current_line(self) -> str:
        return self.text[self.cursor_y]

    def line_at(self, offset: int) -> Optional[str]:
        index = self.cursor_y + offset
        if 0 <= index < len(self.text):
            return self.text[index]
        return None

    def replace_span(self, start: int, end: int, text: str) -> None:
        line = self.text[self.cursor_y]
        if not 0 <= start <= end <= len(line):
            raise IndexError(f"span [{start}, {end}) out of bounds for line of length {len(line)}")
        self.text[self.cursor_y] = line[:start] + text + line[end:]
        self.modified = True
        logging.debug(f"LineBuffer: replaced [{start}, {end}) on line {self.cursor_y} with {text!r}")

    def get_cursor(self) -> int:
        return self.cursor_x

    def set_cursor(self, column: int) -> None:
        self.cursor_x = column
        self._ensure_cursor_in_bounds()

    def set_status_message(self, message: str) -> None:
        self.status_message = str(message)

    def insert_lines(self, lines: Sequence[str]) -> None:
        if not lines:
            return
        at = self.cursor_y + 1
        # An empty current line is taken over instead of left behind.
        if self.text[self.cursor_y] == "":
            at = self.cursor_y
            del self.text[at]
        self.text[at:at] = list(lines)
        self.cursor_y, self.cursor_x = at, 0
        self.modified = True

    def selection(self) -> Optional[tuple[int, int]]:
        if self.selection_start is None or self.selection_start == self.cursor_x:
            return None
        return tuple(sorted((self.selection_start, self.cursor_x)))  # type: ignore[return-value]

# iad/ui/Highlighter.py
"""Highlighter Module
===================
Syntax highlighting of submission documents for host editors and terminals.

Host editors receive each line as a list of ``(text, color_name)`` segments,
where the color name is a semantic slot ("keyword", "tag", "separator", ...)
that the editor maps to its own attributes. The mapping from Pygments token
types to slots is read from the ``[colors]`` section of the configuration and
walks up the token hierarchy, so ``Comment.Single`` falls back to
``Comment`` when only the latter is configured.

Terminal output (the ``iad highlight`` command) goes through
`pygments.highlight` with the `TerminalFormatter`.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Optional

from pygments import highlight, lex
from pygments.formatters import TerminalFormatter
from pygments.token import Token, _TokenType

from iad.ui.SubmissionLexer import SubmissionLexer


logger = logging.getLogger("iad")

# Pygments token type -> semantic color slot.
TOKEN_SLOTS: dict[_TokenType, str] = {
    Token.Keyword: "keyword",
    Token.Comment: "comment",
    Token.Name.Tag: "tag",
    Token.Punctuation: "separator",
    Token.Name.Attribute: "link",
    Token.Literal.String: "link",
    Token.Literal.Number: "year",
    Token.Name.Decorator: "numeral",
    Token.Name.Builtin: "attribute",
}

DEFAULT_SLOT = "default"


class Highlighter:
    """Tokenizes submission lines into colored segments.

    Attributes:
        colors (dict[str, Any]): Slot name -> host color value, from the
            ``[colors]`` configuration section. Slots missing there resolve
            to the value of ``"default"``.
        lexer (SubmissionLexer): The Pygments lexer in use.
    """

    def __init__(self, config: Optional[dict[str, Any]] = None) -> None:
        self.colors: dict[str, Any] = dict((config or {}).get("colors", {}))
        self.lexer = SubmissionLexer(stripnl=False, ensurenl=False)
        # Per-instance memoization of identical lines.
        self.tokenize_line = functools.lru_cache(maxsize=4096)(self._tokenize_line)

    def slot_for(self, token_type: _TokenType) -> str:
        """Returns the color slot of a token type, walking up its parents."""
        current = token_type
        while current is not None:
            if current in TOKEN_SLOTS:
                return TOKEN_SLOTS[current]
            current = current.parent
        return DEFAULT_SLOT

    def color_for(self, slot: str) -> Any:
        return self.colors.get(slot, self.colors.get(DEFAULT_SLOT, slot))

    def _tokenize_line(self, line: str) -> list[tuple[str, Any]]:
        """Returns the colored segments of `line`, merging neighbours of one color."""
        if not line:
            return [("", self.color_for(DEFAULT_SLOT))]

        segments: list[tuple[str, Any]] = []
        try:
            for token_type, value in lex(line, self.lexer):
                if not value or value == "\n":
                    continue
                color = self.color_for(self.slot_for(token_type))
                if segments and segments[-1][1] == color:
                    segments[-1] = (segments[-1][0] + value, color)
                else:
                    segments.append((value, color))
        except Exception as e:
            logging.error(f"Tokenization error for line '{line[:70]}': {e}")
            return [(line, self.color_for(DEFAULT_SLOT))]
        return segments or [(line, self.color_for(DEFAULT_SLOT))]

    def highlight_lines(self, lines: list[str]) -> list[list[tuple[str, Any]]]:
        """Returns the segments of each line in `lines`."""
        return [self.tokenize_line(line) for line in lines]


def highlight_text(text: str) -> str:
    """Renders a whole document with ANSI colors for a terminal."""
    return highlight(text, SubmissionLexer(), TerminalFormatter())

# iad/ui/SubmissionLexer.py
"""Pygments lexer for submission documents.

Token mapping:

- section headers (``ACTOR``, ``PLOT:``) -> ``Keyword``
- ``# ...`` comment lines -> ``Comment``
- record tags (``PL: ``, ``#BY: ``) -> ``Name.Tag``
- ``|`` field separators -> ``Punctuation``
- ``(qv)`` markers and ``_Title (Year)_`` / ``'Name'`` links -> ``Name.Attribute`` / ``String``
- years ``(1982)``, ``(????)`` -> ``Number``
- roman numeral suffixes ``(III)`` -> ``Name.Decorator``
- other parenthesized attributes ``(voice)`` -> ``Name.Builtin``
"""

from __future__ import annotations

from pygments.lexer import RegexLexer, bygroups
from pygments.token import (
    Comment,
    Keyword,
    Name,
    Number,
    Punctuation,
    String,
    Text,
    Whitespace,
)


class SubmissionLexer(RegexLexer):
    """Highlights pipe-delimited and tag-prefixed submission records."""

    name = "Submission"
    aliases = ["iad", "submission"]
    filenames = ["*.iad"]
    mimetypes = ["text/x-iad-submission"]

    tokens = {
        "root": [
            (r"^[ \t]*#(?![A-Z]{2}: ).*?$", Comment.Single),
            (r"^([ \t]*)([A-Z][A-Z0-9-]{2,})([ \t]*:?[ \t]*)$", bygroups(Whitespace, Keyword, Whitespace)),
            (r"^[#@]*[A-Z]{2}: ", Name.Tag),
            (r"\n", Whitespace),
            (r"\|", Punctuation),
            (r"\(qv\)", Name.Attribute),
            (r"_[^_\n|]+_", String),
            (r"'[^'\n|]+'(?= \(qv\))", String),
            (r"\((?:\d{4}|\?{4})(?:/[IVXL]+)?\)", Number),
            (r"\([IVXL]+\)", Name.Decorator),
            (r"\([^()\n|]*\)", Name.Builtin),
            (r"[^|()_'\n]+", Text),
            (r".", Text),
        ],
    }

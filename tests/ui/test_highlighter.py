# tests/ui/test_highlighter.py
"""Highlighter Tests
====================

Tests for the submission lexer and the line highlighter.

This module verifies that:
- The Pygments lexer is registered under its aliases and file pattern.
- Lines split into segments whose colors come from the `[colors]` settings.
- Token types missing from the settings fall back to the default color.
- Tokenization is memoized per line.
"""

from pygments.token import Comment, Keyword, Name, Number, Punctuation

from iad.ui.Highlighter import DEFAULT_SLOT, Highlighter, highlight_text
from iad.ui.SubmissionLexer import SubmissionLexer


COLORS = {
    "default": "white",
    "keyword": "blue",
    "comment": "grey",
    "tag": "magenta",
    "separator": "yellow",
    "link": "green",
    "year": "cyan",
    "numeral": "red",
    "attribute": "purple",
}


def make_highlighter() -> Highlighter:
    return Highlighter({"colors": COLORS})


def test_lexer_metadata() -> None:
    """The lexer answers to its aliases and the *.iad pattern."""
    assert "iad" in SubmissionLexer.aliases
    assert "*.iad" in SubmissionLexer.filenames


def test_lexer_token_types() -> None:
    """Headers, comments, tags, separators, years and numerals are recognized."""
    lexer = SubmissionLexer()
    tokens = {value: token for token, value in lexer.get_tokens("ACTOR\n# note\nFord, Harrison (I)|Alien (1979)\nPL: x\n")}

    assert tokens["ACTOR"] is Keyword
    assert tokens["# note"] is Comment.Single
    assert tokens["(I)"] is Name.Decorator
    assert tokens["|"] is Punctuation
    assert tokens["(1979)"] is Number
    assert tokens["PL: "] is Name.Tag


def test_tokenize_record_line() -> None:
    """A cast record splits into text, numeral, separators and year."""
    segments = make_highlighter().tokenize_line("Ford, Harrison (I)|Blade Runner (1982)||Rick Deckard")

    assert segments == [
        ("Ford, Harrison ", "white"),
        ("(I)", "red"),
        ("|", "yellow"),
        ("Blade Runner ", "white"),
        ("(1982)", "cyan"),
        ("||", "yellow"),
        ("Rick Deckard", "white"),
    ]


def test_tokenize_links_and_attributes() -> None:
    """Link markup and parenthesized attributes get their own colors."""
    segments = make_highlighter().tokenize_line("TR: Met 'Harrison Ford' (qv) (voice)")

    assert ("TR: ", "magenta") in segments
    assert ("'Harrison Ford'", "green") in segments
    assert ("(voice)", "purple") in segments


def test_header_and_comment_lines() -> None:
    """Whole-line tokens keep their slot colors."""
    highlighter = make_highlighter()

    assert highlighter.tokenize_line("ACTOR") == [("ACTOR", "blue")]
    assert highlighter.tokenize_line("# Name|Title") == [("# Name|Title", "grey")]
    assert highlighter.tokenize_line("") == [("", "white")]


def test_missing_colors_fall_back_to_default() -> None:
    """Slots absent from the settings use the default color, then the slot name."""
    highlighter = Highlighter({"colors": {"default": "white"}})
    assert highlighter.tokenize_line("a|b") == [("a|b", "white")]

    bare = Highlighter()
    assert bare.color_for("keyword") == "keyword"
    assert bare.slot_for(Keyword.Reserved) == "keyword"
    assert bare.slot_for(Name.Variable) == DEFAULT_SLOT


def test_tokenize_line_is_memoized() -> None:
    """Identical lines are tokenized once per highlighter."""
    highlighter = make_highlighter()
    highlighter.highlight_lines(["a|b", "a|b", "c"])

    info = highlighter.tokenize_line.cache_info()
    assert info.hits == 1
    assert info.misses == 2


def test_highlight_text_for_terminal() -> None:
    """Terminal rendering keeps the text and adds ANSI escapes."""
    output = highlight_text("ACTOR\nFord, Harrison|Blade Runner (1982)||Rick Deckard\n")

    assert "\x1b[" in output
    assert "Rick Deckard" in output

# tests/conftest.py
"""Pytest configuration with shared fixtures for the iad tests.

Provides a small keyword catalog covering every descriptor shape
(pipe-delimited, tag-prefixed, literal help, help taken from another
keyword, explicit template), a default configuration and a factory for
in-memory text buffers.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Callable, Optional, Sequence

import pytest

from iad.catalog.KeywordCatalog import KeywordCatalog
from iad.core.TextSurface import LineBuffer
from iad.utils.utils import DEFAULT_CONFIG


SAMPLE_CATALOG = '''
[catalog]
version = "test-1"

[keywords.ACTOR]
description = "Male cast member of a title."
guide = "cast"
mailbox = "cast"
syntax = ["Name|Title|Attribute|Character"]
example = ["Ford, Harrison|Blade Runner (1982)||Rick Deckard"]
attribute_syntax = "(uncredited) | (voice)"
replace_syntax = "Name|Title|Old character|New character"

[keywords.DIRECTOR]
description = "Director of a title."
guide = "crew"
mailbox = "crew"
syntax = ["Name|Title|Attribute"]
example = ["Scott, Ridley|Blade Runner (1982)|"]

[keywords.EDITOR]
description = "Film editor of a title."
guide = "crew"
mailbox = "crew"
syntax = ["Name|Title|Attribute"]
example = ["Carter, Marsha|Blade Runner (1982)|"]
help_from = "DIRECTOR"

[keywords.PLOT]
description = "Plot summary of a title."
guide = "texts/plot"
mailbox = "plots"
syntax = ["MV: Title", "PL: Plot text", "BY: Author"]
example = ["MV: Blade Runner (1982)", "PL: A blade runner hunts replicants.", "BY: Anonymous"]

[keywords.SALARY]
description = "A salary paid to a person."
guide = "names/biography"
mailbox = "bios"
syntax = ["NM: Name", "SA: Title -> Amount"]
help = "One SA line per salary."

[keywords.LITERATURE]
description = "Literature related to a title."
guide = "texts/literature"
mailbox = "business"
syntax = ["MV: Title", "NO: Novel", "BO: Book"]
template = ["MV: {title}", "NO: {novel}"]
'''


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user configuration at a file that does not exist.

    Keeps a real `~/.config/iad/config.toml` from leaking into tests.

    Returns:
        Path: The (missing) configuration path.
    """
    path = tmp_path / "no-such-config.toml"
    monkeypatch.setenv("IAD_CONFIG", str(path))
    return path


@pytest.fixture
def catalog() -> KeywordCatalog:
    """Provide the small sample catalog.

    Returns:
        KeywordCatalog: Catalog parsed from `SAMPLE_CATALOG`.
    """
    return KeywordCatalog.from_toml(SAMPLE_CATALOG)


@pytest.fixture
def config() -> dict[str, Any]:
    """Provide a fresh copy of the default configuration.

    Returns:
        dict[str, Any]: The default configuration, safe to modify.
    """
    return copy.deepcopy(DEFAULT_CONFIG)


@pytest.fixture
def make_buffer() -> Callable[..., LineBuffer]:
    """Factory for `LineBuffer` instances positioned on a given line and column.

    Returns:
        Callable: `make_buffer(lines, y=0, x=None)` -> `LineBuffer`; `x=None`
        puts the cursor at the end of line `y`.
    """

    def _make(lines: Sequence[str], y: int = 0, x: Optional[int] = None) -> LineBuffer:
        buffer = LineBuffer(lines, cursor_y=y)
        buffer.cursor_x = len(buffer.text[buffer.cursor_y]) if x is None else x
        return buffer

    return _make

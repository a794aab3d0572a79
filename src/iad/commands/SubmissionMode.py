# iad/commands/SubmissionMode.py
"""SubmissionMode Module
======================
This module defines the `SubmissionMode` class, the command layer that a host
editor binds to keys and menus. Each command reads the current line (and,
where needed, a neighbouring line) from an injected `TextSurface`, runs one
of the pure transformations of `iad.core` or `iad.catalog`, and writes the
result back as a single span replacement.

Key Features:
-------------
- Field copying from the previous or next line, field by field.
- Name swapping into "Surname, Given" form and roman numeral suffix stepping.
- Cross-reference link markup around a selection or the name at the cursor.
- Section templates, keyword help and mailbox lookup for the section under
  the cursor.
- Failures never propagate to the host: they are shown as status messages
  and the buffer is left untouched.

Intended Usage:
---------------
The host creates one `SubmissionMode` per buffer, passing the surface that
wraps that buffer plus the application configuration. Every command returns
True when the buffer or the status message changed, i.e. when the host
should redraw.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from iad.catalog.HelpRenderer import mailbox_address, render_help
from iad.catalog.KeywordCatalog import (
    CatalogError,
    KeywordCatalog,
    UnknownKeywordError,
    load_catalog,
)
from iad.catalog.TemplateExpander import expand_template
from iad.core.EditResult import EditResult
from iad.core.FieldTransformer import copy_field, swap_name
from iad.core.LinkMarkup import insert_link
from iad.core.RomanNumerals import step_numeral
from iad.core.TextSurface import TextSurface
from iad.utils.logging_config import COMMAND_LOGGER


logger = logging.getLogger("iad")

# How far `current_keyword` looks upward for a section header.
SECTION_SCAN_LIMIT = 5000


## ================= SubmissionMode Class ====================
class SubmissionMode:
    """Editing commands for submission documents, bound to one text surface.

    Attributes:
        surface: The host buffer, seen through the `TextSurface` protocol.
        config: Application configuration. Read sections: `fields`, `names`,
            `help`, `routing`, `templates`.
        catalog: The keyword catalog; the packaged one unless injected.
        last_help: The text produced by the last `describe_keyword` call,
            for hosts that show help in a separate window.
    """

    def __init__(
        self,
        surface: TextSurface,
        config: Optional[dict[str, Any]] = None,
        catalog: Optional[KeywordCatalog] = None,
    ) -> None:
        self.surface = surface
        self.config: dict[str, Any] = config or {}
        self._catalog = catalog
        self.last_help: str = ""

    @property
    def catalog(self) -> KeywordCatalog:
        if self._catalog is None:
            self._catalog = load_catalog()
        return self._catalog

    # --- Shared plumbing ---
    def _apply(self, command: str, result: EditResult) -> bool:
        """Writes a successful result to the surface, or reports the failure."""
        COMMAND_LOGGER.debug(f"{command}: {'ok' if result.ok else result.message}")
        edit = result.edit
        if edit is None:
            logger.info(f"{command}: {result.message}")
            self.surface.set_status_message(result.message)
            return True

        self.surface.replace_span(edit.start, edit.end, edit.text)
        self.surface.set_cursor(edit.cursor)
        return True

    def _copy_field(self, offset: int, direction: str) -> bool:
        insert_separator = bool(self.config.get("fields", {}).get("insert_separator", True))
        result = copy_field(
            self.surface.current_line(),
            self.surface.get_cursor(),
            self.surface.line_at(offset),
            direction,
            insert_separator=insert_separator,
        )
        return self._apply(f"copy_field_from_{direction}", result)

    # --- Field commands ---
    def copy_field_from_previous(self) -> bool:
        """Copies the field under the cursor from the line above."""
        return self._copy_field(-1, "previous")

    def copy_field_from_next(self) -> bool:
        """Copies the field under the cursor from the line below."""
        return self._copy_field(1, "next")

    def swap_name(self, given: Optional[int] = None) -> bool:
        """Rewrites the name at the cursor as "Surname, Given names".

        Args:
            given: Number of leading tokens that are given names; defaults to
                `names.default_given` from the configuration (1).
        """
        if given is None:
            given = int(self.config.get("names", {}).get("default_given", 1))
        result = swap_name(self.surface.current_line(), self.surface.get_cursor(), given)
        return self._apply("swap_name", result)

    def increment_numeral(self) -> bool:
        """Raises the roman numeral suffix of the name at the cursor by one."""
        result = step_numeral(self.surface.current_line(), self.surface.get_cursor(), 1)
        return self._apply("increment_numeral", result)

    def decrement_numeral(self) -> bool:
        """Lowers the roman numeral suffix of the name at the cursor by one."""
        result = step_numeral(self.surface.current_line(), self.surface.get_cursor(), -1)
        return self._apply("decrement_numeral", result)

    def insert_link(self) -> bool:
        """Wraps the selection, or the name at the cursor, in link markup."""
        selection = self.surface.selection()
        if selection is None:
            cursor = self.surface.get_cursor()
            selection = (cursor, cursor)
        result = insert_link(self.surface.current_line(), *selection)
        return self._apply("insert_link", result)

    # --- Catalog commands ---
    def current_keyword(self) -> Optional[str]:
        """Returns the keyword of the section containing the cursor, if any."""
        for distance in range(SECTION_SCAN_LIMIT):
            line = self.surface.line_at(-distance)
            if line is None:
                return None
            keyword = self.catalog.header_keyword(line)
            if keyword:
                return keyword
        return None

    def insert_template(self, keyword: str, values: Optional[Mapping[str, Any]] = None) -> bool:
        """Inserts the section template of `keyword` after the current line."""
        COMMAND_LOGGER.debug(f"insert_template: {keyword}")
        try:
            lines = expand_template(self.catalog, keyword, values, self.config)
        except UnknownKeywordError as e:
            logger.info(f"insert_template: {e}")
            self.surface.set_status_message(str(e))
            return True

        self.surface.insert_lines(lines)
        self.surface.set_status_message(f"Inserted {self.catalog[keyword].name} template")
        return True

    def describe_keyword(self, keyword: Optional[str] = None) -> bool:
        """Renders help for `keyword`, or for the section under the cursor.

        The help text is stored in `last_help`; the status line shows the
        keyword's one-line description.
        """
        COMMAND_LOGGER.debug(f"describe_keyword: {keyword}")
        name = keyword or self.current_keyword()
        if not name:
            self.surface.set_status_message("No keyword here")
            return True
        try:
            self.last_help = render_help(self.catalog, name, self.config)
            description = self.catalog[name].description
        except UnknownKeywordError as e:
            self.surface.set_status_message(str(e))
            return True
        except CatalogError as e:
            logger.error(f"describe_keyword: broken help for '{name}': {e}")
            self.surface.set_status_message(f"Help unavailable for {name.upper()}")
            return True

        self.surface.set_status_message(f"{name.upper()}: {description}")
        return True

    def mailbox_for_section(self) -> Optional[str]:
        """Returns (and shows) the mailbox address of the section under the cursor."""
        name = self.current_keyword()
        if not name:
            self.surface.set_status_message("No keyword here")
            return None
        address = mailbox_address(self.catalog[name], self.config)
        self.surface.set_status_message(f"{name}: send to {address}" if address else f"{name}: no mailbox")
        return address or None

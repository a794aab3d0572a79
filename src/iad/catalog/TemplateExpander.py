# iad/catalog/TemplateExpander.py
"""TemplateExpander Module
========================
Generates the skeleton of a submission section for a catalog keyword.

The output of `expand_template` is driven by the `[templates]` table of the
configuration:

- `header` (str): Format of the section header line; `{keyword}` is replaced
  by the keyword name. Default: ``"{keyword}"``.
- `include_syntax` (bool): Add the formal syntax as comment lines.
- `include_example` (bool): Add the example record as comment lines.
- `records` (int): Number of empty records to generate.
- `comment_prefix` (str): Prefix of the comment lines. Default: ``"# "``.

Records are derived from the keyword's formal syntax. A pipe-delimited syntax
such as ``Name|Title|Attribute|Character`` yields one line with the same
number of fields; a tag syntax such as ``MV: Title`` / ``PL: Plot text``
yields one line per tag. Fields whose normalized name appears in `values`
(``title``, ``plot_text``, ...) are pre-filled, the others stay empty. A
descriptor with explicit `template` lines uses them instead, with
``{placeholder}`` substitution.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Optional

from iad.catalog.KeywordCatalog import KeywordCatalog, KeywordDescriptor
from iad.core.FieldTransformer import FIELD_SEPARATOR, TAG_PREFIX_RE


logger = logging.getLogger("iad")

DEFAULT_TEMPLATE_SETTINGS: dict[str, Any] = {
    "header": "{keyword}",
    "include_syntax": True,
    "include_example": False,
    "records": 1,
    "comment_prefix": "# ",
}


def field_key(name: str) -> str:
    """Normalizes a syntax field name into a value key ("Country:Rating" -> "country_rating")."""
    return re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_")


class _TemplateValues(dict):
    """Placeholder values; unknown placeholders expand to an empty string."""

    def __missing__(self, key: str) -> str:
        return ""


def _normalize_values(values: Optional[Mapping[str, Any]]) -> _TemplateValues:
    return _TemplateValues({field_key(k): str(v) for k, v in (values or {}).items()})


def record_lines(descriptor: KeywordDescriptor, values: Optional[Mapping[str, Any]] = None) -> list[str]:
    """Builds one record of `descriptor`, filling the fields found in `values`."""
    filled = _normalize_values(values)

    if descriptor.template:
        return [line.format_map(filled) for line in descriptor.template]

    lines = []
    for syntax_line in descriptor.syntax:
        tag = TAG_PREFIX_RE.match(syntax_line)
        if tag:
            lines.append(tag.group(0) + filled[field_key(syntax_line[tag.end():])])
        else:
            names = syntax_line.split(FIELD_SEPARATOR)
            lines.append(FIELD_SEPARATOR.join(filled[field_key(name)] for name in names))
    return lines


def template_settings(config: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """Returns the effective `[templates]` settings, defaults included."""
    settings = dict(DEFAULT_TEMPLATE_SETTINGS)
    settings.update((config or {}).get("templates", {}))
    return settings


def expand_template(
    catalog: KeywordCatalog,
    name: str,
    values: Optional[Mapping[str, Any]] = None,
    config: Optional[dict[str, Any]] = None,
) -> list[str]:
    """Expands the section template of keyword `name`.

    Args:
        catalog: The keyword catalog.
        name: Keyword to expand (case-insensitive).
        values: Field values to pre-fill, keyed by field name.
        config: Application configuration; only `[templates]` is read.

    Returns:
        The lines of the section, header first.

    Raises:
        UnknownKeywordError: `name` is not in the catalog.

    Example:
        >>> expand_template(catalog, "actor", {"title": "Blade Runner (1982)"})
        ['ACTOR', '# Name|Title|Attribute|Character', '|Blade Runner (1982)||']
    """
    descriptor = catalog[name]
    settings = template_settings(config)
    prefix = str(settings["comment_prefix"])

    lines = [str(settings["header"]).format(keyword=descriptor.name)]
    if settings["include_syntax"]:
        lines.extend(f"{prefix}{line}" for line in descriptor.syntax)
    if settings["include_example"]:
        lines.extend(f"{prefix}{line}" for line in descriptor.example)

    records = max(1, int(settings["records"]))
    for _ in range(records):
        lines.extend(record_lines(descriptor, values))

    logger.debug(f"Expanded template for '{descriptor.name}' into {len(lines)} lines.")
    return lines

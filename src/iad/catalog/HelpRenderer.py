# iad/catalog/HelpRenderer.py
"""Help rendering for catalog keywords.

`render_help` is the single place where help content is resolved: literal
help is returned verbatim, generated help is built from the descriptor it
points to. `render_keyword_index` lists every keyword with its summary.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from wcwidth import wcswidth

from iad.catalog.KeywordCatalog import (
    CatalogError,
    GeneratedHelp,
    KeywordCatalog,
    KeywordDescriptor,
    LiteralHelp,
)


logger = logging.getLogger("iad")


def guide_url(descriptor: KeywordDescriptor, config: Optional[dict[str, Any]] = None) -> str:
    """Returns the online guide URL of a keyword ("" when it has no guide page)."""
    if not descriptor.guide:
        return ""
    base = (config or {}).get("help", {}).get("guide_base_url", "")
    if not base:
        return descriptor.guide
    return f"{base.rstrip('/')}/{descriptor.guide.lstrip('/')}"


def mailbox_address(descriptor: KeywordDescriptor, config: Optional[dict[str, Any]] = None) -> str:
    """Returns the full mailbox address of a keyword, e.g. "cast@example.org"."""
    if not descriptor.mailbox:
        return ""
    domain = (config or {}).get("routing", {}).get("domain", "")
    return f"{descriptor.mailbox}@{domain}" if domain else descriptor.mailbox


def _generated_help(
    source: KeywordDescriptor, requested: KeywordDescriptor, config: Optional[dict[str, Any]]
) -> str:
    """Renders help for `requested` using the record format described by `source`."""
    lines = [f"{requested.name}: {requested.description}"]
    if source.name != requested.name:
        lines.append(f"(same format as {source.name})")
    lines.append("")
    lines.append("Syntax:")
    lines.extend(f"  {line}" for line in source.syntax)
    if source.attribute_syntax:
        lines.append("")
        lines.append("Attributes:")
        lines.append(f"  {source.attribute_syntax}")
    if source.replace_syntax:
        lines.append("")
        lines.append("Corrections:")
        lines.append(f"  {source.replace_syntax}")
    example = requested.example or source.example
    if example:
        lines.append("")
        lines.append("Example:")
        lines.extend(f"  {line}" for line in example)

    address = mailbox_address(requested, config)
    url = guide_url(source, config)
    if address or url:
        lines.append("")
    if address:
        lines.append(f"Questions: {address}")
    if url:
        lines.append(f"Guide: {url}")
    return "\n".join(lines)


def render_help(catalog: KeywordCatalog, name: str, config: Optional[dict[str, Any]] = None) -> str:
    """Renders the help text of keyword `name`.

    Literal help content is returned as is. Generated help follows the
    `GeneratedHelp` reference, possibly through several keywords, and renders
    the syntax, attribute and correction syntax and guide link of the keyword
    it ends on, under the description, example and mailbox of `name`.

    Raises:
        UnknownKeywordError: `name` (or a referenced keyword) is not in the catalog.
        CatalogError: Generated help references form a cycle.
    """
    requested = catalog[name]
    descriptor = requested
    seen = {descriptor.name}

    while True:
        content = descriptor.help
        if isinstance(content, LiteralHelp):
            return content.text
        if not isinstance(content, GeneratedHelp):
            raise CatalogError(f"Unsupported help content for '{descriptor.name}': {content!r}")
        if content.keyword == descriptor.name:
            return _generated_help(descriptor, requested, config)
        if content.keyword in seen:
            raise CatalogError(
                f"Help of '{requested.name}' refers back to itself through '{content.keyword}'"
            )
        seen.add(content.keyword)
        logger.debug(f"Help for '{requested.name}' taken from '{content.keyword}'.")
        descriptor = catalog[content.keyword]


def _pad(text: str, width: int) -> str:
    shown = wcswidth(text)
    if shown < 0:
        shown = len(text)
    return text + " " * max(0, width - shown)


def render_keyword_index(catalog: KeywordCatalog) -> str:
    """Lists all keywords and their descriptions in two aligned columns."""
    names = list(catalog)
    if not names:
        return ""
    width = max(max(wcswidth(name), len(name)) for name in names) + 2
    return "\n".join(f"{_pad(name, width)}{catalog[name].description}" for name in names)

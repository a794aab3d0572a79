# iad/catalog/KeywordCatalog.py
"""KeywordCatalog Module
======================
Read-only catalog of the record types (keywords) a submission may contain.

The catalog is a packaged TOML data asset (`keywords.toml`) parsed once into
frozen `KeywordDescriptor` records and exposed through an immutable mapping.
Nothing in the extension mutates it at runtime; `load_catalog()` memoizes the
parsed result, and `KeywordCatalog.from_toml()` builds independent catalogs
for tests or user-supplied data.

Help content is a tagged variant: a descriptor either carries literal help
text (`LiteralHelp`) or asks for the generated help of a keyword
(`GeneratedHelp`), by default its own. `iad.catalog.HelpRenderer` resolves
both with a single lookup.

Classes:
--------
- `LiteralHelp`, `GeneratedHelp`: the two help content variants.
- `KeywordDescriptor`: one catalog entry.
- `KeywordCatalog`: immutable name -> descriptor mapping.
- `UnknownKeywordError`, `CatalogError`: lookup and data asset failures.
"""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass, field
from importlib import resources
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Union

import toml


logger = logging.getLogger("iad")

CATALOG_RESOURCE = "keywords.toml"
# Section header of a submission document: a keyword alone on its line.
# Keywords are at least three characters, so empty tag lines (`PL:`) never match.
HEADER_RE = re.compile(r"^\s*([A-Z][A-Z0-9-]{2,})\s*:?\s*$")


class CatalogError(Exception):
    """The keyword data asset is missing or malformed."""


class UnknownKeywordError(KeyError):
    """Lookup of a keyword the catalog does not define."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown keyword: {self.name}"


## ==================== Help content ====================
@dataclass(frozen=True)
class LiteralHelp:
    """Help text shown verbatim."""

    text: str


@dataclass(frozen=True)
class GeneratedHelp:
    """Help rendered from the descriptor of `keyword`."""

    keyword: str


HelpContent = Union[LiteralHelp, GeneratedHelp]


## ==================== Descriptor ====================
@dataclass(frozen=True)
class KeywordDescriptor:
    """Static description of one record type.

    Attributes:
        name: Upper-case keyword, e.g. "ACTOR".
        description: One-line summary.
        guide: Guide page path, relative to the configured guide base URL.
        mailbox: Local part of the help/submission mailbox.
        syntax: Formal syntax, one entry per record line.
        example: Example record, one entry per record line.
        attribute_syntax: Syntax of the attribute field, or "".
        replace_syntax: Syntax for correcting an existing record, or "".
        help: Literal or generated help content.
        template: Explicit template lines overriding the syntax skeleton.
    """

    name: str
    description: str
    guide: str
    mailbox: str
    syntax: tuple[str, ...]
    example: tuple[str, ...] = ()
    attribute_syntax: str = ""
    replace_syntax: str = ""
    help: HelpContent = field(default=None)  # type: ignore[assignment]
    template: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.help is None:
            object.__setattr__(self, "help", GeneratedHelp(self.name))

    @property
    def is_tagged(self) -> bool:
        """True when records of this keyword are made of tag-prefixed lines."""
        return all(re.match(r"^[A-Z]{2}: ", line) for line in self.syntax)

    @classmethod
    def from_table(cls, name: str, table: Mapping[str, Any]) -> "KeywordDescriptor":
        """Builds a descriptor from one `[keywords.NAME]` TOML table."""
        try:
            syntax = _as_lines(table["syntax"])
            description = str(table["description"])
        except KeyError as e:
            raise CatalogError(f"Keyword '{name}' is missing required key {e}") from e
        if not syntax:
            raise CatalogError(f"Keyword '{name}' has an empty syntax")

        help_content: Optional[HelpContent] = None
        if "help" in table and "help_from" in table:
            raise CatalogError(f"Keyword '{name}' defines both 'help' and 'help_from'")
        if "help" in table:
            help_content = LiteralHelp(str(table["help"]))
        elif "help_from" in table:
            help_content = GeneratedHelp(str(table["help_from"]).upper())

        return cls(
            name=name.upper(),
            description=description,
            guide=str(table.get("guide", "")),
            mailbox=str(table.get("mailbox", "")),
            syntax=syntax,
            example=_as_lines(table.get("example", ())),
            attribute_syntax=str(table.get("attribute_syntax", "")),
            replace_syntax=str(table.get("replace_syntax", "")),
            help=help_content,  # type: ignore[arg-type]
            template=_as_lines(table.get("template", ())),
        )


def _as_lines(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return tuple(value.splitlines())
    return tuple(str(item) for item in value)


## ==================== Catalog ====================
class KeywordCatalog(Mapping[str, KeywordDescriptor]):
    """Immutable, case-insensitive mapping from keyword to descriptor."""

    def __init__(self, descriptors: Mapping[str, KeywordDescriptor], version: str = "") -> None:
        self._descriptors: Mapping[str, KeywordDescriptor] = MappingProxyType(
            {name.upper(): descriptor for name, descriptor in descriptors.items()}
        )
        self.version = version

    @classmethod
    def from_toml(cls, source: Union[str, Mapping[str, Any]]) -> "KeywordCatalog":
        """Parses a catalog from TOML text or an already parsed document."""
        if isinstance(source, str):
            try:
                data = toml.loads(source)
            except toml.TomlDecodeError as e:
                raise CatalogError(f"Invalid keyword catalog: {e}") from e
        else:
            data = source

        keywords = data.get("keywords")
        if not isinstance(keywords, Mapping) or not keywords:
            raise CatalogError("Keyword catalog has no [keywords] tables")

        descriptors = {
            name.upper(): KeywordDescriptor.from_table(name, table)
            for name, table in keywords.items()
        }
        for descriptor in descriptors.values():
            target = descriptor.help
            if isinstance(target, GeneratedHelp) and target.keyword not in descriptors:
                raise CatalogError(
                    f"Keyword '{descriptor.name}' takes its help from unknown keyword '{target.keyword}'"
                )

        version = str(data.get("catalog", {}).get("version", ""))
        logger.debug(f"Keyword catalog {version or '(unversioned)'} parsed: {len(descriptors)} keywords.")
        return cls(descriptors, version)

    # --- Mapping protocol ---
    def __getitem__(self, name: str) -> KeywordDescriptor:
        try:
            return self._descriptors[name.strip().upper()]
        except KeyError:
            raise UnknownKeywordError(name) from None

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._descriptors))

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().upper() in self._descriptors

    # --- Helpers ---
    def header_keyword(self, line: str) -> Optional[str]:
        """Returns the keyword if `line` is a section header for a known keyword."""
        match = HEADER_RE.match(line)
        if match and match.group(1) in self._descriptors:
            return match.group(1)
        return None

    def by_mailbox(self) -> dict[str, list[str]]:
        """Groups keyword names by mailbox."""
        groups: dict[str, list[str]] = {}
        for name in self:
            groups.setdefault(self[name].mailbox, []).append(name)
        return groups


@functools.lru_cache(maxsize=1)
def load_catalog() -> KeywordCatalog:
    """Loads the packaged keyword catalog, once per process."""
    try:
        text = resources.files("iad.catalog").joinpath(CATALOG_RESOURCE).read_text(encoding="utf-8")
    except (FileNotFoundError, ModuleNotFoundError) as e:
        raise CatalogError(f"Keyword catalog resource not found: {e}") from e
    catalog = KeywordCatalog.from_toml(text)
    logger.info(f"Loaded keyword catalog with {len(catalog)} keywords.")
    return catalog


def section_keyword(lines: list[str], index: int, catalog: KeywordCatalog) -> Optional[str]:
    """Finds the keyword of the section that line `index` belongs to.

    Scans upward from `index` (inclusive) to the nearest header line naming
    a known keyword.
    """
    for i in range(min(index, len(lines) - 1), -1, -1):
        keyword = catalog.header_keyword(lines[i])
        if keyword:
            return keyword
    return None

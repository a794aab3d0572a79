# src/iad/catalog/__init__.py
"""Public facade for iad.catalog: the keyword catalog and what is derived from it."""

from .HelpRenderer import render_help, render_keyword_index  # noqa: F401
from .KeywordCatalog import (  # noqa: F401
    CatalogError,
    GeneratedHelp,
    KeywordCatalog,
    KeywordDescriptor,
    LiteralHelp,
    UnknownKeywordError,
    load_catalog,
)
from .MailRouting import RoutingReport, route_document  # noqa: F401
from .TemplateExpander import expand_template  # noqa: F401


__all__ = [
    "KeywordCatalog",
    "KeywordDescriptor",
    "LiteralHelp",
    "GeneratedHelp",
    "CatalogError",
    "UnknownKeywordError",
    "load_catalog",
    "render_help",
    "render_keyword_index",
    "expand_template",
    "RoutingReport",
    "route_document",
]

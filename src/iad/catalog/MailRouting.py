# iad/catalog/MailRouting.py
"""Mailbox lookup for the sections of a submission document.

Each keyword names the mailbox that handles its records. `route_document`
scans a document for section headers and groups the keywords it finds by
mailbox address; composing or sending mail is left to the host.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from iad.catalog.HelpRenderer import mailbox_address
from iad.catalog.KeywordCatalog import HEADER_RE, KeywordCatalog


logger = logging.getLogger("iad")


@dataclass
class RoutingReport:
    """Result of routing one document.

    Attributes:
        routes: Mailbox address -> keywords found for it, in document order.
        unknown: `(line_number, header)` for header-like lines naming no known keyword.
    """

    routes: dict[str, list[str]] = field(default_factory=dict)
    unknown: list[tuple[int, str]] = field(default_factory=list)

    @property
    def addresses(self) -> list[str]:
        return list(self.routes)


def route_document(
    lines: Sequence[str], catalog: KeywordCatalog, config: Optional[dict[str, Any]] = None
) -> RoutingReport:
    """Groups the sections of a document by mailbox address.

    Header-like lines (an upper-case word alone on its line) that are not
    catalog keywords are collected in `RoutingReport.unknown` with their
    1-based line number.
    """
    report = RoutingReport()
    for number, line in enumerate(lines, 1):
        keyword = catalog.header_keyword(line)
        if keyword is None:
            match = HEADER_RE.match(line)
            if match:
                report.unknown.append((number, match.group(1)))
            continue
        address = mailbox_address(catalog[keyword], config)
        keywords = report.routes.setdefault(address, [])
        if keyword not in keywords:
            keywords.append(keyword)

    if report.unknown:
        logger.info(f"route_document: {len(report.unknown)} unknown section header(s).")
    return report

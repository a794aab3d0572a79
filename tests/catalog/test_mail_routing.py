# tests/catalog/test_mail_routing.py
"""Unit tests for mailbox routing of submission documents."""

from iad.catalog.MailRouting import route_document
from iad.catalog.TemplateExpander import expand_template


DOCUMENT = """\
ACTOR
Ford, Harrison|Blade Runner (1982)||Rick Deckard

DIRECTOR
Scott, Ridley|Blade Runner (1982)|

EDITOR
Carter, Marsha|Blade Runner (1982)|

GAFFER
Someone|Blade Runner (1982)

PLOT
MV: Blade Runner (1982)
PL: A blade runner hunts replicants.
ACTOR
Hauer, Rutger|Blade Runner (1982)||Roy Batty
"""


def test_route_document_groups_by_address(catalog, config) -> None:
    """Sections are grouped by mailbox in document order, without repeats."""
    report = route_document(DOCUMENT.splitlines(), catalog, config)

    assert report.routes == {
        "cast@imdb.com": ["ACTOR"],
        "crew@imdb.com": ["DIRECTOR", "EDITOR"],
        "plots@imdb.com": ["PLOT"],
    }
    assert report.addresses == ["cast@imdb.com", "crew@imdb.com", "plots@imdb.com"]


def test_route_document_reports_unknown_headers(catalog, config) -> None:
    """Header-like lines naming no keyword are listed with their line number."""
    report = route_document(DOCUMENT.splitlines(), catalog, config)
    assert report.unknown == [(10, "GAFFER")]


def test_route_empty_document(catalog) -> None:
    report = route_document([], catalog)
    assert report.routes == {} and report.unknown == []


def test_route_expanded_template(catalog, config) -> None:
    """Empty tag lines of a fresh template are not mistaken for headers."""
    lines = expand_template(catalog, "plot", {"title": "Blade Runner (1982)"}, config)
    lines += ["MV:", "PL: "]

    report = route_document(lines, catalog, config)

    assert report.unknown == []
    assert report.routes == {"plots@imdb.com": ["PLOT"]}

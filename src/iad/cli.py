# iad/cli.py
"""
IAD command line tools
======================

Runs the catalog and transformation features outside an editor:

    iad keywords                         list every keyword
    iad help ACTOR                       show the help of a keyword
    iad template PLOT --set title="Blade Runner (1982)" [--copy]
    iad highlight submission.iad         print a document with colors
    iad route submission.iad             list the mailboxes a document goes to
    iad swap-name "Philip Seymour Hoffman" --given 2
    iad numeral "Evans, Peter (III)" --down

Arguments are parsed first, then the configuration they name is loaded and
logging is set up, as in the editor integration.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Optional, Sequence

from iad import __version__
from iad.catalog.HelpRenderer import render_help, render_keyword_index
from iad.catalog.KeywordCatalog import CatalogError, UnknownKeywordError, load_catalog
from iad.catalog.MailRouting import route_document
from iad.catalog.TemplateExpander import expand_template
from iad.core.EditResult import EditResult
from iad.core.FieldTransformer import swap_name
from iad.core.RomanNumerals import step_numeral
from iad.ui.Highlighter import highlight_text
from iad.utils.logging_config import setup_logging
from iad.utils.utils import copy_to_clipboard, load_config, read_text_file


logger = logging.getLogger("iad")


def _parse_values(pairs: Sequence[str]) -> dict[str, str]:
    values: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise argparse.ArgumentTypeError(f"expected FIELD=VALUE, got {pair!r}")
        values[key.strip()] = value
    return values


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="iad", description="Submission document tools.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="configuration file (default: ~/.config/iad/config.toml)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("keywords", help="list all keywords")

    p_help = sub.add_parser("help", help="show help for a keyword")
    p_help.add_argument("keyword")

    p_template = sub.add_parser("template", help="print a section template")
    p_template.add_argument("keyword")
    p_template.add_argument("--set", dest="values", action="append", default=[], metavar="FIELD=VALUE")
    p_template.add_argument("--copy", action="store_true", help="also copy it to the clipboard")

    p_highlight = sub.add_parser("highlight", help="print a document with syntax colors")
    p_highlight.add_argument("file")

    p_route = sub.add_parser("route", help="list the mailboxes a document is sent to")
    p_route.add_argument("file")

    p_swap = sub.add_parser("swap-name", help="rewrite a name as 'Surname, Given'")
    p_swap.add_argument("text")
    p_swap.add_argument("--given", type=int, default=1)

    p_numeral = sub.add_parser("numeral", help="step the roman numeral suffix of a name")
    p_numeral.add_argument("text")
    direction = p_numeral.add_mutually_exclusive_group(required=True)
    direction.add_argument("--up", dest="step", action="store_const", const=1)
    direction.add_argument("--down", dest="step", action="store_const", const=-1)

    return parser


def _print_result(result: EditResult, text: str) -> int:
    if not result.ok:
        print(result.message, file=sys.stderr)
        return 1
    print(result.apply(text))
    return 0


def _execute(parser: argparse.ArgumentParser, args: argparse.Namespace, config: dict[str, Any]) -> int:
    try:
        if args.command == "keywords":
            print(render_keyword_index(load_catalog()))
        elif args.command == "help":
            print(render_help(load_catalog(), args.keyword, config))
        elif args.command == "template":
            values = _parse_values(args.values)
            text = "\n".join(expand_template(load_catalog(), args.keyword, values, config))
            print(text)
            if args.copy and not copy_to_clipboard(text, config):
                print("Clipboard unavailable; template not copied.", file=sys.stderr)
        elif args.command == "highlight":
            content, _ = read_text_file(args.file, config.get("editor", {}).get("encoding", "utf-8"))
            sys.stdout.write(highlight_text(content))
        elif args.command == "route":
            content, _ = read_text_file(args.file, config.get("editor", {}).get("encoding", "utf-8"))
            report = route_document(content.splitlines(), load_catalog(), config)
            for address, keywords in report.routes.items():
                print(f"{address}: {', '.join(keywords)}")
            for number, header in report.unknown:
                print(f"line {number}: unknown keyword {header}", file=sys.stderr)
            return 1 if report.unknown else 0
        elif args.command == "swap-name":
            return _print_result(swap_name(args.text, 0, args.given), args.text)
        elif args.command == "numeral":
            return _print_result(step_numeral(args.text, 0, args.step), args.text)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    except UnknownKeywordError as e:
        print(str(e), file=sys.stderr)
        return 1
    except (CatalogError, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def run(argv: Optional[Sequence[str]] = None, config: Optional[dict[str, Any]] = None) -> int:
    """Runs one command and returns the process exit code.

    Without an explicit `config`, the file named by `--config` (or the
    default user file) is loaded.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if config is None:
        config = load_config(args.config)
    return _execute(parser, args, config)


def start(argv: Optional[Sequence[str]] = None) -> None:
    """Console script entry point.

    Arguments are parsed first so that `--config` decides which file the
    logging setup reads.
    """
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    config = load_config(args.config)
    setup_logging(config)
    logger.debug(f"iad command line started: {args.command}")
    sys.exit(_execute(parser, args, config))

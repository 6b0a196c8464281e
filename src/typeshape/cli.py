"""Command-line front end: parse a specification and print its AST."""

from __future__ import annotations

import argparse
import logging
import sys

from typeshape.errors import TypeSpecError
from typeshape.formatting import format_types
from typeshape.parser import parse
from typeshape.serialization import to_json


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="typeshape", description="Parse a type specification into its AST"
    )
    ap.add_argument("spec", help="Type specification, e.g. 'Maybe [Number]'")
    ap.add_argument("--format", action="store_true",
                    help="Print the canonical specification instead of JSON")
    ap.add_argument("--indent", type=int, default=None, metavar="N",
                    help="Indent JSON output by N spaces")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="Enable debug logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        types = parse(args.spec)
    except TypeSpecError as err:
        print(f"error[{err.code}]: {err}", file=sys.stderr)
        return 1

    print(format_types(types) if args.format else to_json(types, indent=args.indent))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

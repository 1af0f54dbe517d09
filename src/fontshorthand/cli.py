"""Command line interface for the font shorthand parser.

Usage:
    fontshorthand "italic bold 12px/30px Georgia, serif"
    fontshorthand --format simple "12px" "12px serif"
    printf '12px serif\\n' | fontshorthand

Each value is parsed independently. Parsed values are printed to stdout as
one JSON object per line (or indented with --indent); diagnostics for
rejected values are printed to stderr.

Exit Codes:
    0   Every value parsed
    1   At least one value was rejected

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from fontshorthand import __version__
from fontshorthand.constants import MAX_SOURCE_SIZE
from fontshorthand.diagnostics import DiagnosticFormatter, OutputFormat
from fontshorthand.parsing import parse_font
from fontshorthand.syntax import ShorthandParser

__all__ = ["build_arg_parser", "main"]

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the fontshorthand command."""
    parser = argparse.ArgumentParser(
        prog="fontshorthand",
        description="Decompose CSS font shorthand values into longhand properties.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Parse a single value:
  fontshorthand "italic small-caps bold 12px/30px Georgia, serif"

  # Parse values from stdin, one per line:
  cat fonts.txt | fontshorthand --format json
""",
    )
    parser.add_argument(
        "values",
        nargs="*",
        metavar="VALUE",
        help="Font shorthand value(s); read from stdin (one per line) when omitted",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Diagnostic output format for rejected values (default: rust)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indent JSON output by this many spaces",
    )
    parser.add_argument(
        "--max-source-size",
        type=int,
        default=MAX_SOURCE_SIZE,
        help=f"Maximum value length in characters, 0 disables (default: {MAX_SOURCE_SIZE})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_arg_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    values: list[str] = list(args.values)
    if not values:
        values = [line.strip() for line in sys.stdin if line.strip()]

    formatter = DiagnosticFormatter(
        output_format=OutputFormat(args.format),
        color=args.format == OutputFormat.RUST and sys.stderr.isatty(),
    )
    parser = ShorthandParser(max_source_size=args.max_source_size)

    failures = 0
    for value in values:
        font, errors = parse_font(value, parser=parser)
        if font is not None:
            print(font.to_json(indent=args.indent))
            continue
        failures += 1
        for error in errors:
            if error.diagnostic is not None:
                print(formatter.format(error.diagnostic, source=value), file=sys.stderr)
            else:
                print(f"error: {error}", file=sys.stderr)

    logger.debug("Parsed %d value(s), %d rejected", len(values), failures)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())

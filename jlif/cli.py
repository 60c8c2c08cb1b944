"""Command-line entry point: format JSON found in a stream of lines."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from jlif.buffer import LineBuffer
from jlif.filter import FormatterError, build_filter
from jlif.formatter import JsonFormatter
from jlif.processor import StreamProcessor

__all__ = ["build_parser", "main"]

_PROG = "jlif"
_VERSION = "1.0.0"
_UNRECOGNIZED = "unrecognized arguments: "


class _HelpFormatter(argparse.HelpFormatter):
    def add_usage(self, usage, actions, groups, prefix=None):
        if prefix is None:
            prefix = "Usage: "
        super().add_usage(usage, actions, groups, prefix)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        if message.startswith(_UNRECOGNIZED):
            extra = message[len(_UNRECOGNIZED):].split()
            if extra:
                message = f"unexpected argument '{extra[0]}' found"
        super().error(message)


def _non_negative(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid digit found in string: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command."""
    parser = _ArgumentParser(
        prog=_PROG,
        description="JSON Line Formatter - Process and format JSON data from streaming input",
        formatter_class=_HelpFormatter,
    )
    parser.add_argument(
        "--max-lines",
        type=_non_negative,
        default=10,
        help="Maximum lines to buffer for multi-line JSON parsing (default: 10)",
    )
    parser.add_argument("-f", "--filter", default=None, help="Regex pattern for filtering output")
    parser.add_argument(
        "-s", "--case-sensitive", action="store_true", help="Enable case-sensitive filtering"
    )
    parser.add_argument(
        "-j",
        "--json-only",
        action="store_true",
        help="Show only JSON content, suppress non-JSON pass-through",
    )
    parser.add_argument(
        "-c",
        "--compact",
        action="store_true",
        help="Output JSON in compact format instead of pretty-printed",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-V", "--version", action="version", version=f"{_PROG} {_VERSION}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the formatter over standard input and return the exit status."""
    args = build_parser().parse_args(argv)

    try:
        output_filter = build_filter(args.filter, args.case_sensitive, args.json_only)
    except FormatterError as exc:
        print(f"Error: Filter error: {exc}", file=sys.stderr)
        return 1

    processor = StreamProcessor(
        sys.stdin,
        sys.stdout,
        LineBuffer(args.max_lines),
        output_filter,
        JsonFormatter.from_args(args.compact, args.no_color),
    )
    processor.process()
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
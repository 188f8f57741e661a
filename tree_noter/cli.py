"""
Command-line interface for tree-noter.

This module is responsible for argument parsing, resolving the output
width and delegating to the orchestration in the formatter module.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from . import __version__
from .config import DEFAULT_COMMENT_MARKER, DEFAULT_GAP, DEFAULT_SEPARATOR, Config
from .errors import TreeNoterError
from .formatter import run_format
from .logging_utils import configure_logging
from .preflight import validate_config
from .terminal import resolve_max_width

EPILOG = """\
Examples:
  # Format from stdin to stdout with default settings (aligned style)
  tree | tree-noter

  # Format from a file with a gap of 40 characters
  tree-noter tree-output.txt -g 40

  # Use decorator style with default separator (-----)
  tree-noter tree-output.txt -d

  # Use decorator style with custom separator
  tree-noter tree-output.txt -d -s " === "

  # Enable comment wrapping with max width
  tree-noter tree-output.txt -w -m 100

  # Save formatted output to a file
  tree-noter tree-output.txt -o formatted-tree.txt

Input Format:
  The input should be a tree command output with comments after the tree structure.
  Comments should be preceded by the comment marker (default: #).

  Example input:
  .
  ├── src # Source code directory
  │   └── index.js # Main entry point
  └── package.json # Project configuration
"""


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {value!r}")
    return number


def _positive_int(value: str) -> int:
    number = _non_negative_int(value)
    if number == 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value!r}")
    return number


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tree-noter",
        description="Format tree command output with aligned comments.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "file",
        nargs="?",
        help="Input file containing tree output with comments (default: stdin).",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Output file (default: stdout).",
    )
    parser.add_argument(
        "-d",
        "--decorator",
        action="store_true",
        help="Use decorator style instead of aligned style.",
    )
    parser.add_argument(
        "-s",
        "--separator",
        default=DEFAULT_SEPARATOR,
        help=f"Separator pattern for decorator style (default: {DEFAULT_SEPARATOR}).",
    )
    parser.add_argument(
        "-g",
        "--gap",
        type=_non_negative_int,
        default=DEFAULT_GAP,
        metavar="WIDTH",
        help=f"Minimum column for aligned comments (default: {DEFAULT_GAP}).",
    )
    parser.add_argument(
        "-c",
        "--comment-marker",
        default=DEFAULT_COMMENT_MARKER,
        metavar="MARKER",
        help=f"Comment marker to look for (default: {DEFAULT_COMMENT_MARKER}).",
    )
    parser.add_argument(
        "-w",
        "--wrap",
        action="store_true",
        help="Wrap long comments onto continuation lines.",
    )
    parser.add_argument(
        "-m",
        "--max-width",
        type=_positive_int,
        metavar="WIDTH",
        help="Maximum output width including comments (default: terminal width or 80).",
    )
    parser.add_argument(
        "-i",
        "--indent",
        type=_non_negative_int,
        default=0,
        metavar="SPACES",
        help="Extra spaces to indent wrapped comment lines (default: 0).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity on stderr (can be specified multiple times).",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    configure_logging(verbosity=args.verbose)

    config = Config(
        comment_marker=args.comment_marker,
        gap=args.gap,
        max_width=resolve_max_width(args.max_width),
        decorator=args.decorator,
        separator=args.separator,
        wrap=args.wrap,
        wrap_indent=args.indent,
        input_path=args.file,
        output_path=args.output,
        verbosity=args.verbose,
    )

    try:
        validate_config(config)
        run_format(config)
    except KeyboardInterrupt:
        return 130
    except TreeNoterError as exc:
        print(f"tree-noter: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())

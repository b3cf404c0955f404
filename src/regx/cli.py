"""
Command-line interface for RegX.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from pathlib import Path

from .models import GroupSettings
from .regularizer import DEFAULT_TAB_WIDTH, MissingGroupSettingsError, Regularizer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="regx",
        description="Align lines into columns using regular expression capture groups.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s '([^=]*)(=.*)' -g :1 -g : settings.py
  cat table.txt | %(prog)s '(\\S+)\\s+(\\S+)' -g :1 -g :0 -t 8
        """,
    )
    parser.add_argument("pattern", help="Regular expression; each capture group is a column")
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Input text file (default: stdin)",
    )
    parser.add_argument(
        "-t", "--tab-width",
        type=int,
        default=DEFAULT_TAB_WIDTH,
        help=f"Round column widths up to multiples of this (default: {DEFAULT_TAB_WIDTH})",
    )
    parser.add_argument(
        "-g", "--group",
        dest="groups",
        action="append",
        default=[],
        metavar="BEFORE:AFTER",
        help="Padding for the next capture group; leave a side empty to keep it untrimmed",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log parsed columns to stderr",
    )
    return parser


def read_input(file: str) -> str:
    if file == "-":
        text = sys.stdin.read()
    else:
        text = Path(file).read_text(encoding="utf-8")
    return text.replace("\r\n", "\n")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        pattern = re.compile(args.pattern)
        settings = [GroupSettings.parse(value) for value in args.groups]
        if not args.groups:
            logger.debug("No group settings given, using defaults for %d group(s)", pattern.groups)
            settings = [GroupSettings()] * pattern.groups
        text = read_input(args.file)
        output = Regularizer(args.tab_width).regularize(text, settings, pattern)
    except FileNotFoundError:
        print(f"Error: File '{args.file}' not found", file=sys.stderr)
        return 1
    except re.error as exc:
        print(f"Error: Invalid pattern: {exc}", file=sys.stderr)
        return 1
    except (ValueError, MissingGroupSettingsError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""``luasv`` command: print a Lua saved-variables file as JSON.

Usage::

    luasv RaffleManager.lua
    luasv RaffleManager.lua --select RaffleManagerDB.raffles.1
    cat dump.lua | luasv -
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO

from . import to_json
from .errors import ParseError
from .getter import lookup
from .reader import load, parse

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="luasv",
        description="Convert a Lua table literal (name = {...}) to JSON.",
    )
    parser.add_argument("path", nargs="?", default="-",
                        help="input file; '-' or omitted reads stdin")
    parser.add_argument("--encoding", default="utf-8",
                        help="input file encoding (default: utf-8); stdin is "
                             "read with the terminal encoding")
    parser.add_argument("--indent", type=int, default=2,
                        help="JSON indent; negative for compact output")
    parser.add_argument("--select", metavar="PATH",
                        help="dot-separated path to print instead of the whole tree")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging")
    return parser


def run(args: argparse.Namespace, stdin: IO[str], stdout: IO[str]) -> int:
    try:
        if args.path == "-":
            value = parse(stdin.read())
        else:
            value = load(args.path, encoding=args.encoding)
    except ParseError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read '{args.path}': {exc}", file=sys.stderr)
        return 1

    if args.select:
        logger.debug("selecting %s", args.select)
        value = lookup(value, args.select)

    indent = args.indent if args.indent >= 0 else None
    print(to_json(value, indent=indent), file=stdout)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``luasv`` console script."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run(args, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())

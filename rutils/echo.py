"""Display a line of text."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence


def render(text: str | None, no_newline: bool) -> str:
    """Return the output for *text*, with a trailing newline unless suppressed."""
    return (text or "") + ("" if no_newline else "\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="recho", description="Display a line of text")
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument("-n", dest="no_newline", action="store_true",
                        help="Do not output the trailing newline")
    parser.add_argument("string", nargs="?")
    args = parser.parse_args(argv)
    sys.stdout.write(render(args.string, args.no_newline))
    return 0


if __name__ == "__main__":
    sys.exit(main())
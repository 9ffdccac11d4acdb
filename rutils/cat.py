"""Concatenate files and print them, optionally numbering and squeezing lines."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, TextIO


@dataclass(frozen=True)
class CatOptions:
    """Output options; numbering of non-blank lines wins over numbering of all lines."""

    number_nonblank: bool = False
    number_all: bool = False
    squeeze: bool = False


class LineFormatter:
    """Formats lines for output, keeping blank-line and numbering state between calls."""

    def __init__(self, options: CatOptions) -> None:
        self.options = options
        self._previous_blank = False
        self._line_number = 1

    def reset_numbering(self) -> None:
        """Restart line numbering at 1; the blank-line state is kept."""
        self._line_number = 1

    def format(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield each output line, newline included, for the given unterminated lines."""
        opts = self.options
        for line in lines:
            blank = not line.strip()
            if opts.squeeze and blank and self._previous_blank:
                continue
            numbered = (not blank) if opts.number_nonblank else opts.number_all
            if numbered:
                yield f"{self._line_number:>6}\t{line}\n"
                self._line_number += 1
            else:
                yield f"{line}\n"
            self._previous_blank = blank


def _split_lines(text: str) -> Iterator[str]:
    *terminated, tail = text.split("\n")
    for line in terminated:
        yield line[:-1] if line.endswith("\r") else line
    if tail:
        yield tail


def _describe(exc: Exception) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


def _fail(context: str, exc: Exception, status: int) -> int:
    print(f"{context}: {_describe(exc)}", file=sys.stderr)
    return status


def _cat_stream(formatter: LineFormatter, stream: TextIO, out: TextIO) -> None:
    formatter.reset_numbering()
    for raw in stream:
        out.writelines(formatter.format(_split_lines(raw)))


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rcat", description="Concatenate and print files")
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument("-b", dest="number_nonblank", action="store_true",
                        help="Number the non-blank output lines, starting at 1.")
    parser.add_argument("-n", dest="number_all", action="store_true",
                        help="Number all output lines, starting at 1.")
    parser.add_argument("-s", dest="squeeze", action="store_true",
                        help="Squeeze multiple blank lines to a single blank line.")
    parser.add_argument("files", nargs="*")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    formatter = LineFormatter(CatOptions(args.number_nonblank, args.number_all, args.squeeze))
    out = sys.stdout

    if not args.files:
        try:
            _cat_stream(formatter, sys.stdin, out)
        except (OSError, UnicodeDecodeError) as exc:
            return _fail("Error reading from stdin", exc, 3)
        return 0

    for name in args.files:
        if name == "-":
            try:
                _cat_stream(formatter, sys.stdin, out)
            except (OSError, UnicodeDecodeError) as exc:
                return _fail("Error reading from stdin", exc, 1)
            continue
        try:
            with open(name, encoding="utf-8", newline="") as handle:
                contents = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            return _fail("Error reading file", exc, 2)
        formatter.reset_numbering()
        out.writelines(formatter.format(_split_lines(contents)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
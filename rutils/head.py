"""Print the first lines of files or standard input."""

from __future__ import annotations

import argparse
import itertools
import sys
from typing import Iterator, Sequence, TextIO

DEFAULT_COUNT = 10


def head_lines(stream: TextIO, count: int) -> Iterator[str]:
    """Yield lines from *stream* as read; the limit is checked after each line, so one is always given."""
    yielded = 0
    for line in iter(stream.readline, ""):
        yield line
        yielded += 1
        if yielded >= count:
            break


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def head_file(path: str, count: int) -> Iterator[str]:
    """Yield a header for *path* followed by its first *count* lines, without terminators."""
    with open(path, encoding="utf-8", newline="\n") as handle:
        yield f"==> {path} <=="
        for line in itertools.islice(handle, count):
            yield _strip_terminator(line)


def _count(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}")
    return number


def _fail(context: str, exc: Exception, status: int) -> int:
    detail = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
    print(f"{context}: {detail}", file=sys.stderr)
    return status


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="rhead", description="Display a line of text")
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument("-n", dest="count", type=_count, default=DEFAULT_COUNT,
                        help="Print count lines of each of the specified files.")
    parser.add_argument("files", nargs="*")
    args = parser.parse_args(argv)

    if not args.files:
        try:
            for line in head_lines(sys.stdin, args.count):
                sys.stdout.write(line)
        except (OSError, UnicodeDecodeError) as exc:
            return _fail("Error reading from stdin", exc, 2)
        return 0

    last = len(args.files) - 1
    for index, name in enumerate(args.files):
        try:
            for line in head_file(name, args.count):
                print(line)
        except (OSError, UnicodeDecodeError) as exc:
            return _fail("Error reading file", exc, 1)
        if index < last:
            print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
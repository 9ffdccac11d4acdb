"""Rename a source file to a target path."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from typing import Sequence, TextIO

from rutils.paths import confirm_overwrite, target_path


class MoveError(Exception):
    """A move that failed; *status* is the exit status."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


@dataclass(frozen=True)
class MoveOptions:
    force: bool = False
    interactive: bool = False
    no_clobber: bool = False


def move(
    source: str,
    target: str,
    options: MoveOptions | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> str | None:
    """Move *source* to *target*; return the destination, or None when overwriting was declined."""
    options = MoveOptions() if options is None else options
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    if not os.path.exists(source):
        raise MoveError(f"mv: {source}: No such file or directory")

    destination = target_path(target, source)
    if os.path.exists(destination):
        if options.no_clobber:
            return None
        if options.interactive and not confirm_overwrite(target, stdin, stderr, stdout):
            return None

    try:
        os.replace(source, destination)
    except OSError as exc:
        detail = exc.strerror or str(exc)
        raise MoveError(f"mv: rename {source} to {destination}: {detail}") from exc
    return destination


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rmv",
        description="The rmv utility renames the file named by the source operand to the "
                    "destination path named by the target operand.",
    )
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument("-f", dest="force", action="store_true",
                        help="If the target file already exists, it will be overwritten.")
    parser.add_argument("-i", dest="interactive", action="store_true",
                        help="Prompt on standard error before overwriting an existing file.")
    parser.add_argument("-n", dest="no_clobber", action="store_true",
                        help="Do not overwrite an existing file.")
    parser.add_argument("source")
    parser.add_argument("target")
    args = parser.parse_args(argv)

    options = MoveOptions(args.force, args.interactive, args.no_clobber)
    try:
        move(args.source, args.target, options)
    except MoveError as exc:
        print(exc.message, file=sys.stderr)
        return exc.status
    return 0


if __name__ == "__main__":
    sys.exit(main())
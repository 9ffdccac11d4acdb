"""Copy the contents of a source file to a target file."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, TextIO

from rutils.paths import confirm_overwrite, is_same_file, target_path


class CopyError(Exception):
    """A copy that did not happen; *status* is the exit status, *message* may be empty."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


@dataclass(frozen=True)
class CopyOptions:
    force: bool = False
    interactive: bool = False
    no_clobber: bool = False
    verbose: bool = False


def copy(
    source: str,
    target: str,
    options: CopyOptions | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> str:
    """Copy *source* to *target* and return the destination path."""
    options = CopyOptions() if options is None else options
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    if not os.path.exists(source):
        raise CopyError(f"rcp: {source}: No such file or directory")
    if os.path.isdir(source):
        raise CopyError(f"rcp: {source}: Is a directory")

    destination = target_path(target, source)
    if os.path.exists(destination):
        if is_same_file(source, destination):
            raise CopyError(f"rcp: {source} and {destination} are identical (not copied).")
        if options.no_clobber:
            raise CopyError(f"{destination} not overwritten", status=2)
        if options.interactive and not confirm_overwrite(destination, stdin, stderr, stderr):
            raise CopyError("", status=2)

    try:
        Path(destination).write_bytes(Path(source).read_bytes())
    except OSError as exc:
        detail = exc.strerror or str(exc)
        raise CopyError(f"rcp: failed to copy {source} to {destination}: {detail}") from exc

    if options.verbose:
        print(f"{source} -> {destination}", file=stdout)
    return destination


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rcp",
        description="The rcp utility copies the contents of the source_file to the target_file.",
    )
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument("-f", dest="force", action="store_true",
                        help="For each existing destination pathname, remove it and create "
                             "a new file, without prompting for confirmation.")
    parser.add_argument("-i", dest="interactive", action="store_true",
                        help="Prompt on standard error before overwriting an existing file.")
    parser.add_argument("-n", dest="no_clobber", action="store_true",
                        help="Do not overwrite an existing file.")
    parser.add_argument("-v", dest="verbose", action="store_true",
                        help="Be verbose, showing files as they are copied.")
    parser.add_argument("source_file")
    parser.add_argument("target_file")
    args = parser.parse_args(argv)

    options = CopyOptions(args.force, args.interactive, args.no_clobber, args.verbose)
    try:
        copy(args.source_file, args.target_file, options)
    except CopyError as exc:
        if exc.message:
            print(exc.message, file=sys.stderr)
        return exc.status
    return 0


if __name__ == "__main__":
    sys.exit(main())
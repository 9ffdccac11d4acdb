"""Path helpers shared by the copy and move commands."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TextIO


def target_path(target: str, source: str) -> str:
    """Return where *source* lands; a directory target receives the source's base name."""
    if os.path.isdir(target):
        return f"{target.rstrip('/')}/{Path(source).name}"
    return target


def is_same_file(src: str, dst: str) -> bool:
    """True when both paths exist and resolve to the same canonical location."""
    try:
        return Path(src).resolve(strict=True) == Path(dst).resolve(strict=True)
    except (OSError, RuntimeError):
        return False


def confirm_overwrite(
    dst: str, stdin: TextIO, prompt_stream: TextIO, refusal_stream: TextIO
) -> bool:
    """Ask whether *dst* may be overwritten; only a plain "y" answer counts as yes."""
    prompt_stream.write(f"overwrite {dst}? (y/n [n]) ")
    prompt_stream.flush()
    accepted = stdin.readline().strip().lower() == "y"
    if not accepted:
        print("not overwritten", file=refusal_stream)
    return accepted
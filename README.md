# rutils

Five small command-line utilities for everyday file work:

| Command | Module          | What it does                                          |
|---------|-----------------|-------------------------------------------------------|
| `rcat`  | `rutils.cat`    | Concatenate files (or standard input) and print them  |
| `rcp`   | `rutils.cp`     | Copy a file to a new path or into a directory         |
| `recho` | `rutils.echo`   | Print a line of text                                  |
| `rhead` | `rutils.head`   | Print the first lines of files or standard input      |
| `rmv`   | `rutils.mv`     | Rename or move a file                                 |

Every command accepts `-V` / `--version` and `-h` / `--help`.

## Installation

```
pip install .
```

Install the test requirements with `pip install .[test]`.

## Usage

### rcat

```
rcat [-b] [-n] [-s] [FILE ...]
```

- `-b` numbers the non-blank output lines, starting at 1. It takes precedence over `-n`.
- `-n` numbers every output line, starting at 1.
- `-s` squeezes runs of blank lines down to one blank line.

A line counts as blank when it holds nothing but whitespace. Numbers are
right-aligned in six columns and followed by a tab.

With no files, `rcat` reads standard input. A file named `-` also means standard
input. Numbering starts again at 1 for each file and each read of standard input.
If a file cannot be read, `rcat` prints `Error reading file: ...` and stops with
exit status 2.

### rcp

```
rcp [-f] [-i] [-n] [-v] SOURCE TARGET
```

If `TARGET` is a directory, the file is copied into it and keeps its name.

- `-f` overwrites an existing target without asking. This is also the default.
- `-i` asks on standard error before it overwrites an existing target. Only an
  answer of `y` or `Y` goes ahead; otherwise `not overwritten` is printed and the
  exit status is 2.
- `-n` never overwrites an existing target; it prints `TARGET not overwritten`
  and exits with status 2.
- `-v` prints `SOURCE -> TARGET` after the copy.

`rcp` refuses a missing source, a source that is a directory, and a copy of a
file onto itself; each of these exits with status 1.

### recho

```
recho [-n] [STRING]
```

Prints `STRING` and then a newline. With `-n` there is no trailing newline.

### rhead

```
rhead [-n COUNT] [FILE ...]
```

Prints the first `COUNT` lines of each file. `COUNT` is a non-negative whole
number, 10 unless you give one. Each file's lines come after a `==> FILE <==`
header, and files are separated by a blank line.

With no files, `rhead` reads standard input and prints its first `COUNT` lines
with no header; at least one line is read and printed there, even when `COUNT`
is 0.

### rmv

```
rmv [-f] [-i] [-n] SOURCE TARGET
```

Renames `SOURCE` to `TARGET`. If `TARGET` is a directory, the file moves into it.

- `-f` overwrites an existing target. This is also the default.
- `-i` asks on standard error before it overwrites. Only an answer of `y` or `Y`
  goes ahead; otherwise `not overwritten` is printed on standard output and the
  file stays where it is.
- `-n` never overwrites an existing target; the file silently stays where it is.

A missing source, or a rename that fails, exits with status 1.

## Using the library

Each command is also available from Python:

```python
import sys

from rutils.cat import CatOptions, LineFormatter
from rutils.echo import render
from rutils.head import head_file

formatter = LineFormatter(CatOptions(number_nonblank=True))
sys.stdout.writelines(formatter.format(["first", "", "second"]))

print(render("hello", no_newline=False), end="")

for line in head_file("notes.txt", 5):
    print(line)
```

- `LineFormatter.format` yields output lines with their newlines; it keeps the
  blank-line and numbering state between calls, and `reset_numbering()` starts the
  numbers again at 1.
- `rutils.head.head_lines(stream, count)` yields lines from a text stream as
  they are read.
- `rutils.cp.copy(source, target, options)` copies one file and returns the
  destination path. When it refuses or fails it raises `CopyError`, whose
  `message` and `status` match what `rcp` prints and returns.
- `rutils.mv.move(source, target, options)` moves one file and returns the
  destination, or `None` when overwriting was declined. It raises `MoveError`
  for a missing source or a failed rename.
- `rutils.paths` holds the shared helpers `target_path`, `is_same_file` and
  `confirm_overwrite`.

## Limits

`rcp` and `rmv` take exactly one source and one target. `rcp` copies regular
files only: it does not copy directories, and it copies contents, not
permissions or timestamps.
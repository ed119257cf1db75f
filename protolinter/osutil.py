"""Process exit codes and small file helpers that keep line endings intact."""

from __future__ import annotations

import enum
import os
from collections import Counter

LF = "\n"
CR = "\r"
CRLF = "\r\n"


class ExitCode(enum.IntEnum):
    """Exit status of a lint run."""

    SUCCESS = 0
    LINT_FAILURE = 1  # lint errors, exclusively
    INTERNAL_FAILURE = 2  # parsing, internal and runtime errors


class LineEndingError(ValueError):
    """Raised when no line ending dominates the content."""


def read_all_lines(file_name: str | os.PathLike[str], newline_char: str) -> list[str]:
    """Read a file and split its content on ``newline_char``."""
    with open(file_name, encoding="utf-8", newline="") as handle:
        return handle.read().split(newline_char)


def write_lines_to_existing_file(
    file_name: str | os.PathLike[str],
    lines: list[str],
    newline_char: str,
) -> None:
    """Join ``lines`` with ``newline_char`` and write them to an existing file."""
    write_existing_file(file_name, newline_char.join(lines).encode("utf-8"))


def write_existing_file(file_name: str | os.PathLike[str], data: bytes | str) -> None:
    """Overwrite an existing file with ``data``; the file is never created."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    fd = os.open(file_name, os.O_WRONLY | os.O_TRUNC)
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)


def detect_line_ending(content: str) -> str:
    """Return the dominant line ending in ``content``, or "" if it has none.

    Raises LineEndingError when no single kind of line ending outnumbers the others.
    """
    counts: Counter[str] = Counter()
    prev = " "
    for char in content:
        if char == "\r" and prev != "\n":
            counts[CR] += 1
        elif char == "\n":
            if prev == "\r":
                counts[CRLF] += 1
                counts[CR] -= 1
            else:
                counts[LF] += 1
        prev = char

    crlf, cr, lf = counts[CRLF], counts[CR], counts[LF]
    if crlf + cr + lf == 0:
        return ""
    if crlf > cr and crlf > lf:
        return CRLF
    if cr > lf and cr > crlf:
        return CR
    if lf > cr and lf > crlf:
        return LF
    raise LineEndingError(
        f"not found dominant line ending, counts={ {CRLF: crlf, CR: cr, LF: lf} !r}"
    )
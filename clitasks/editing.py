"""Rewriting single lines of a task list."""

from __future__ import annotations

import contextlib
import os
import shutil
import tempfile
from collections.abc import Iterable
from pathlib import Path

from .files import numbered_lines


def _rewrite(path: Path, pieces: Iterable[str]) -> None:
    """Replace the file's content with ``pieces`` through a temporary file."""
    fd, tmp_name = tempfile.mkstemp(prefix=".temp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as out:
            out.writelines(pieces)
        shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(tmp_name)
        raise


def edit_line(path: str | Path, text: str, line: int) -> None:
    """Put ``text`` in place of line ``line`` (counted from 1).

    The text is written as given: an empty string removes the line and a
    line ending must be part of ``text`` to keep one. A line number outside
    the file leaves it unchanged. Raises FileNotFoundError for a missing file.
    """
    path = Path(path)
    records = numbered_lines(path)
    _rewrite(path, (text if number == line else piece for number, piece in records))


def swap_lines(path: str | Path, first: int, second: int) -> None:
    """Exchange lines ``first`` and ``second`` (counted from 1).

    Raises FileNotFoundError for a missing file and IndexError for a line
    number outside the file.
    """
    if first == second:
        return
    path = Path(path)
    texts = [piece for _, piece in numbered_lines(path)]
    for number in (first, second):
        if not 1 <= number <= len(texts):
            raise IndexError(f"no line {number} in {path.name}")
    texts[first - 1], texts[second - 1] = texts[second - 1], texts[first - 1]
    _rewrite(path, texts)
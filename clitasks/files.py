"""Small helpers for reading task list files."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

BUFFER_LEN = 1024
_PIECE_LEN = BUFFER_LEN - 1


def _pieces(path: str | Path) -> Iterator[str]:
    """Yield the file's lines, splitting any longer than the read buffer."""
    with open(path, encoding="utf-8", newline="") as source:
        for line in source:
            while len(line) > _PIECE_LEN:
                yield line[:_PIECE_LEN]
                line = line[_PIECE_LEN:]
            yield line


def numbered_lines(path: str | Path) -> list[tuple[int, str]]:
    """Return the file's lines numbered from 1, line endings kept.

    Raises FileNotFoundError when the file is missing.
    """
    return list(enumerate(_pieces(path), start=1))


def count_lines(path: str | Path) -> int:
    """Return the number of lines in the file."""
    return sum(1 for _ in _pieces(path))


def is_empty(path: str | Path) -> bool:
    """True when the file is missing or has no content."""
    try:
        return os.path.getsize(path) == 0
    except FileNotFoundError:
        return True


def exists(path: str | Path) -> bool:
    """True when something exists at ``path``."""
    return os.path.exists(path)


def list_names(directory: str | Path) -> list[str]:
    """Return the sorted entry names in ``directory`` that do not start with a dot."""
    return sorted(name for name in os.listdir(directory) if not name.startswith("."))
"""Where task lists live and which one is currently in use."""

from __future__ import annotations

from pathlib import Path

TASKS_LEN = 100
TASK_LEN = 100
NAME_LEN = 100
NO_TASKS = "No tasks"
EDITOR = "nano"
NONPATH = "Nothing"
NONPATH_TRASH = " \tㅤ\tㅤㅤ"
EXIST = "List does not exist"
CHOOSE_LIST = "Choose task list"
TASKS_HEADER = "Tasks:"

USABLE_NAME = ".usable"
WORK_DIR_NAME = ".tasks"


def default_root() -> Path:
    """Return the default directory holding the task lists."""
    return Path.home() / WORK_DIR_NAME


class TaskStore:
    """A directory of task lists plus a marker file naming the list in use."""

    def __init__(self, root: str | Path | None = None) -> None:
        self.root = Path(root) if root is not None else default_root()

    @property
    def usable_path(self) -> Path:
        """Path of the file recording the list in use."""
        return self.root / USABLE_NAME

    def list_path(self, name: str) -> Path:
        """Path of the task list called ``name``."""
        return self.root / name

    def current_list_name(self) -> str | None:
        """Name recorded as in use, or None when nothing is recorded.

        Only the first line is read, kept to ``NAME_LEN - 1`` characters.
        """
        try:
            with self.usable_path.open(encoding="utf-8", newline="") as marker:
                name = marker.readline(NAME_LEN - 1)
        except FileNotFoundError:
            return None
        return name or None

    def current_list_path(self) -> Path | None:
        """Path of the list in use, or None when nothing is recorded."""
        name = self.current_list_name()
        return None if name is None else self.list_path(name)

    def set_current(self, name: str) -> None:
        """Record ``name`` as the list in use."""
        with self.usable_path.open("w", encoding="utf-8", newline="") as marker:
            marker.write(name)

    def clear_current(self) -> None:
        """Record that no list is in use."""
        self.set_current(NONPATH + NONPATH_TRASH)
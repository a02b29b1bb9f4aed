"""The operations behind each command-line flag."""

from __future__ import annotations

import contextlib
import os
import shlex
import subprocess
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from .editing import edit_line, swap_lines
from .files import count_lines, exists, is_empty, list_names, numbered_lines
from .paths import (
    CHOOSE_LIST,
    EDITOR,
    EXIST,
    NO_TASKS,
    TASKS_HEADER,
    TASKS_LEN,
    TaskStore,
)

INVALID_LIST = "Invalid task list name"
CHOOSE_USABLE = "Choose the usable task list"
LOST_LISTS = "We lost your tasks lists."
DOT_ILLEGAL = "Dot is illegal"
CANNOT_KILL = "You can't. Change the tasks list"

_NUMBER_WIDTH = 1
_NUMBER_SEPARATOR = ": "

HELP_TEXT = (
    "clitasks - useful CLI Task Manager\n"
    "\n"
    "Usage: clitasks [flag] [flag arguments]  for flags who need arguments\n"
    "   or: clitasks [flag]                   for flags who doesn't need arguments\n"
    "\n"
    "Arguments can be normal and super. Super arguments is modificated normal "
    "argument. Usually this is a uppercased normal argument. For example, \"-C\" "
    "- super argument(modificated \"-c\"). In contrast to \"-c\", \"C\" complete "
    "all tasks in list\n"
    "\n"
    "Arguments:\n"
    "\tNormal:\n"
    "\t-p                                          print all tasks\n"
    "\t-s <fn>                                     print all tasks from argument list\n"
    "\t-n <new task text>                          make new task\n"
    "\t-c <id>                                     complite task as commit\n"
    "\t-r <id1> <id2>                              replace task 1 and task2\n"
    "\t-e <id>                                     edit task info by id\n"
    "\t-d                                          get dimension of usable list\n"
    "\t-l                                          see all task lists\n"
    "\t-b <list name>                              make a new task list\n"
    "\t-m <list name>                              change task list\n"
    "\t-k <list name>                              remove the task list\n"
    "\t-a <list name 1> <list name 2>              rename a task list\n"
    "\t-u                                          print using task list name\n"
    "\t-q                                          quit from task list\n"
    "\t-h                                          help menu\n"
    "\n"
    "\tSuper:\n"
    "\t-P <start> <end(not necessary)>             print from a line to b line\n"
    "\t-S <list name> <start> <end(not necessary)> print a-b lines from argument list\n"
    "\t-N <number of task>                         make +n new tasks\n"
    "\t-C                                          complite all tasks\n"
    "\t-E <list name>                              edit with editor\n"
    "\t-D <list name>                              get dimension of list from the argument\n"
    "\t-R <number of replacements>                 n-times use r\n"
    "\t-M <list name>                              like -m, can make non-existent list\n"
    "\t-K <list name>                              like -k, can delete usable task list"
)


def _numbered_view(path: Path) -> list[str]:
    """Number the non-blank lines of a file; blank lines get padding only."""
    view = []
    counter = 0
    for _, piece in numbered_lines(path):
        body = piece[:-1] if piece.endswith("\n") else piece
        if body:
            counter += 1
            view.append(f"{counter:<{_NUMBER_WIDTH}}{_NUMBER_SEPARATOR}{body}\n")
        else:
            view.append(" " * (_NUMBER_WIDTH + len(_NUMBER_SEPARATOR)) + "\n")
    return view


class TaskManager:
    """Runs task-list commands against a store, writing messages to ``out``."""

    def __init__(
        self,
        store: TaskStore | None = None,
        out: TextIO | None = None,
        editor: str = EDITOR,
    ) -> None:
        self.store = store if store is not None else TaskStore()
        self.out = out if out is not None else sys.stdout
        self.editor = editor

    # internal helpers

    def _say(self, text: str) -> None:
        print(text, file=self.out)

    def _current_existing(self) -> Path | None:
        path = self.store.current_list_path()
        if path is None or not exists(path):
            return None
        return path

    def _make(self, path: Path) -> None:
        self.store.root.mkdir(parents=True, exist_ok=True)
        path.open("w").close()

    def _cat(self, path: Path) -> None:
        if is_empty(path):
            self._say(NO_TASKS)
            return
        self._say(TASKS_HEADER)
        for number, piece in numbered_lines(path):
            self.out.write(f"{number}: {piece}")

    def _show_range(self, path: Path, start: int, end: int) -> None:
        if is_empty(path):
            self._say(NO_TASKS)
            return
        low, high = min(start, end), max(start, end)
        if low < 1:
            raise ValueError("line numbers start at 1")
        selected = _numbered_view(path)[low - 1 : high]
        if start > end:
            selected.reverse()
        self.out.writelines(selected)

    # printing

    def print_tasks(self) -> None:
        """Print every task of the list in use."""
        path = self._current_existing()
        if path is None:
            self._say(CHOOSE_LIST)
        else:
            self._cat(path)

    def print_list(self, name: str) -> None:
        """Print every task of the list called ``name``."""
        path = self.store.list_path(name)
        if exists(path):
            self._cat(path)
        else:
            self._say(INVALID_LIST)

    def print_range(self, start: int, end: int = TASKS_LEN) -> None:
        """Print lines ``start`` to ``end`` of the list in use, reversed if start > end."""
        path = self._current_existing()
        if path is None:
            self._say(CHOOSE_LIST)
        else:
            self._show_range(path, start, end)

    def print_list_range(self, name: str, start: int, end: int = TASKS_LEN) -> None:
        """Print lines ``start`` to ``end`` of the list called ``name``."""
        path = self.store.list_path(name)
        if exists(path):
            self._show_range(path, start, end)
        else:
            self._say(CHOOSE_LIST)

    # changing tasks

    def add_task(self, text: str) -> None:
        """Append ``text``, line ending included, to the list in use.

        Nothing happens when no list is in use.
        """
        path = self._current_existing()
        if path is None:
            return
        with path.open("a", encoding="utf-8", newline="") as target:
            target.write(text)

    def add_tasks(self, texts: Iterable[str]) -> None:
        """Append each of ``texts`` to the list in use.

        ``texts`` is consumed only when a list is in use.
        """
        path = self._current_existing()
        if path is None:
            self._say(CHOOSE_LIST)
            return
        with path.open("a", encoding="utf-8", newline="") as target:
            for text in texts:
                target.write(text)

    def complete(self, task_id: int) -> None:
        """Remove task ``task_id`` from the list in use."""
        path = self._current_existing()
        if path is None:
            self._say(CHOOSE_LIST)
        else:
            edit_line(path, "", task_id)

    def complete_all(self) -> None:
        """Remove every task from the list in use."""
        path = self._current_existing()
        if path is None:
            self._say(CHOOSE_LIST)
        else:
            self._make(path)

    def swap(self, first: int, second: int) -> None:
        """Exchange two tasks of the list in use.

        Raises IndexError for a task number outside the list.
        """
        if first == second:
            return
        path = self._current_existing()
        if path is None:
            self._say(CHOOSE_USABLE)
            return
        swap_lines(path, first, second)

    def swap_many(self, pairs: Iterable[tuple[int, int]]) -> None:
        """Exchange each pair of tasks, skipping pairs outside the list."""
        path = self._current_existing()
        if path is None:
            self._say(CHOOSE_LIST)
            return
        length = count_lines(path)
        for first, second in pairs:
            if 1 <= first <= length and 1 <= second <= length:
                self.swap(first, second)

    def edit(self, task_id: int, text: str) -> None:
        """Put ``text``, line ending included, in place of task ``task_id``."""
        path = self._current_existing()
        if path is None:
            self._say(CHOOSE_LIST)
        else:
            edit_line(path, text, task_id)

    def open_in_editor(self, name: str | None = None) -> None:
        """Open a list, or the list in use when ``name`` is None, in the editor."""
        if name is None:
            path = self._current_existing()
        else:
            path = self.store.list_path(name)
            if not exists(path):
                path = None
        if path is None:
            self._say(CHOOSE_LIST)
            return
        subprocess.run([*shlex.split(self.editor), str(path)], check=False)

    # inspecting lists

    def count(self) -> None:
        """Print the number of tasks in the list in use."""
        path = self._current_existing()
        if path is None:
            self._say(CHOOSE_LIST)
        else:
            self._say(str(count_lines(path)))

    def count_list(self, name: str) -> None:
        """Print the number of tasks in the list called ``name``."""
        path = self.store.list_path(name)
        if exists(path):
            self._say(f'"{name}" quantity: {count_lines(path)}')
        else:
            self._say(EXIST)

    def show_lists(self) -> None:
        """Print the name of every task list."""
        try:
            names = list_names(self.store.root)
        except OSError:
            self._say(LOST_LISTS)
            return
        for name in names:
            self._say(name)

    # managing lists

    def make_list(self, name: str) -> None:
        """Create the list ``name``, emptying it if it already exists."""
        if name.startswith("."):
            self._say(DOT_ILLEGAL)
            return
        self._make(self.store.list_path(name))

    def switch(self, name: str) -> None:
        """Use the existing list ``name``."""
        if exists(self.store.list_path(name)):
            self.store.set_current(name)
        else:
            self._say(f'{EXIST}. Use -M to make "{name}"')

    def switch_or_create(self, name: str) -> None:
        """Use the list ``name``, creating it when missing."""
        path = self.store.list_path(name)
        if not exists(path):
            self._make(path)
        self.store.set_current(name)

    def kill(self, name: str) -> None:
        """Delete the list ``name`` unless it is the list in use."""
        if self.store.current_list_name() == name:
            self._say(CANNOT_KILL)
            return
        with contextlib.suppress(OSError):
            os.remove(self.store.list_path(name))

    def force_kill(self, name: str) -> None:
        """Delete the list ``name``, leaving no list in use if it was the one."""
        if self.store.current_list_name() == name:
            self._say(f"Complete! {CHOOSE_LIST}")
            self.store.clear_current()
        with contextlib.suppress(OSError):
            os.remove(self.store.list_path(name))

    def rename(self, old: str, new: str) -> None:
        """Rename a list, following it if it is the list in use."""
        old_path = self.store.list_path(old)
        was_current = self.store.current_list_path() == old_path
        with contextlib.suppress(OSError):
            os.rename(old_path, self.store.list_path(new))
        if was_current:
            self.store.set_current(new)

    def current(self) -> None:
        """Print the name of the list in use."""
        name = self.store.current_list_name()
        self._say(name if name is not None else "Nothing")

    def quit(self) -> None:
        """Stop using any list."""
        self.store.root.mkdir(parents=True, exist_ok=True)
        self.store.clear_current()

    def help(self) -> None:
        """Print the usage summary."""
        self._say(HELP_TEXT)
# clitasks

A small command-line task manager. Tasks live in named task lists. Each list
is a plain text file with one task per line, kept in `~/.tasks/`. A marker
file `~/.tasks/.usable` records which list is the *current* one; most
commands work on it.

## Installation

```
pip install .
```

This installs the `ctm` command.

## Getting started

```
ctm -M work        # switch to the list "work", creating it if needed
ctm -n             # read one line from standard input and append it as a task
ctm -p             # print every task in the current list, numbered
ctm -c 2           # complete task 2 (its line is removed)
ctm -u             # print the name of the current list
ctm -q             # leave the current list
```

## Commands

Normal flags:

| Flag | Meaning |
| --- | --- |
| `-p` | print all tasks of the current list |
| `-s <list>` | print all tasks of the named list |
| `-n` | add a task read from one line of standard input |
| `-c <id>` | complete a task, removing its line |
| `-r <id1> <id2>` | swap two tasks |
| `-e <id>` | replace a task with a line read from standard input |
| `-d` | print the number of tasks in the current list |
| `-l` | show all task lists (names not starting with a dot) |
| `-b <list>` | create a task list, or empty it if it exists; names may not start with a dot |
| `-m <list>` | switch to an existing task list |
| `-k <list>` | remove a task list, unless it is the current one |
| `-a <old> <new>` | rename a task list; the new name may not start with a dot |
| `-u` | print the current list name |
| `-q` | leave the current list |
| `-h` | show the help text |

Super flags:

| Flag | Meaning |
| --- | --- |
| `-P <start> [end]` | print tasks `start` to `end` of the current list (`end` defaults to 100) |
| `-S <list> <start> [end]` | print tasks `start` to `end` of the named list |
| `-N <count>` | add `count` tasks, one per line of standard input |
| `-C` | complete every task in the current list |
| `-E <list>` | open a list in `nano`; `-E -` opens the current one |
| `-D <list>` | print the number of tasks in the named list |
| `-R <count>` | read `count` pairs of ids from standard input and swap each pair that lies inside the list |
| `-M <list>` | like `-m`, creating the list if it does not exist |
| `-K <list>` | like `-k`, but may also remove the current list, leaving no list in use |

When a range is given with `start` greater than `end`, the tasks are printed
in reverse order. In range output only non-blank lines are numbered.

Flags can be combined in one call and run in the order given. Problems with
a flag (an unknown flag, a missing argument, a task number outside the list)
are reported on standard error as `clitasks: ...`; the remaining flags still
run and the command exits with status 0.

## Using it from Python

The modules can be used directly:

- `clitasks.paths.TaskStore` – a directory of lists and the marker of the
  current one (`list_path`, `current_list_name`, `current_list_path`,
  `set_current`, `clear_current`); `default_root()` gives `~/.tasks`.
- `clitasks.files` – `numbered_lines`, `count_lines`, `is_empty`, `exists`,
  `list_names`.
- `clitasks.editing` – `edit_line` and `swap_lines` rewrite lines of a list file.
- `clitasks.commands.TaskManager` – one method per flag, writing its messages
  to a text stream.

```python
from clitasks.paths import TaskStore
from clitasks.commands import TaskManager

store = TaskStore("/tmp/my-tasks")
manager = TaskManager(store, out=None, editor="nano")  # out=None writes to stdout
manager.switch_or_create("errands")
manager.add_task("buy milk\n")
manager.print_tasks()
```

## Running the tests

```
pip install .[test]
pytest
```
"""Command-line entry point: parses short flags and runs each one in order."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from .commands import TaskManager
from .files import exists
from .paths import TASK_LEN, TASKS_LEN, TaskStore

PROG = "clitasks"
NO_FLAGS = "Use flags(check -h)"
DOT_IN_CONTEXT = "You can't use a dot in this context"

_LINE_LEN = 1023
_FLAGS_WITH_ARG = frozenset("PSsNcRrEeDbMmKka")
_FLAGS_WITHOUT_ARG = frozenset("pnCdluqh")
_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Read a leading integer the lenient way: anything unparsable is 0."""
    match = _INTEGER.match(text)
    return int(match.group(1)) if match else 0


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _pairs(stream: TextIO, times: int) -> Iterator[tuple[int, int]]:
    """Yield up to ``times`` pairs of whole numbers read from ``stream``."""
    tokens = _tokens(stream)
    for _ in range(times):
        try:
            first = int(next(tokens))
            second = int(next(tokens))
        except (StopIteration, ValueError):
            return
        yield first, second


def _fail(message: str) -> None:
    print(f"{PROG}: {message}", file=sys.stderr)


class _MissingArgument(Exception):
    """A flag needs one more word after its argument."""


def _run(manager: TaskManager, flag: str, optarg: str | None, rest: Sequence[str]) -> None:
    stdin = sys.stdin
    following = rest[0] if rest else None
    match flag:
        case "P":
            end = _atoi(following) if following is not None else TASKS_LEN
            manager.print_range(_atoi(optarg), end)
        case "p":
            manager.print_tasks()
        case "s":
            manager.print_list(optarg)
        case "S":
            if following is None:
                raise _MissingArgument(flag)
            end = _atoi(rest[1]) if len(rest) > 1 else TASKS_LEN
            manager.print_list_range(optarg, _atoi(following), end)
        case "N":
            count = _atoi(optarg)
            if count > 0:
                manager.add_tasks(stdin.readline(TASK_LEN - 1) for _ in range(count))
        case "n":
            manager.add_task(stdin.readline(_LINE_LEN))
        case "C":
            manager.complete_all()
        case "c":
            manager.complete(_atoi(optarg))
        case "E":
            manager.open_in_editor(None if optarg.startswith("-") else optarg)
        case "e":
            path = manager.store.current_list_path()
            text = stdin.readline(_LINE_LEN) if path is not None and exists(path) else ""
            manager.edit(_atoi(optarg), text)
        case "D":
            manager.count_list(optarg)
        case "d":
            manager.count()
        case "R":
            manager.swap_many(_pairs(stdin, max(_atoi(optarg), 0)))
        case "r":
            if following is None:
                raise _MissingArgument(flag)
            manager.swap(_atoi(optarg), _atoi(following))
        case "l":
            manager.show_lists()
        case "b":
            manager.make_list(optarg)
        case "M":
            manager.switch_or_create(optarg)
        case "m":
            manager.switch(optarg)
        case "K":
            manager.force_kill(optarg)
        case "k":
            manager.kill(optarg)
        case "a":
            if following is None:
                raise _MissingArgument(flag)
            if following.startswith("."):
                manager.out.write(DOT_IN_CONTEXT + "\n")
            else:
                manager.rename(optarg, following)
        case "u":
            manager.current()
        case "q":
            manager.quit()
        case "h":
            manager.help()


def main(argv: Sequence[str] | None = None) -> int:
    """Run every flag in ``argv`` (default: the process arguments) in order."""
    args = list(sys.argv[1:] if argv is None else argv)
    manager = TaskManager(TaskStore(), sys.stdout)

    if not args:
        print(NO_FLAGS)

    index = 0
    while index < len(args):
        arg = args[index]
        index += 1
        if arg == "--":
            break
        if not arg.startswith("-") or arg == "-":
            continue
        if arg.startswith("--"):
            _fail(f"unrecognized option '{arg}'")
            continue
        pos = 1
        while pos < len(arg):
            flag = arg[pos]
            pos += 1
            if flag not in _FLAGS_WITH_ARG and flag not in _FLAGS_WITHOUT_ARG:
                _fail(f"invalid option -- '{flag}'")
                continue
            optarg = None
            if flag in _FLAGS_WITH_ARG:
                if pos < len(arg):
                    optarg = arg[pos:]
                elif index < len(args):
                    optarg = args[index]
                    index += 1
                else:
                    _fail(f"option requires an argument -- '{flag}'")
                    break
                pos = len(arg)
            try:
                _run(manager, flag, optarg, args[index:])
            except _MissingArgument:
                _fail(f"option requires two arguments -- '{flag}'")
            except (ValueError, IndexError, OSError) as error:
                _fail(f"-{flag}: {error}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
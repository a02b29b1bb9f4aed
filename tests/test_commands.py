import io
import shlex
import sys

import pytest

from clitasks.commands import HELP_TEXT, TaskManager
from clitasks.files import count_lines, is_empty, list_names
from clitasks.paths import (
    CHOOSE_LIST,
    EXIST,
    NO_TASKS,
    NONPATH,
    NONPATH_TRASH,
    TASKS_HEADER,
    TaskStore,
)


def _setup(tmp_path, content=None, name="work", editor="nano"):
    store = TaskStore(tmp_path)
    out = io.StringIO()
    manager = TaskManager(store, out, editor)
    if content is not None:
        store.list_path(name).write_text(content, encoding="utf-8")
        store.set_current(name)
    return manager, store, out


def test_print_tasks_without_list(tmp_path):
    manager, _, out = _setup(tmp_path)
    manager.print_tasks()
    assert out.getvalue() == CHOOSE_LIST + "\n"


def test_print_tasks_empty_list(tmp_path):
    manager, _, out = _setup(tmp_path, "")
    manager.print_tasks()
    assert out.getvalue() == NO_TASKS + "\n"


def test_print_tasks_numbers_lines(tmp_path):
    manager, _, out = _setup(tmp_path, "alpha\nbeta\n")
    manager.print_tasks()
    assert out.getvalue() == "Tasks:\n1: alpha\n2: beta\n"


def test_print_list_missing(tmp_path):
    manager, _, out = _setup(tmp_path)
    manager.print_list("absent")
    assert out.getvalue() == "Invalid task list name\n"


def test_print_list_other_list(tmp_path):
    manager, store, out = _setup(tmp_path)
    store.list_path("home").write_text("one\ntwo\n", encoding="utf-8")
    manager.print_list("home")
    lines = out.getvalue().splitlines()
    assert lines[0] == TASKS_HEADER
    assert [line.split(": ", 1)[1] for line in lines[1:]] == ["one", "two"]


def test_print_range_reversed_is_mirror(tmp_path):
    manager, _, out = _setup(tmp_path, "a\nb\nc\nd\n")
    manager.print_range(2, 3)
    forward = out.getvalue().splitlines()
    out.seek(0)
    out.truncate()
    manager.print_range(3, 2)
    backward = out.getvalue().splitlines()
    assert forward == list(reversed(backward))
    assert len(forward) == 2


def test_print_range_selects_lines(tmp_path):
    manager, _, out = _setup(tmp_path, "a\nb\nc\n")
    manager.print_range(2, 3)
    assert out.getvalue() == "2: b\n3: c\n"


def test_print_range_skips_numbering_blank_lines(tmp_path):
    manager, _, out = _setup(tmp_path, "a\n\nb\n")
    manager.print_range(1)
    lines = out.getvalue().splitlines()
    assert len(lines) == 3
    assert lines[1].strip() == ""
    assert [line.split(": ", 1)[1] for line in (lines[0], lines[2])] == ["a", "b"]


def test_print_range_empty_and_missing(tmp_path):
    manager, _, out = _setup(tmp_path, "")
    manager.print_range(1, 2)
    assert out.getvalue() == NO_TASKS + "\n"
    out.seek(0)
    out.truncate()
    manager.print_list_range("absent", 1, 2)
    assert out.getvalue() == CHOOSE_LIST + "\n"


def test_print_range_rejects_zero(tmp_path):
    manager, _, _ = _setup(tmp_path, "a\n")
    with pytest.raises(ValueError):
        manager.print_range(0, 1)


def test_print_list_range_matches_print_range(tmp_path):
    manager, _, out = _setup(tmp_path, "x\ny\nz\n")
    manager.print_range(1, 2)
    current = out.getvalue()
    out.seek(0)
    out.truncate()
    manager.print_list_range("work", 1, 2)
    assert out.getvalue() == current


def test_add_task_appends(tmp_path):
    manager, store, _ = _setup(tmp_path, "first\n")
    manager.add_task("second\n")
    assert store.list_path("work").read_text(encoding="utf-8") == "first\nsecond\n"


def test_add_task_without_list_does_nothing(tmp_path):
    manager, _, out = _setup(tmp_path)
    manager.add_task("lost\n")
    assert out.getvalue() == ""
    assert list_names(tmp_path) == []


def test_add_tasks_appends_all(tmp_path):
    manager, store, _ = _setup(tmp_path, "")
    manager.add_tasks(["one\n", "two\n", "three\n"])
    assert store.list_path("work").read_text(encoding="utf-8") == "one\ntwo\nthree\n"


def test_add_tasks_without_list_leaves_input_unread(tmp_path):
    manager, _, out = _setup(tmp_path)
    texts = iter(["one\n", "two\n"])
    manager.add_tasks(texts)
    assert out.getvalue() == CHOOSE_LIST + "\n"
    assert next(texts) == "one\n"


def test_complete_removes_task(tmp_path):
    manager, store, _ = _setup(tmp_path, "a\nb\nc\n")
    manager.complete(2)
    assert store.list_path("work").read_text(encoding="utf-8") == "a\nc\n"


def test_complete_without_list(tmp_path):
    manager, _, out = _setup(tmp_path)
    manager.complete(1)
    assert out.getvalue() == CHOOSE_LIST + "\n"


def test_complete_all_empties_list(tmp_path):
    manager, store, _ = _setup(tmp_path, "a\nb\n")
    manager.complete_all()
    assert is_empty(store.list_path("work"))
    assert store.list_path("work").exists()


def test_swap_twice_restores(tmp_path):
    manager, store, _ = _setup(tmp_path, "a\nb\nc\n")
    manager.swap(1, 3)
    assert store.list_path("work").read_text(encoding="utf-8") == "c\nb\na\n"
    manager.swap(1, 3)
    assert store.list_path("work").read_text(encoding="utf-8") == "a\nb\nc\n"


def test_swap_without_list(tmp_path):
    manager, _, out = _setup(tmp_path)
    manager.swap(1, 2)
    assert out.getvalue() == "Choose the usable task list\n"


def test_swap_out_of_range(tmp_path):
    manager, _, _ = _setup(tmp_path, "a\nb\n")
    with pytest.raises(IndexError):
        manager.swap(1, 5)


def test_swap_many_skips_out_of_range(tmp_path):
    manager, store, _ = _setup(tmp_path, "a\nb\nc\n")
    manager.swap_many([(1, 10), (1, 2)])
    assert store.list_path("work").read_text(encoding="utf-8") == "b\na\nc\n"


def test_edit_replaces_task(tmp_path):
    manager, store, _ = _setup(tmp_path, "a\nb\n")
    manager.edit(2, "changed\n")
    assert store.list_path("work").read_text(encoding="utf-8") == "a\nchanged\n"


def test_edit_without_list(tmp_path):
    manager, _, out = _setup(tmp_path)
    manager.edit(1, "x\n")
    assert out.getvalue() == CHOOSE_LIST + "\n"


def test_open_in_editor_runs_editor(tmp_path):
    script = "import sys; open(sys.argv[1], 'a').write('edited\\n')"
    editor = f"{shlex.quote(sys.executable)} -c {shlex.quote(script)}"
    manager, store, _ = _setup(tmp_path, "a\n", editor=editor)
    manager.open_in_editor()
    assert store.list_path("work").read_text(encoding="utf-8") == "a\nedited\n"


def test_open_in_editor_missing_list(tmp_path):
    manager, _, out = _setup(tmp_path)
    manager.open_in_editor("absent")
    assert out.getvalue() == CHOOSE_LIST + "\n"


def test_count_matches_line_count(tmp_path):
    manager, store, out = _setup(tmp_path, "a\nb\nc\n")
    manager.count()
    assert out.getvalue() == f"{count_lines(store.list_path('work'))}\n"


def test_count_list(tmp_path):
    manager, store, out = _setup(tmp_path, "a\nb\n")
    manager.count_list("work")
    assert out.getvalue() == f'"work" quantity: {count_lines(store.list_path("work"))}\n'
    out.seek(0)
    out.truncate()
    manager.count_list("absent")
    assert out.getvalue() == EXIST + "\n"


def test_show_lists(tmp_path):
    manager, _, out = _setup(tmp_path, "")
    manager.make_list("home")
    manager.show_lists()
    assert out.getvalue().splitlines() == list_names(tmp_path)
    assert "home" in out.getvalue().splitlines()


def test_show_lists_missing_root(tmp_path):
    store = TaskStore(tmp_path / "missing")
    out = io.StringIO()
    TaskManager(store, out).show_lists()
    assert out.getvalue() == "We lost your tasks lists.\n"


def test_make_list_rejects_dot(tmp_path):
    manager, _, out = _setup(tmp_path)
    manager.make_list(".hidden")
    assert out.getvalue() == "Dot is illegal\n"
    assert not (tmp_path / ".hidden").exists()


def test_make_list_empties_existing(tmp_path):
    manager, store, _ = _setup(tmp_path, "a\n")
    manager.make_list("work")
    assert is_empty(store.list_path("work"))


def test_switch(tmp_path):
    manager, store, out = _setup(tmp_path, "")
    manager.switch("absent")
    assert out.getvalue() == f'{EXIST}. Use -M to make "absent"\n'
    assert store.current_list_name() == "work"
    manager.make_list("home")
    manager.switch("home")
    assert store.current_list_name() == "home"


def test_switch_or_create(tmp_path):
    manager, store, _ = _setup(tmp_path)
    manager.switch_or_create("fresh")
    assert store.current_list_name() == "fresh"
    assert store.list_path("fresh").exists()


def test_kill(tmp_path):
    manager, store, out = _setup(tmp_path, "a\n")
    manager.kill("work")
    assert out.getvalue() == "You can't. Change the tasks list\n"
    assert store.list_path("work").exists()
    manager.make_list("other")
    manager.kill("other")
    assert not store.list_path("other").exists()


def test_force_kill_current(tmp_path):
    manager, store, out = _setup(tmp_path, "a\n")
    manager.force_kill("work")
    assert out.getvalue() == f"Complete! {CHOOSE_LIST}\n"
    assert store.current_list_name() == NONPATH + NONPATH_TRASH
    assert not store.list_path("work").exists()


def test_rename_current_follows(tmp_path):
    manager, store, _ = _setup(tmp_path, "a\n")
    manager.rename("work", "job")
    assert store.current_list_name() == "job"
    assert store.list_path("job").read_text(encoding="utf-8") == "a\n"
    assert not store.list_path("work").exists()


def test_rename_other_keeps_current(tmp_path):
    manager, store, _ = _setup(tmp_path, "a\n")
    manager.make_list("other")
    manager.rename("other", "renamed")
    assert store.current_list_name() == "work"
    assert store.list_path("renamed").exists()


def test_current_and_quit(tmp_path):
    manager, store, out = _setup(tmp_path, "")
    manager.current()
    assert out.getvalue() == "work\n"
    manager.quit()
    assert store.current_list_name() == NONPATH + NONPATH_TRASH
    manager.print_tasks()
    assert out.getvalue().endswith(CHOOSE_LIST + "\n")


def test_help(tmp_path):
    manager, _, out = _setup(tmp_path)
    manager.help()
    assert out.getvalue() == HELP_TEXT + "\n"
    assert "\t-h" in out.getvalue()
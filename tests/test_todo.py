import json
from datetime import datetime, timedelta, timezone

import pytest

from bgce import todo
from bgce.todo import TaskStore


@pytest.fixture
def store(tmp_path):
    return TaskStore(tmp_path / "tasks.json")


def test_missing_file_loads_as_empty(store):
    assert store.load() == []


def test_ids_are_sequential(store):
    for name in ("a", "b", "c"):
        store.add(name)
    assert [task.id for task in store.list(True)] == [1, 2, 3]


def test_round_trip_through_file(store):
    first = store.add("write report")
    store.add("call back")
    store.complete(first.id)
    reloaded = TaskStore(store.path).load()
    assert reloaded == store.load()


def test_file_uses_expected_field_names(store):
    store.add("something")
    data = json.loads(store.path.read_text(encoding="utf-8"))
    assert set(data[0]) == {"ID", "Description", "CreatedAt", "Done"}


def test_created_at_is_now_and_survives_reload(store):
    before = datetime.now(timezone.utc)
    task = store.add("timed")
    after = datetime.now(timezone.utc)
    assert before <= task.created_at <= after
    assert TaskStore(store.path).load()[0].created_at == task.created_at


def test_list_hides_done_tasks(store):
    first = store.add("a")
    store.add("b")
    assert store.complete(first.id) is True
    assert [task.description for task in store.list(False)] == ["b"]
    assert [task.description for task in store.list(True)] == ["a", "b"]


def test_complete_twice_or_unknown_fails(store):
    task = store.add("once")
    assert store.complete(task.id) is True
    assert store.complete(task.id) is False
    assert store.complete(task.id + 100) is False


def test_delete(store):
    task = store.add("temporary")
    assert store.delete(task.id) is True
    assert store.list(True) == []
    assert store.delete(task.id) is False


def test_loads_nanosecond_timestamps(store):
    store.path.write_text(
        json.dumps(
            [
                {
                    "ID": 7,
                    "Description": "imported",
                    "CreatedAt": "2025-06-13T10:20:30.123456789+06:00",
                    "Done": True,
                }
            ]
        ),
        encoding="utf-8",
    )
    (task,) = store.load()
    assert task.created_at == datetime(
        2025, 6, 13, 10, 20, 30, 123456, tzinfo=timezone(timedelta(hours=6))
    )
    assert (task.id, task.description, task.done) == (7, "imported", True)


def test_null_file_loads_as_empty(store):
    store.path.write_text("null", encoding="utf-8")
    assert store.load() == []


def test_corrupt_file_raises(store):
    store.path.write_text("{", encoding="utf-8")
    with pytest.raises(ValueError):
        store.load()


def test_html_characters_are_escaped(store):
    store.add("a<b>&c")
    raw = store.path.read_text(encoding="utf-8")
    assert "\\u003c" in raw and "<" not in raw
    assert store.load()[0].description == "a<b>&c"


def test_main_without_command(capsys):
    todo.main([])
    assert capsys.readouterr().out == "Please provide a command: add, list, complete, delete\n"


def test_main_add_and_list(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    todo.main(["add", "buy milk"])
    todo.main(["list"])
    out = capsys.readouterr().out
    assert "Task added successfully!" in out
    assert "Description: buy milk" in out
    assert "Done: false" in out


def test_main_list_empty(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    todo.main(["list", "--all"])
    assert capsys.readouterr().out == "No tasks found.\n"


def test_main_invalid_id(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    todo.main(["complete", "abc"])
    assert capsys.readouterr().out.startswith("Invalid task ID:")


def test_main_complete_missing(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    todo.main(["complete", "5"])
    assert capsys.readouterr().out == "Task not found or already completed.\n"


def test_main_delete(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    todo.main(["add", "gone soon"])
    todo.main(["delete", "1"])
    assert "Task deleted successfully!" in capsys.readouterr().out
    assert TaskStore(tmp_path / "tasks.json").load() == []


def test_main_unknown_command(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    todo.main(["frobnicate"])
    assert capsys.readouterr().out == (
        "Unknown command. Available commands: add, list, complete, delete\n"
    )
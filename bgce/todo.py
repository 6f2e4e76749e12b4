"""A small to-do list kept in a JSON file."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

DEFAULT_PATH = "tasks.json"
_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


@dataclass
class Task:
    """One entry of the to-do list."""

    id: int
    description: str
    created_at: datetime
    done: bool = False


def _parse_time(text: str | None) -> datetime:
    if not text:
        return _ZERO_TIME
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


class TaskStore:
    """Tasks persisted as JSON at ``path``."""

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)
        self.tasks: list[Task] = []

    def load(self) -> list[Task]:
        """Read the tasks from disk; a missing file means an empty list."""
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            data = None
        if data is not None and not isinstance(data, list):
            raise ValueError("task file does not hold a list")
        self.tasks = [
            Task(
                id=int(item.get("ID", 0)),
                description=str(item.get("Description", "")),
                created_at=_parse_time(item.get("CreatedAt")),
                done=bool(item.get("Done", False)),
            )
            for item in data or []
        ]
        return self.tasks

    def save(self) -> None:
        """Write the tasks to disk."""
        records = [
            {
                "ID": task.id,
                "Description": task.description,
                "CreatedAt": task.created_at.isoformat(),
                "Done": task.done,
            }
            for task in self.tasks
        ]
        self.path.write_text(json.dumps(records, indent=1), encoding="utf-8")

    def add(self, description: str) -> Task:
        """Append a new task and return it."""
        self.load()
        task = Task(len(self.tasks) + 1, description, datetime.now().astimezone())
        self.tasks.append(task)
        self.save()
        return task

    def list(self, include_done: bool = False) -> list[Task]:
        """Return all tasks, or only the unfinished ones."""
        self.load()
        return [task for task in self.tasks if include_done or not task.done]

    def complete(self, task_id: int) -> bool:
        """Mark a task done; False if it is missing or already done."""
        self.load()
        task = next((t for t in self.tasks if t.id == task_id), None)
        if task is None or task.done:
            return False
        task.done = True
        self.save()
        return True

    def delete(self, task_id: int) -> bool:
        """Remove a task; False if there is no such task."""
        self.load()
        for index, task in enumerate(self.tasks):
            if task.id == task_id:
                del self.tasks[index]
                self.save()
                return True
        return False


def main(argv: Sequence[str] | None = None) -> int:
    """Run one to-do command: add, list, complete or delete."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Please provide a command: add, list, complete, delete")
        return 0
    store = TaskStore()
    command, rest = args[0], args[1:]

    if command == "add":
        if not rest:
            print("Please provide a task description.")
            return 0
        try:
            store.add(rest[0])
        except (OSError, ValueError) as exc:
            print("Error adding task:", exc)
            return 0
        print("Task added successfully!")
    elif command == "list":
        try:
            tasks = store.list(bool(rest) and rest[0] == "--all")
        except (OSError, ValueError):
            tasks = []
        if not tasks:
            print("No tasks found.")
        for task in tasks:
            print(
                f"ID: {task.id}, Description: {task.description}, "
                f"Created At: {task.created_at:%Y-%m-%d %H:%M:%S}, "
                f"Done: {str(task.done).lower()}"
            )
    elif command in ("complete", "delete"):
        if not rest:
            print("Please provide a task ID.")
            return 0
        try:
            task_id = int(rest[0])
        except ValueError as exc:
            print("Invalid task ID:", exc)
            return 0
        action = store.complete if command == "complete" else store.delete
        try:
            succeeded = action(task_id)
        except (OSError, ValueError):
            succeeded = False
        if command == "complete":
            print("Task completed successfully!" if succeeded else "Task not found or already completed.")
        else:
            print("Task deleted successfully!" if succeeded else "Task not found or could not be deleted.")
    else:
        print("Unknown command. Available commands: add, list, complete, delete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
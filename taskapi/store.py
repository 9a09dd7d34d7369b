import threading
from typing import Dict, List, Optional

from .errors import EmptyTitle, UnknownTask
from .models import Task


class TaskStore:
    """In-memory task storage.

    Tasks are kept in insertion order. Every public method holds the store
    lock, and records cross the store boundary only as copies, so callers can
    never mutate stored state behind the lock.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._tasks: Dict[int, Task] = {}
        self._next_id = 0

    def create(self, title: str) -> Task:
        """Store and return a new task with the given title."""
        if title == "":
            raise EmptyTitle()
        with self._lock:
            task = Task(id=self._next_id, title=title)
            self._tasks[task.id] = task
            self._next_id += 1
            return task.model_copy()

    def find(self, task_id: int) -> Optional[Task]:
        """Return the task with the given id, or None."""
        with self._lock:
            task = self._tasks.get(task_id)
            return task.model_copy() if task is not None else None

    def all(self) -> List[Task]:
        with self._lock:
            return [task.model_copy() for task in self._tasks.values()]

    def update(self, task: Task) -> None:
        """Replace the stored task that has the same id as `task`."""
        with self._lock:
            if task.id not in self._tasks:
                raise UnknownTask("update", task.id)
            # Keys keep their insertion position on reassignment.
            self._tasks[task.id] = Task(**task.model_dump())

    def delete(self, task_id: int) -> None:
        with self._lock:
            if task_id not in self._tasks:
                raise UnknownTask("delete", task_id)
            del self._tasks[task_id]

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def reset(self) -> None:
        """Drop every task and restart id assignment at 0."""
        with self._lock:
            self._tasks.clear()
            self._next_id = 0


_store = TaskStore()


def get_store() -> TaskStore:
    """Dependency to get the process-wide task store."""
    return _store

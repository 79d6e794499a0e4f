import logging
import threading
from collections.abc import Callable
from datetime import datetime, timezone

from taskboard.models import Priority, SortOrder, Task, TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TaskStore:
    """In-memory store for tasks keyed by id.

    Every read and write goes through a single lock, and callers only ever
    receive copies of the stored records.
    """

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self._tasks: dict[int, Task] = {}
        self._next_id = 1
        self._clock = clock
        self._lock = threading.Lock()

    def list_tasks(
        self,
        completed: bool | None = None,
        sort: SortOrder | None = None,
    ) -> list[Task]:
        """List tasks in insertion order, optionally filtered and sorted.

        Sorting is by creation time and is stable, so tasks created at the
        same instant keep their insertion order in both directions.
        """
        with self._lock:
            tasks = [t.model_copy() for t in self._tasks.values()]
        if completed is not None:
            tasks = [t for t in tasks if t.completed is completed]
        if sort is not None:
            tasks.sort(
                key=lambda t: t.created_at, reverse=sort is SortOrder.DESC
            )
        return tasks

    def list_by_priority(self, priority: Priority | str) -> list[Task]:
        """List tasks at the given priority level."""
        if not isinstance(priority, Priority):
            priority = Priority(priority.lower())
        with self._lock:
            return [
                t.model_copy()
                for t in self._tasks.values()
                if t.priority is priority
            ]

    def get_task(self, task_id: int) -> Task | None:
        """Get a task by ID."""
        with self._lock:
            task = self._tasks.get(task_id)
            return task.model_copy() if task is not None else None

    def create_task(self, payload: TaskCreate) -> Task:
        """Store a new task, assigning its id and creation time."""
        with self._lock:
            task = Task(
                id=self._next_id,
                title=payload.title,
                description=payload.description,
                completed=payload.completed,
                priority=payload.priority,
                created_at=self._clock(),
            )
            self._tasks[task.id] = task
            self._next_id += 1
        logger.info("Created task %d", task.id)
        return task.model_copy()

    def update_task(self, task_id: int, patch: TaskUpdate) -> Task | None:
        """Apply the supplied fields of ``patch`` to an existing task."""
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return None
            changes = patch.supplied()
            updated = task.model_copy(update=changes)
            self._tasks[task_id] = updated
        logger.info(
            "Updated task %d (%s)", task_id, ", ".join(sorted(changes))
        )
        return updated.model_copy()

    def delete_task(self, task_id: int) -> bool:
        """Remove a task. Returns False if it did not exist."""
        with self._lock:
            if self._tasks.pop(task_id, None) is None:
                return False
        logger.info("Deleted task %d", task_id)
        return True

    def clear(self) -> None:
        """Drop every task. Ids are not reused afterwards."""
        with self._lock:
            self._tasks.clear()

    def __contains__(self, task_id: object) -> bool:
        with self._lock:
            return task_id in self._tasks

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

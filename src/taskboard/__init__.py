"""taskboard: an in-memory task management HTTP API."""

from taskboard.errors import (
    TaskboardError,
    TaskNotFoundError,
    TaskValidationError,
)
from taskboard.main import create_app
from taskboard.models import Priority, SortOrder, Task, TaskCreate, TaskUpdate
from taskboard.store import TaskStore

__all__ = [
    "Priority",
    "SortOrder",
    "Task",
    "TaskCreate",
    "TaskNotFoundError",
    "TaskStore",
    "TaskUpdate",
    "TaskValidationError",
    "TaskboardError",
    "create_app",
]

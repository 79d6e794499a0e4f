class TaskboardError(Exception):
    """Base class for errors rendered as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TaskValidationError(TaskboardError, ValueError):
    """Raised when a path, query, or body value fails validation."""

    status_code = 400


class TaskNotFoundError(TaskboardError, LookupError):
    """Raised when no task exists for the requested id."""

    status_code = 404

    def __init__(self, task_id: int, message: str = "Task not found") -> None:
        super().__init__(message)
        self.task_id = task_id

"""Parse and normalize request input for the task routes.

Each parser returns the normalized value or raises ``TaskValidationError``
carrying the message sent back to the client.
"""

import re
from typing import Any

from taskboard.errors import TaskValidationError
from taskboard.models import Priority, SortOrder, TaskCreate, TaskUpdate

INVALID_TASK_ID = "Invalid task ID format"
TITLE_REQUIRED = "Title is required and must be a non-empty string"
TITLE_INVALID = "Title must be a non-empty string"
DESCRIPTION_REQUIRED = (
    "Description is required and must be a non-empty string"
)
DESCRIPTION_INVALID = "Description must be a non-empty string"
COMPLETED_INVALID = "Completed must be a boolean value"
PRIORITY_INVALID = "Priority must be low, medium, or high"
PRIORITY_LEVEL_INVALID = "Priority level must be low, medium, or high"
UPDATE_EMPTY = (
    "At least one field (title, description, completed, or priority) "
    "must be provided"
)
COMPLETED_QUERY_INVALID = "Completed query parameter must be true or false"
SORT_QUERY_INVALID = "Sort query parameter must be asc or desc"
BODY_NOT_OBJECT = "Request body must be a JSON object"

UPDATABLE_FIELDS = ("title", "description", "completed", "priority")

_TASK_ID_RE = re.compile(r"^[+\-]?[0-9]+$")


def parse_task_id(raw: str) -> int:
    raw = raw.strip()
    if not _TASK_ID_RE.match(raw):
        raise TaskValidationError(INVALID_TASK_ID)
    try:
        return int(raw)
    except ValueError:
        # longer than the interpreter's int string limit
        raise TaskValidationError(INVALID_TASK_ID) from None


def parse_priority(value: Any, message: str = PRIORITY_INVALID) -> Priority:
    """Normalize a case-insensitive priority name."""
    if not isinstance(value, str):
        raise TaskValidationError(message)
    try:
        return Priority(value.lower())
    except ValueError:
        raise TaskValidationError(message) from None


def parse_priority_level(raw: str) -> Priority:
    return parse_priority(raw, PRIORITY_LEVEL_INVALID)


def parse_sort_order(raw: str | None) -> SortOrder | None:
    if raw is None:
        return None
    try:
        return SortOrder(raw.lower())
    except ValueError:
        raise TaskValidationError(SORT_QUERY_INVALID) from None


def parse_completed_query(raw: str | None) -> bool | None:
    """Accept exactly ``"true"`` or ``"false"``; anything else is an error."""
    if raw is None:
        return None
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise TaskValidationError(COMPLETED_QUERY_INVALID)


def _require_object(body: Any) -> dict[str, Any]:
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise TaskValidationError(BODY_NOT_OBJECT)
    return body


def _parse_text(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise TaskValidationError(message)
    return value.strip()


def _parse_completed(value: Any) -> bool:
    # JSON 0/1 are ints, not booleans
    if not isinstance(value, bool):
        raise TaskValidationError(COMPLETED_INVALID)
    return value


def parse_create_body(body: Any) -> TaskCreate:
    """Validate a create request body.

    ``title`` and ``description`` are required; ``completed`` defaults to
    false and ``priority`` to medium.
    """
    data = _require_object(body)
    title = _parse_text(data.get("title"), TITLE_REQUIRED)
    description = _parse_text(data.get("description"), DESCRIPTION_REQUIRED)
    completed = _parse_completed(data.get("completed", False))
    priority = (
        parse_priority(data["priority"])
        if "priority" in data
        else Priority.MEDIUM
    )
    return TaskCreate(
        title=title,
        description=description,
        completed=completed,
        priority=priority,
    )


def parse_update_body(body: Any) -> TaskUpdate:
    """Validate an update request body.

    A key that is present counts as supplied, even when its value is null.
    """
    data = _require_object(body)
    if not any(name in data for name in UPDATABLE_FIELDS):
        raise TaskValidationError(UPDATE_EMPTY)

    fields: dict[str, Any] = {}
    if "title" in data:
        fields["title"] = _parse_text(data["title"], TITLE_INVALID)
    if "description" in data:
        fields["description"] = _parse_text(
            data["description"], DESCRIPTION_INVALID
        )
    if "completed" in data:
        fields["completed"] = _parse_completed(data["completed"])
    if "priority" in data:
        fields["priority"] = parse_priority(data["priority"])
    return TaskUpdate(**fields)

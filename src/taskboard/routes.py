from typing import Any

import srsly
from fastapi import APIRouter, Request, Response

from taskboard.errors import TaskNotFoundError, TaskValidationError
from taskboard.models import Task
from taskboard.store import TaskStore
from taskboard.validation import (
    parse_completed_query,
    parse_create_body,
    parse_priority_level,
    parse_sort_order,
    parse_task_id,
    parse_update_body,
)

BODY_NOT_JSON = "Request body must be valid JSON"


async def _read_json_body(request: Request) -> Any:
    """Decode the request body; an empty body reads as ``None``."""
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return srsly.json_loads(raw.decode("utf-8"))
    except ValueError:
        raise TaskValidationError(BODY_NOT_JSON) from None


def create_routes(store: TaskStore) -> APIRouter:
    """Create the task CRUD routes backed by ``store``."""
    router = APIRouter(prefix="/tasks")

    @router.get("")
    def list_tasks(
        completed: str | None = None,
        sort: str | None = None,
    ) -> list[Task]:
        """List tasks, optionally filtered by completion and sorted."""
        return store.list_tasks(
            completed=parse_completed_query(completed),
            sort=parse_sort_order(sort),
        )

    @router.get("/priority/{level}")
    def list_tasks_by_priority(level: str) -> list[Task]:
        """List tasks at one priority level."""
        return store.list_by_priority(parse_priority_level(level))

    @router.get("/{task_id}")
    def get_task(task_id: str) -> Task:
        """Get a single task by ID."""
        tid = parse_task_id(task_id)
        task = store.get_task(tid)
        if task is None:
            raise TaskNotFoundError(tid)
        return task

    @router.post("", status_code=201)
    async def create_task(request: Request) -> Task:
        """Create a task from a JSON body."""
        payload = parse_create_body(await _read_json_body(request))
        return store.create_task(payload)

    @router.put("/{task_id}")
    async def update_task(task_id: str, request: Request) -> Task:
        """Overwrite only the fields present in the JSON body."""
        tid = parse_task_id(task_id)
        body = await _read_json_body(request)
        if tid not in store:
            raise TaskNotFoundError(tid)
        task = store.update_task(tid, parse_update_body(body))
        if task is None:
            raise TaskNotFoundError(tid)
        return task

    @router.delete("/{task_id}", status_code=204)
    def delete_task(task_id: str) -> Response:
        """Delete a task."""
        tid = parse_task_id(task_id)
        if not store.delete_task(tid):
            raise TaskNotFoundError(tid)
        return Response(status_code=204)

    return router

"""Task Routes — HTTP verbs on the task collection mapped to TaskService calls.

Invariants:
    - Mounted under Settings.tasks_path (default /api/tasks)
    - Body decoding and id parsing fail with 400 BEFORE any service call
    - Ids are ASCII decimal integers within the tasks.id column range
    - GET → 200 list, POST → 201 task, PUT → 200 task, DELETE → 204 empty
    - PUT on an unknown id → 404; DELETE on an unknown id → 204 (idempotent)
    - Methods other than GET/POST/PUT/DELETE on the collection → 405 (router default)
    - Storage failures propagate as DatabaseError → 500 via error_handlers
"""

import re

from fastapi import APIRouter, Depends, Query, Response, status

from task_manager.api.dependencies import get_task_service
from task_manager.core.domain_types import TASK_ID_MAX, TASK_ID_MIN, TaskId
from task_manager.core.errors import (
    ErrorContext, InvalidTaskInputError, ResourceNotFoundError,
)
from task_manager.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from task_manager.services.task_service import TaskService

router = APIRouter(tags=["tasks"])

_TASK_ID_PATTERN = re.compile(r"-?[0-9]+")


def parse_task_id(raw: str | None) -> TaskId:
    """Parse a route/query id or raise InvalidTaskInputError."""
    if raw is None or not _TASK_ID_PATTERN.fullmatch(raw):
        raise InvalidTaskInputError("Invalid task ID", "id")
    value = int(raw)
    if not TASK_ID_MIN <= value <= TASK_ID_MAX:
        raise InvalidTaskInputError("Invalid task ID", "id")
    return TaskId(value)


@router.get("", response_model=list[TaskResponse])
async def list_tasks(service: TaskService = Depends(get_task_service)):
    """Fetch all tasks."""
    tasks = await service.get_all_tasks()
    return [TaskResponse.model_validate(task) for task in tasks]


@router.post(
    "", response_model=TaskResponse, status_code=status.HTTP_201_CREATED,
)
async def create_task(
    body: TaskCreate, service: TaskService = Depends(get_task_service),
):
    """Create a task; the response carries the assigned id and timestamps."""
    task = body.to_domain()
    await service.create_task(task)
    return TaskResponse.model_validate(task)


@router.put("", response_model=TaskResponse)
async def update_task(
    body: TaskUpdate, service: TaskService = Depends(get_task_service),
):
    """Overwrite name/completed of the task selected by body.id."""
    task = body.to_domain()
    if not await service.update_task(task):
        raise ResourceNotFoundError(
            "Task", str(task.id), ErrorContext(task_id=task.id),
        )
    return TaskResponse.model_validate(task)


@router.delete(
    "", status_code=status.HTTP_204_NO_CONTENT, response_class=Response,
)
async def delete_task_by_query(
    raw_id: str | None = Query(None, alias="id"),
    service: TaskService = Depends(get_task_service),
):
    """DELETE ?id=N, same contract as DELETE /{task_id}."""
    task_id = parse_task_id(raw_id)
    await service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str, service: TaskService = Depends(get_task_service),
):
    """Fetch one task; unknown ids are 404."""
    parsed_id = parse_task_id(task_id)
    task = await service.get_task_by_id(parsed_id)
    if task is None:
        raise ResourceNotFoundError(
            "Task", str(parsed_id), ErrorContext(task_id=parsed_id),
        )
    return TaskResponse.model_validate(task)


@router.delete(
    "/{task_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_task(
    task_id: str, service: TaskService = Depends(get_task_service),
):
    """Hard delete. Unknown ids succeed silently."""
    await service.delete_task(parse_task_id(task_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

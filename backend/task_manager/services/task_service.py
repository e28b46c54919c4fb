"""Task Service — orchestration seam between routes and the task repository.

Invariants:
    - One method per repository operation; arguments and results pass through unchanged
    - Depends on the TaskRepository protocol, never on SQL or the ORM
    - No HTTP concepts here (status codes, request objects)

Design Decisions:
    - Kept as its own layer even while it only delegates: business rules land
      here without changing route signatures
"""

import logging

from task_manager.core.domain_types import Task, TaskId
from task_manager.core.repository_protocols import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """Pass-through task operations."""

    def __init__(self, repository: TaskRepository):
        self._repository = repository

    async def create_task(self, task: Task) -> TaskId:
        task_id = await self._repository.create(task)
        logger.info("Task created", extra={"task_id": task_id})
        return task_id

    async def get_task_by_id(self, task_id: TaskId) -> Task | None:
        return await self._repository.get_by_id(task_id)

    async def get_all_tasks(self) -> list[Task]:
        return await self._repository.get_all()

    async def update_task(self, task: Task) -> bool:
        found = await self._repository.update(task)
        if found:
            logger.info("Task updated", extra={"task_id": task.id})
        else:
            logger.info("Task update matched no row", extra={"task_id": task.id})
        return found

    async def delete_task(self, task_id: TaskId) -> bool:
        removed = await self._repository.delete(task_id)
        logger.info(
            "Task deleted" if removed else "Task delete matched no row",
            extra={"task_id": task_id},
        )
        return removed

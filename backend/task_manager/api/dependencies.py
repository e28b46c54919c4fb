"""Dependency Providers — wire request-scoped sessions into repository and service.

Invariants:
    - One AsyncSession per request, one repository and service per session
    - Routes depend on get_task_service only; tests override any link of the chain
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from task_manager.infrastructure.database import get_db
from task_manager.infrastructure.task_repository import SqlTaskRepository
from task_manager.services.task_service import TaskService


def get_task_repository(db: AsyncSession = Depends(get_db)) -> SqlTaskRepository:
    return SqlTaskRepository(db)


def get_task_service(
    repository: SqlTaskRepository = Depends(get_task_repository),
) -> TaskService:
    return TaskService(repository)

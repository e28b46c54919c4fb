"""SQL Task Repository — task operations as parameterized SQLAlchemy statements.

Invariants:
    - Every statement binds its values; no SQL is assembled from strings
    - create() stamps ONE timestamp into both created_at and updated_at
    - update() touches only name, completed, updated_at; id and created_at are immutable
    - Missing rows are reported as None / False, never raised and never fabricated
    - Any SQLAlchemyError rolls back and is re-raised as DatabaseError
    - Each write commits before returning

Design Decisions:
    - RETURNING on insert/update: the timestamps written back are the stored
      values, so a later read compares equal on every backend
    - get_all() orders by id so listings are stable across calls
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator, Callable

from sqlalchemy import Row, delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from task_manager.core.domain_types import Task, TaskId
from task_manager.core.errors import DatabaseError, ErrorContext
from task_manager.models.task import Task as TaskModel

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Column selects, not entities: rows never come from a stale identity map
_TASK_COLUMNS = (
    TaskModel.id,
    TaskModel.name,
    TaskModel.completed,
    TaskModel.created_at,
    TaskModel.updated_at,
)


def _to_domain(row: Row) -> Task:
    return Task(
        id=TaskId(row.id),
        name=row.name,
        completed=row.completed,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlTaskRepository:
    """TaskRepository backed by the `tasks` table."""

    def __init__(
        self, db: AsyncSession, clock: Callable[[], datetime] = _utcnow,
    ):
        self._db = db
        self._clock = clock

    @asynccontextmanager
    async def _storage_errors(
        self, operation: str, task_id: int | None = None,
    ) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self._db.rollback()
            detail = str(getattr(e, "orig", None) or e)
            logger.error(
                f"Task {operation} failed: {detail}",
                extra={"operation": operation, "task_id": task_id},
            )
            raise DatabaseError(
                detail, operation, ErrorContext(task_id=task_id),
            ) from e

    async def create(self, task: Task) -> TaskId:
        """Insert a new row; writes id and timestamps back onto `task`."""
        now = self._clock()
        stmt = (
            insert(TaskModel)
            .values(
                name=task.name,
                completed=task.completed,
                created_at=now,
                updated_at=now,
            )
            .returning(TaskModel.id, TaskModel.created_at, TaskModel.updated_at)
        )
        async with self._storage_errors("insert"):
            row = (await self._db.execute(stmt)).one()
            await self._db.commit()
        task.id = TaskId(row.id)
        task.created_at = row.created_at
        task.updated_at = row.updated_at
        return task.id

    async def get_by_id(self, task_id: TaskId) -> Task | None:
        """Return the task, or None when no row matches."""
        stmt = select(*_TASK_COLUMNS).where(TaskModel.id == task_id)
        async with self._storage_errors("select", task_id):
            row = (await self._db.execute(stmt)).one_or_none()
        return _to_domain(row) if row is not None else None

    async def get_all(self) -> list[Task]:
        stmt = select(*_TASK_COLUMNS).order_by(TaskModel.id)
        async with self._storage_errors("select"):
            rows = (await self._db.execute(stmt)).all()
        return [_to_domain(row) for row in rows]

    async def update(self, task: Task) -> bool:
        """Overwrite name/completed and refresh updated_at.

        Returns False when no row has `task.id`; `task` is left untouched then.
        """
        now = self._clock()
        stmt = (
            update(TaskModel)
            .where(TaskModel.id == task.id)
            .values(name=task.name, completed=task.completed, updated_at=now)
            .returning(TaskModel.created_at, TaskModel.updated_at)
            .execution_options(synchronize_session=False)
        )
        async with self._storage_errors("update", task.id):
            row = (await self._db.execute(stmt)).one_or_none()
            await self._db.commit()
        if row is None:
            return False
        task.created_at = row.created_at
        task.updated_at = row.updated_at
        return True

    async def delete(self, task_id: TaskId) -> bool:
        """Hard delete. Returns whether a row was removed."""
        stmt = (
            delete(TaskModel)
            .where(TaskModel.id == task_id)
            .execution_options(synchronize_session=False)
        )
        async with self._storage_errors("delete", task_id):
            result = await self._db.execute(stmt)
            await self._db.commit()
        return result.rowcount > 0

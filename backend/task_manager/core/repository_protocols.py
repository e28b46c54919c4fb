"""Boundary Protocols — contracts between the service layer and persistence.

Invariants:
    - Services depend on TaskRepository, never on the SQL implementation
    - "Not found" is a return value (None / False), not an exception
    - Storage failures surface as DatabaseError (core/errors.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol

from task_manager.core.domain_types import Task, TaskId


class TaskRepository(Protocol):
    """Contract for task persistence, implemented by infrastructure."""
    async def create(self, task: Task) -> TaskId: ...
    async def get_by_id(self, task_id: TaskId) -> Task | None: ...
    async def get_all(self) -> list[Task]: ...
    async def update(self, task: Task) -> bool: ...
    async def delete(self, task_id: TaskId) -> bool: ...

"""Task Schemas — Pydantic models for the task JSON shape.

Invariants:
    - Request bodies reject unknown fields (extra="forbid") and mistyped values (strict)
    - TaskUpdate requires id within the tasks.id column range; TaskCreate must not carry one
    - TaskResponse mirrors {id, name, completed, created_at, updated_at}

Design Decisions:
    - Strict mode: JSON "true" string or 1 is not a boolean, "7" is not an id
    - No length/content rules on name: only type parsing happens at the boundary
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from task_manager.core.domain_types import TASK_ID_MAX, TASK_ID_MIN, Task, TaskId


class TaskCreate(BaseModel):
    """POST body."""
    model_config = ConfigDict(extra="forbid", strict=True)

    name: str
    completed: bool = False

    def to_domain(self) -> Task:
        return Task(name=self.name, completed=self.completed)


class TaskUpdate(BaseModel):
    """PUT body: id selects the row, name/completed overwrite it."""
    model_config = ConfigDict(extra="forbid", strict=True)

    id: int = Field(ge=TASK_ID_MIN, le=TASK_ID_MAX)
    name: str
    completed: bool = False

    def to_domain(self) -> Task:
        return Task(id=TaskId(self.id), name=self.name, completed=self.completed)


class TaskResponse(BaseModel):
    """Public task representation."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    completed: bool
    created_at: datetime
    updated_at: datetime

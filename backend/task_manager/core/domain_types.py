"""Domain Types — the Task value and its identity type.

Invariants:
    - TaskId wraps int; never use a bare int for task identity in signatures
    - A TaskId fits the 32-bit `tasks.id` column (TASK_ID_MIN..TASK_ID_MAX)
    - Task.id is None until the store assigns it
    - Task values are transient copies: built per request, never shared

Design Decisions:
    - Plain dataclass, not the ORM model: handlers and services never hold
      a live ORM instance bound to a session
"""

from dataclasses import dataclass
from datetime import datetime
from typing import NewType


TaskId = NewType("TaskId", int)

# Range of the INTEGER primary key on every supported backend
TASK_ID_MIN = -(2**31)
TASK_ID_MAX = 2**31 - 1


@dataclass
class Task:
    """A tracked task. Timestamps are stamped by the repository."""
    name: str
    completed: bool = False
    id: TaskId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

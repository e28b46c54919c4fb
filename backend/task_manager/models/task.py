"""Task ORM — the single `tasks` table.

Invariants:
    - id is an autoincrement integer primary key, assigned by the database
      and never reused (AUTOINCREMENT on SQLite, a sequence on PostgreSQL)
    - name is non-nullable text; completed defaults to false
    - created_at/updated_at are always written by the repository, never by the DB
    - Timestamps are read back as aware UTC on SQLite and PostgreSQL alike

Design Decisions:
    - No server_default on timestamps: the repository stamps one value for both
      columns on insert so created_at == updated_at holds exactly
"""

from datetime import datetime

from sqlalchemy import Boolean, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from task_manager.db.base import Base
from task_manager.db.types import UTCDateTime


class Task(Base):
    """Persisted task row."""
    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False,
    )

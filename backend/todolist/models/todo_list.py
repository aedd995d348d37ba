"""ToDoList ORM: persists a named ToDo list.

Invariants:
    - name is unique and non-nullable; it is the public lookup key
    - id is an autoincrement integer: creation order is id order
    - Task count is never stored; it is aggregated from the tasks table
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from todolist.db.base import Base


class ToDoListRecord(Base):
    """ToDo list row: renamed in place, deleted together with its tasks."""
    __tablename__ = "todo_lists"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

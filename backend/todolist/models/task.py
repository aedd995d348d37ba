"""Task ORM: a single item attached to a ToDo list.

Invariants:
    - Always belongs to a ToDoListRecord (list_id FK)
    - Removed explicitly by the repository before its list is deleted
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from todolist.db.base import Base


class Task(Base):
    """Task entity: counted into ToDoList.task_number."""
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    list_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("todo_lists.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

"""ToDo List Repository: SQLAlchemy implementation of the ToDoListModel protocol.

Invariants:
    - Every public method returns a fresh ToDoList value or raises ToDoListError
    - Names are unique: create/rename onto a taken name raises ToDoListConflictError
    - task_number is aggregated with COUNT queries, never via lazy relationship loads
    - Any SQLAlchemyError is rolled back and re-raised as DatabaseError

Design Decisions:
    - One repository per request session (built by get_todo_list_model)
    - Tasks deleted explicitly before their list: SQLite does not enforce
      ON DELETE CASCADE unless the foreign_keys pragma is enabled
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from todolist.core.domain_types import ListName, ToDoList
from todolist.core.errors import (
    DatabaseError,
    InvalidListNameError,
    ToDoListConflictError,
    ToDoListNotFoundError,
)
from todolist.core.repository_protocols import ToDoListModel
from todolist.infrastructure.database import get_db
from todolist.models.task import Task
from todolist.models.todo_list import ToDoListRecord

logger = logging.getLogger(__name__)


class SqlToDoListRepository:
    """ToDo list persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create_todo_list(self, name: str) -> ToDoList:
        if not name:
            raise InvalidListNameError("name")
        async with self._guard("create"):
            if await self._find(name) is not None:
                raise ToDoListConflictError(name)
            record = ToDoListRecord(name=name)
            self._db.add(record)
            await self._commit_or_conflict(name)
        return ToDoList(name=ListName(record.name), task_number=0)

    async def delete_todo_list(self, name: str) -> ToDoList:
        async with self._guard("delete"):
            record = await self._get_or_raise(name)
            task_number = await self._count_tasks(record.id)
            await self._db.execute(delete(Task).where(Task.list_id == record.id))
            await self._db.delete(record)
            await self._db.commit()
        return ToDoList(name=ListName(name), task_number=task_number)

    async def update_todo_list(self, old_name: str, new_name: str) -> ToDoList:
        if not new_name:
            raise InvalidListNameError("new_name")
        async with self._guard("update"):
            record = await self._get_or_raise(old_name)
            if new_name != old_name:
                if await self._find(new_name) is not None:
                    raise ToDoListConflictError(new_name)
                record.name = new_name
                await self._commit_or_conflict(new_name)
            task_number = await self._count_tasks(record.id)
        return ToDoList(name=ListName(new_name), task_number=task_number)

    async def get_todo_list(self, name: str) -> ToDoList:
        async with self._guard("get"):
            record = await self._get_or_raise(name)
            task_number = await self._count_tasks(record.id)
        return ToDoList(name=ListName(record.name), task_number=task_number)

    async def get_all_todo_lists(self) -> list[ToDoList]:
        query = (
            select(ToDoListRecord.name, func.count(Task.id))
            .outerjoin(Task, Task.list_id == ToDoListRecord.id)
            .group_by(ToDoListRecord.id, ToDoListRecord.name)
            .order_by(ToDoListRecord.id)
        )
        async with self._guard("get_all"):
            result = await self._db.execute(query)
            rows = result.all()
        return [
            ToDoList(name=ListName(name), task_number=int(count))
            for name, count in rows
        ]

    # ─── helpers ────────────────────────────────────────────────

    async def _find(self, name: str) -> ToDoListRecord | None:
        result = await self._db.execute(
            select(ToDoListRecord).where(ToDoListRecord.name == name),
        )
        return result.scalar_one_or_none()

    async def _get_or_raise(self, name: str) -> ToDoListRecord:
        record = await self._find(name)
        if record is None:
            raise ToDoListNotFoundError(name)
        return record

    async def _count_tasks(self, list_id: int) -> int:
        result = await self._db.execute(
            select(func.count(Task.id)).where(Task.list_id == list_id),
        )
        return int(result.scalar_one())

    async def _commit_or_conflict(self, name: str) -> None:
        """Commit; a unique-constraint race on name becomes a conflict."""
        try:
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            raise ToDoListConflictError(name) from e

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.debug(
                f"ToDo list {operation} failed in database: {e}",
                extra={"operation": operation, "error_code": "DATABASE_ERROR"},
            )
            raise DatabaseError(type(e).__name__, operation) from e


def get_todo_list_model(
    db: AsyncSession = Depends(get_db),
) -> ToDoListModel:
    """FastAPI dependency: the model layer bound to this request's session."""
    return SqlToDoListRepository(db)

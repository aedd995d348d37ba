"""Root conftest: shared async database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - DATABASE_URL never points at a real database during tests
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from todolist.db.base import Base  # noqa: E402
import todolist.models  # noqa: E402,F401
from todolist.models.task import Task  # noqa: E402
from todolist.models.todo_list import ToDoListRecord  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def seed_list(test_db):
    """Insert a list with `tasks` task rows; returns the record."""

    async def _seed(name: str, tasks: int = 0) -> ToDoListRecord:
        record = ToDoListRecord(name=name)
        test_db.add(record)
        await test_db.flush()
        for i in range(tasks):
            test_db.add(Task(list_id=record.id, description=f"task {i}"))
        await test_db.commit()
        return record

    return _seed


@pytest.fixture
async def drop_tables(test_engine):
    """Remove every table so the next query fails inside the database."""

    async def _drop() -> None:
        async with test_engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    return _drop

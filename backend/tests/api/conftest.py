"""API test fixtures: FastAPI test clients over a fake model or a real test DB.

Invariants:
    - fake_client routes every handler to a FakeToDoListModel (no database)
    - client routes handlers to the real repository on the in-memory test DB
    - Each fixture builds its own app, so dependency overrides never leak
"""

import pytest
from httpx import ASGITransport, AsyncClient

from todolist.infrastructure.database import get_db
from todolist.infrastructure.todo_list_repository import get_todo_list_model
from todolist.main import create_app

from tests.api.fake_model import FakeToDoListModel


@pytest.fixture
def fake_model():
    return FakeToDoListModel()


@pytest.fixture
async def fake_client(fake_model):
    app = create_app()
    app.dependency_overrides[get_todo_list_model] = lambda: fake_model
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with the DB dependency overridden."""
    app = create_app()

    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

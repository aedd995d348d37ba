"""Health probes and application lifespan."""

from fastapi.testclient import TestClient

from todolist.config import Settings
from todolist.infrastructure import database
from todolist.infrastructure.database import DatabaseSessionManager
from todolist.main import create_app


async def test_liveness_returns_200(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_without_database_returns_503(client, monkeypatch):
    monkeypatch.setattr(database, "db_manager", None)
    res = await client.get("/health/ready")
    assert res.status_code == 503
    assert res.json() == {"status": "not_ready", "reason": "database_unavailable"}


async def test_readiness_with_database_returns_200(
    client, monkeypatch, test_engine, test_session_factory,
):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    monkeypatch.setattr(database, "db_manager", manager)
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"database": "healthy"}


def test_lifespan_initializes_database_and_schema(monkeypatch):
    monkeypatch.setattr(database, "db_manager", None)
    settings = Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///:memory:",
        log_format="text",
    )
    with TestClient(create_app(settings)) as tc:
        assert database.db_manager is not None
        assert tc.post("/lists/", json={"Name": "Groceries"}).status_code == 200
        assert tc.get("/lists/").json() == [{"Name": "Groceries", "TaskNumber": 0}]
        assert tc.get("/health/ready").status_code == 200

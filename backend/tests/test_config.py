"""Settings: environment-driven configuration defaults and normalization."""

from todolist.config import Settings, get_settings


def test_defaults_need_no_environment(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_url == "sqlite+aiosqlite:///./todolist.db"
    assert settings.port == 8080
    assert settings.log_format == "json"
    assert settings.create_schema_on_startup is True


def test_postgres_url_rewritten_for_asyncpg():
    settings = Settings(_env_file=None, database_url="postgresql://u:p@db:5432/todo")
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/todo"


def test_environment_overrides_are_case_insensitive(monkeypatch):
    monkeypatch.setenv("log_level", "DEBUG")
    monkeypatch.setenv("PORT", "9001")
    settings = Settings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.port == 9001


def test_get_settings_is_cached():
    assert get_settings() is get_settings()

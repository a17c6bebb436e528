"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from src.project_manager.core.config import Settings

pytestmark = pytest.mark.unit


def test_defaults():
    settings = Settings(database_url="postgresql+asyncpg://localhost/projects", _env_file=None)

    assert settings.app_name == "Project Manager"
    assert settings.database_pool_size == 5
    assert settings.auto_create_schema is False
    assert settings.seed_demo_data is False
    assert settings.is_sqlite is False


def test_sqlite_detection():
    settings = Settings(database_url="sqlite+aiosqlite:///./projects.db", _env_file=None)
    assert settings.is_sqlite is True


def test_database_url_read_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://db/projects")
    monkeypatch.setenv("SEED_DEMO_DATA", "true")

    settings = Settings(_env_file=None)

    assert settings.database_url == "postgresql+asyncpg://db/projects"
    assert settings.seed_demo_data is True


def test_cors_wildcard_rejected():
    with pytest.raises(ValidationError, match="CORS wildcard"):
        Settings(
            database_url="sqlite+aiosqlite://",
            cors_origins=["*"],
            _env_file=None,
        )

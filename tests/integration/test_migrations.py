"""Tests for the Alembic migration that creates the projects table."""

from pathlib import Path

import pytest
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import IntegrityError

from src.project_manager.core.config import get_settings
from src.project_manager.core.db import run_migrations_sync

pytestmark = pytest.mark.integration

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture
def migrated_db(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run migrations against a throwaway SQLite file; yield a sync engine."""
    db_file = tmp_path / "migrations.db"
    monkeypatch.chdir(PROJECT_ROOT)
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_file}")
    get_settings.cache_clear()
    try:
        run_migrations_sync()
        engine = create_engine(f"sqlite:///{db_file}")
        yield engine
        engine.dispose()
    finally:
        get_settings.cache_clear()


def test_migration_creates_projects_table(migrated_db):
    inspector = inspect(migrated_db)

    assert "projects" in inspector.get_table_names()
    columns = {c["name"] for c in inspector.get_columns("projects")}
    assert columns == {
        "id",
        "name",
        "description",
        "category",
        "is_public",
        "created_at",
        "updated_at",
    }
    indexes = {i["name"] for i in inspector.get_indexes("projects")}
    assert "ix_projects_category" in indexes


def test_migration_defaults_and_category_check(migrated_db):
    with migrated_db.begin() as conn:
        conn.execute(
            text(
                "INSERT INTO projects (name, description, category) "
                "VALUES ('Defaults', 'Relying on server defaults', 'internal')"
            )
        )
        row = conn.execute(
            text("SELECT is_public, created_at, updated_at FROM projects")
        ).one()

    assert not row.is_public
    assert row.created_at is not None
    assert row.created_at == row.updated_at

    with pytest.raises(IntegrityError), migrated_db.begin() as conn:
        conn.execute(
            text(
                "INSERT INTO projects (name, description, category) "
                "VALUES ('Bogus', 'Category outside the set', 'bogus')"
            )
        )

"""Database utilities - engine, session, migrations."""

from src.project_manager.core.db.engine import dispose_engine, get_engine
from src.project_manager.core.db.migrations import run_migrations_sync
from src.project_manager.core.db.session import create_schema, get_session

__all__ = [
    # Engine
    "dispose_engine",
    "get_engine",
    # Session
    "create_schema",
    "get_session",
    # Migrations
    "run_migrations_sync",
]

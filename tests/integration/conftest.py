"""Integration test fixtures for database and HTTP client operations.

Each test gets a fresh in-memory SQLite database. StaticPool keeps the
single connection alive so every session sees the same data.
"""

from collections.abc import AsyncGenerator, Generator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from src.project_manager.api.dependencies import get_db_session
from src.project_manager.core.db import create_schema, get_session
from src.project_manager.main import create_app
from src.project_manager.models import Project
from src.project_manager.repositories import ProjectRepository
from tests.factories import ProjectFactory


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create an isolated in-memory database with the projects table."""
    test_engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await create_schema(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations.

    The session does NOT auto-commit. Repository calls only flush, which
    is enough for reads within the same session.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def project_repo(db_session: AsyncSession) -> ProjectRepository:
    return ProjectRepository(db_session)


@pytest.fixture
async def saved_project(db_session: AsyncSession) -> Project:
    """A committed project built by ProjectFactory."""
    project = ProjectFactory.build()
    db_session.add(project)
    await db_session.commit()
    await db_session.refresh(project)
    return project


@pytest.fixture
def app(engine: AsyncEngine) -> Generator[FastAPI]:
    """Application whose request sessions are bound to the test engine."""
    application = create_app()

    async def _get_test_session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    application.dependency_overrides[get_db_session] = _get_test_session
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTP client for the test application."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

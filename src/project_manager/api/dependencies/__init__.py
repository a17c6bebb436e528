"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenient imports.
"""

# Database
from src.project_manager.api.dependencies.db import DBSession, get_db_session

# Repositories
from src.project_manager.api.dependencies.repositories import (
    ProjectRepo,
    get_project_repository,
)

# Services
from src.project_manager.api.dependencies.services import (
    ProjectServiceDep,
    get_project_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Repositories
    "ProjectRepo",
    "get_project_repository",
    # Services
    "ProjectServiceDep",
    "get_project_service",
]

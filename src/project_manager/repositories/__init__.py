"""Repository layer - data access abstraction."""

from src.project_manager.repositories.base import BaseRepository
from src.project_manager.repositories.project import ProjectRepository

__all__ = [
    "BaseRepository",
    "ProjectRepository",
]

"""Service layer - business logic and transaction control."""

from src.project_manager.services.project_service import ProjectService

__all__ = ["ProjectService"]

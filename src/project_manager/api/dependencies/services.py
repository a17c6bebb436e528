"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.project_manager.api.dependencies.db import DBSession
from src.project_manager.api.dependencies.repositories import ProjectRepo
from src.project_manager.services import ProjectService


def get_project_service(project_repo: ProjectRepo, session: DBSession) -> ProjectService:
    """Get project service sharing the request session with its repository."""
    return ProjectService(project_repo, session)


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]

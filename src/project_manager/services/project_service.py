"""Project mutation service - owns transaction boundaries for writes."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.project_manager.core.logging import get_logger
from src.project_manager.models import Project
from src.project_manager.repositories import ProjectRepository
from src.project_manager.schemas.project import ProjectCreate, ProjectUpdate

logger = get_logger(__name__)


class ProjectService:
    """Create, update and delete projects.

    Each method commits on success. On a storage error the session is
    rolled back and the original exception re-raised; nothing is retried.
    """

    def __init__(self, project_repo: ProjectRepository, session: AsyncSession):
        self.project_repo = project_repo
        self.session = session

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise

    async def create(self, data: ProjectCreate) -> Project:
        """Create a project and commit it."""
        try:
            project = await self.project_repo.create(data)
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        await self._commit()

        logger.info(
            "project_created",
            project_id=project.id,
            category=project.category,
            is_public=project.is_public,
        )
        return project

    async def update(self, project_id: int, changes: ProjectUpdate) -> Project | None:
        """Apply a partial update; None when the project does not exist."""
        try:
            project = await self.project_repo.update(project_id, changes)
        except SQLAlchemyError:
            await self.session.rollback()
            raise

        if project is None:
            logger.info("project_update_missed", project_id=project_id)
            return None

        await self._commit()
        logger.info(
            "project_updated",
            project_id=project.id,
            fields=sorted(changes.changed_fields()),
        )
        return project

    async def delete(self, project_id: int) -> bool:
        """Delete a project; False when nothing matched."""
        try:
            deleted = await self.project_repo.delete(project_id)
        except SQLAlchemyError:
            await self.session.rollback()
            raise

        if not deleted:
            logger.info("project_delete_missed", project_id=project_id)
            return False

        await self._commit()
        logger.info("project_deleted", project_id=project_id)
        return True

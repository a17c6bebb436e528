"""Repository for the Project entity."""

from sqlalchemy import func, or_
from sqlmodel import select
from sqlmodel.sql.expression import SelectOfScalar

from src.project_manager.models import Project, ProjectCategory
from src.project_manager.models.base import utc_now
from src.project_manager.repositories.base import BaseRepository
from src.project_manager.schemas.project import ProjectCreate, ProjectUpdate


def _category_value(category: ProjectCategory | str) -> str:
    return category.value if isinstance(category, ProjectCategory) else category


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project rows.

    Every listing is ordered most-recently-updated first, with the id as a
    tie-breaker so equal timestamps come back in a stable order.

    Storage errors (``sqlalchemy.exc.SQLAlchemyError``) propagate unchanged;
    absence is reported as ``None`` / ``False``, never raised.
    """

    model = Project

    async def _fetch_all(self, query: SelectOfScalar[Project]) -> list[Project]:
        query = query.order_by(
            Project.updated_at.desc(),  # type: ignore[attr-defined]
            Project.id.desc(),  # type: ignore[union-attr]
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_all(self) -> list[Project]:
        """List every project."""
        return await self._fetch_all(select(Project))

    async def search(self, query: str) -> list[Project]:
        """Case-insensitive substring match on name or description.

        LIKE wildcards in ``query`` are matched literally. On SQLite the
        case folding comes from its built-in ``lower()``, which only folds
        ASCII letters.
        """
        return await self._fetch_all(
            select(Project).where(
                or_(
                    Project.name.icontains(query, autoescape=True),  # type: ignore[attr-defined]
                    Project.description.icontains(query, autoescape=True),  # type: ignore[attr-defined]
                )
            )
        )

    async def list_by_category(self, category: ProjectCategory | str) -> list[Project]:
        """List projects whose category equals ``category`` exactly."""
        return await self._fetch_all(
            select(Project).where(Project.category == _category_value(category))
        )

    async def count(self) -> int:
        """Number of stored projects."""
        result = await self.session.execute(select(func.count()).select_from(Project))
        return result.scalar_one()

    async def create(self, data: ProjectCreate) -> Project:
        """Insert a project and return the stored row.

        ``created_at`` and ``updated_at`` share one timestamp.
        """
        now = utc_now()
        project = Project(
            name=data.name,
            description=data.description,
            category=_category_value(data.category),
            is_public=data.is_public,
            created_at=now,
            updated_at=now,
        )
        self.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def update(self, project_id: int, changes: ProjectUpdate) -> Project | None:
        """Apply the supplied fields and refresh ``updated_at``.

        An update with no fields still writes the new timestamp.
        """
        project = await self.get_by_id(project_id)
        if project is None:
            return None

        for field, value in changes.changed_fields().items():
            setattr(project, field, value)
        project.updated_at = utc_now()

        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def delete(self, project_id: int) -> bool:
        """Delete a project; False when the id does not exist."""
        return await self.delete_by_id(project_id)

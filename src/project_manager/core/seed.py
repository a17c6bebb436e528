"""Demo data inserted into an empty projects table at startup."""

from sqlalchemy.ext.asyncio import AsyncEngine

from src.project_manager.core.db.session import get_session
from src.project_manager.core.logging import get_logger
from src.project_manager.models import ProjectCategory
from src.project_manager.repositories import ProjectRepository
from src.project_manager.schemas.project import ProjectCreate

logger = get_logger(__name__)

DEMO_PROJECTS: tuple[ProjectCreate, ...] = (
    ProjectCreate(
        name="Project Alpha",
        description=(
            "Next-generation frontend infrastructure project designed to scale "
            "with multi-tenant architectures and shared design systems."
        ),
        category=ProjectCategory.INFRASTRUCTURE,
        is_public=True,
    ),
    ProjectCreate(
        name="Beta Launch",
        description=(
            "Product development initiative focused on delivering core features "
            "for our upcoming beta release."
        ),
        category=ProjectCategory.PRODUCT,
        is_public=False,
    ),
    ProjectCreate(
        name="Internal Research",
        description=(
            "Research and development project exploring new technologies "
            "and architectural patterns."
        ),
        category=ProjectCategory.INTERNAL,
        is_public=False,
    ),
)


async def seed_demo_projects(engine: AsyncEngine | None = None) -> int:
    """Insert DEMO_PROJECTS if the table is empty.

    Returns:
        Number of projects inserted (0 when the table already had rows).
    """
    async with get_session(engine) as session:
        repo = ProjectRepository(session)
        if await repo.count() > 0:
            return 0
        for data in DEMO_PROJECTS:
            await repo.create(data)
        await session.commit()

    logger.info("demo_projects_seeded", count=len(DEMO_PROJECTS))
    return len(DEMO_PROJECTS)

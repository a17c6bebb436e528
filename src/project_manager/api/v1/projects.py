"""Project endpoints - CRUD plus search and category filtering.

Reads go straight to the repository; writes go through ProjectService,
which owns commit/rollback.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, Query, status
from sqlalchemy.exc import IntegrityError

from src.project_manager.api.dependencies import ProjectRepo, ProjectServiceDep
from src.project_manager.schemas.project import (
    ProjectCreate,
    ProjectListParams,
    ProjectRead,
    ProjectUpdate,
)

router = APIRouter(prefix="/projects", tags=["projects"])

ProjectId = Annotated[int, Path(gt=0, description="Project ID (positive integer)")]


def _not_found(project_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Project {project_id} not found",
    )


def _constraint_violation() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="Project violates a storage constraint",
    )


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List projects",
    description=(
        "List projects, most recently updated first. "
        "`q` searches name and description; `category` filters exactly. "
        "When both are given, `q` is applied."
    ),
    responses={
        200: {"description": "List of projects"},
    },
)
async def list_projects(
    repo: ProjectRepo,
    params: Annotated[ProjectListParams, Query()],
) -> list[ProjectRead]:
    """List, search or filter projects."""
    if params.q is not None:
        projects = await repo.search(params.q)
    elif params.category is not None:
        projects = await repo.list_by_category(params.category)
    else:
        projects = await repo.list_all()
    return [ProjectRead.model_validate(p) for p in projects]


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    responses={
        200: {"description": "Project details"},
        404: {"description": "Project not found"},
    },
)
async def get_project(project_id: ProjectId, repo: ProjectRepo) -> ProjectRead:
    """Get a project by ID."""
    project = await repo.get_by_id(project_id)
    if project is None:
        raise _not_found(project_id)
    return ProjectRead.model_validate(project)


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    responses={
        201: {"description": "Project created"},
        409: {"description": "Storage constraint violated"},
    },
)
async def create_project(request: ProjectCreate, service: ProjectServiceDep) -> ProjectRead:
    """Create a new project."""
    try:
        project = await service.create(request)
    except IntegrityError as e:
        raise _constraint_violation() from e
    return ProjectRead.model_validate(project)


@router.patch(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Update project",
    description="Update only the supplied fields. `updated_at` is always refreshed.",
    responses={
        200: {"description": "Project updated"},
        404: {"description": "Project not found"},
        409: {"description": "Storage constraint violated"},
    },
)
async def update_project(
    project_id: ProjectId,
    request: ProjectUpdate,
    service: ProjectServiceDep,
) -> ProjectRead:
    """Update an existing project."""
    try:
        project = await service.update(project_id, request)
    except IntegrityError as e:
        raise _constraint_violation() from e
    if project is None:
        raise _not_found(project_id)
    return ProjectRead.model_validate(project)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    responses={
        204: {"description": "Project deleted"},
        404: {"description": "Project not found"},
    },
)
async def delete_project(project_id: ProjectId, service: ProjectServiceDep) -> None:
    """Delete a project."""
    if not await service.delete(project_id):
        raise _not_found(project_id)

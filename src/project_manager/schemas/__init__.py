from src.project_manager.schemas.project import (
    ProjectCreate,
    ProjectListParams,
    ProjectRead,
    ProjectUpdate,
)

__all__ = [
    # Project
    "ProjectCreate",
    "ProjectListParams",
    "ProjectRead",
    "ProjectUpdate",
]

"""Model exports.

Import from here: `from src.project_manager.models import Project`
"""

from src.project_manager.models.enums import PROJECT_CATEGORY_VALUES, ProjectCategory
from src.project_manager.models.project import Project

__all__ = [
    # Enums
    "PROJECT_CATEGORY_VALUES",
    "ProjectCategory",
    # Tables
    "Project",
]

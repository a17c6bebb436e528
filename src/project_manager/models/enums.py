"""Shared enums for models."""

from enum import Enum


class ProjectCategory(str, Enum):
    """Closed set of project categories.

    The same values are enforced by the ``ck_projects_category`` CHECK
    constraint on the projects table.
    """

    INFRASTRUCTURE = "infrastructure"
    PRODUCT = "product"
    MARKETING = "marketing"
    INTERNAL = "internal"


PROJECT_CATEGORY_VALUES: tuple[str, ...] = tuple(c.value for c in ProjectCategory)

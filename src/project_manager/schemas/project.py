"""Project schemas for API request/response."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from src.project_manager.models.enums import ProjectCategory

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
DESCRIPTION_MIN_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 500


def _check_length(value: str, label: str, min_length: int, max_length: int) -> str:
    value = value.strip()
    if not value:
        raise ValueError(f"{label} is required")
    if len(value) < min_length:
        raise ValueError(f"{label} must be at least {min_length} characters")
    if len(value) > max_length:
        raise ValueError(f"{label} must be less than {max_length} characters")
    return value


class ProjectCreate(BaseModel):
    """Schema for creating a project."""

    name: str
    description: str
    category: ProjectCategory
    is_public: bool = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_length(v, "Project name", NAME_MIN_LENGTH, NAME_MAX_LENGTH)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        return _check_length(v, "Description", DESCRIPTION_MIN_LENGTH, DESCRIPTION_MAX_LENGTH)


class ProjectUpdate(BaseModel):
    """Schema for a partial project update.

    Only fields the caller explicitly set (and did not set to None) are
    written; see ``changed_fields``.
    """

    name: str | None = None
    description: str | None = None
    category: ProjectCategory | None = None
    is_public: bool | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _check_length(v, "Project name", NAME_MIN_LENGTH, NAME_MAX_LENGTH)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _check_length(v, "Description", DESCRIPTION_MIN_LENGTH, DESCRIPTION_MAX_LENGTH)

    def changed_fields(self) -> dict[str, object]:
        """Return the column values to write, keyed by field name.

        Omitted fields and fields explicitly set to None are both left out.
        """
        changes = self.model_dump(exclude_unset=True, exclude_none=True)
        if isinstance(changes.get("category"), ProjectCategory):
            changes["category"] = changes["category"].value
        return changes


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    id: int
    name: str
    description: str
    category: ProjectCategory
    is_public: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProjectListParams(BaseModel):
    """Filters accepted by the list endpoint."""

    q: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    category: ProjectCategory | None = None

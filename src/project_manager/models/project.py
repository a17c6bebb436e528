"""Project model - the single persisted entity."""

from datetime import datetime

from sqlalchemy import CheckConstraint
from sqlmodel import Field, SQLModel

from src.project_manager.models.base import utc_now
from src.project_manager.models.enums import PROJECT_CATEGORY_VALUES

CATEGORY_CHECK_SQL = "category IN ({})".format(
    ", ".join(f"'{value}'" for value in PROJECT_CATEGORY_VALUES)
)


class Project(SQLModel, table=True):
    """Project row.

    Columns are snake_case; booleans and timestamps are translated by the
    dialect (native BOOLEAN on PostgreSQL, 0/1 on SQLite). Timestamps are
    naive UTC.
    """

    __tablename__ = "projects"
    __table_args__ = (CheckConstraint(CATEGORY_CHECK_SQL, name="ck_projects_category"),)

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    description: str = Field(max_length=500)
    category: str = Field(max_length=32, index=True)
    is_public: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

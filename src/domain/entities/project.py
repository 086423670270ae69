"""
Project Entity

Top-level container for tasks and team members.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index

from src.domain.base import VersionedEntity


class Project(VersionedEntity, table=True):
    """
    Project entity - owns a task tree and a team.

    Business Rules:
    - name follows the slug format but is not unique
    - status_id references a StatusType of the same tenant (not enforced)
    """

    __tablename__ = "projects"

    project_id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=32, nullable=False)
    description: str = Field(max_length=255, nullable=False)
    status_id: int = Field(default=0, nullable=False)
    start_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    end_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_project_tenant_name", "tenant_id", "name"),)

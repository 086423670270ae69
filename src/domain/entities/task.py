"""
Task Entity

Unit of work inside a project, arranged in a tree by parent_id.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index

from src.domain.base import VersionedEntity

ROOT_PARENT_ID = 0


class Task(VersionedEntity, table=True):
    """
    Task entity - node of the per-project task tree.

    Business Rules:
    - parent_id 0 marks a root task
    - a non-zero parent_id names a task of the same project
    - position is the 1-based order among siblings
    - priority ranges 1 (highest) to 9
    """

    __tablename__ = "tasks"

    task_id: Optional[int] = Field(default=None, primary_key=True)
    project_id: int = Field(nullable=False, index=True)
    name: str = Field(max_length=32, nullable=False)
    description: str = Field(max_length=255, nullable=False)
    status_id: int = Field(default=0, nullable=False)
    start_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    end_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    priority: int = Field(default=5, nullable=False)
    parent_id: int = Field(default=ROOT_PARENT_ID, nullable=False)
    position: int = Field(default=1, nullable=False)

    __table_args__ = (Index("idx_task_parent_position", "parent_id", "position"),)

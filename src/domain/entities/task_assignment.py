"""
TaskAssignment Entity

Links a TeamMember to a Task with the hours booked on it.
"""

from decimal import Decimal

from sqlmodel import Field, Index

from src.domain.base import VersionedEntity


class TaskAssignment(VersionedEntity, table=True):
    """
    TaskAssignment entity - task <-> member association.

    Business Rules:
    - keyed by (project_id, task_id, member_id)
    - task_hours is non-negative and only grows while the row is active
    - removal is a soft delete; adding the pair again revives the same row
      with hours reset to zero
    """

    __tablename__ = "task_assignments"

    project_id: int = Field(primary_key=True)
    task_id: int = Field(primary_key=True)
    member_id: int = Field(primary_key=True)
    task_hours: Decimal = Field(
        default=Decimal("0.00"), max_digits=10, decimal_places=2, nullable=False
    )

    __table_args__ = (Index("idx_task_assignment_project", "project_id", "tenant_id"),)

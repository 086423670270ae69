"""
ProjectRoleType Entity

Tenant-scoped catalog of roles a team member can hold.
"""

from typing import Optional

from sqlmodel import Field, UniqueConstraint

from src.domain.base import VersionedEntity


class ProjectRoleType(VersionedEntity, table=True):
    """
    ProjectRoleType entity - lookup row with a caller-assigned id.

    Business Rules:
    - project_role_id is chosen by the caller, never generated
    - (tenant_id, project_role_id) is unique
    """

    __tablename__ = "project_role_types"

    id: Optional[int] = Field(default=None, primary_key=True)
    project_role_id: int = Field(nullable=False)
    role_name: str = Field(max_length=32, nullable=False)
    description: str = Field(max_length=255, nullable=False)

    __table_args__ = (
        UniqueConstraint(
            "tenant_id", "project_role_id", name="uq_project_role_type_tenant_role"
        ),
    )

"""
TeamMember Entity

Person working on a project.
"""

from typing import Optional

from sqlmodel import Field

from src.domain.base import VersionedEntity


class TeamMember(VersionedEntity, table=True):
    """
    TeamMember entity - belongs to exactly one project.

    Business Rules:
    - project_role_id references a ProjectRoleType of the same tenant (not enforced)
    - assigned to tasks through TaskAssignment
    """

    __tablename__ = "team_members"

    member_id: Optional[int] = Field(default=None, primary_key=True)
    project_id: int = Field(nullable=False, index=True)
    name: str = Field(max_length=64, nullable=False)
    project_role_id: int = Field(default=0, nullable=False)
    email: str = Field(max_length=255, nullable=False)

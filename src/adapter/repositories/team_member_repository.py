from typing import List, Optional

from sqlalchemy import and_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.versioned_repository import VersionedRepository
from src.app.repositories.team_member_repository import (
    AssignedMemberRow,
    ITeamMemberRepository,
    TeamMemberRow,
)
from src.domain.entities import ProjectRoleType, TaskAssignment, TeamMember


class TeamMemberRepository(VersionedRepository, ITeamMemberRepository):
    """TeamMember repository implementation using SQLModel"""

    entity = TeamMember
    key_field = "member_id"

    def __init__(self, session: AsyncSession):
        super().__init__(session)

    def _role_join(self):
        return and_(
            ProjectRoleType.project_role_id == TeamMember.project_role_id,
            ProjectRoleType.tenant_id == TeamMember.tenant_id,
            ProjectRoleType.is_deleted == False,
        )

    async def create(self, member: TeamMember) -> TeamMember:
        """Insert a new team member"""
        self.session.add(member)
        await self.session.flush()
        await self.session.refresh(member)
        return member

    async def get_by_id(self, member_id: int, tenant_id: int) -> Optional[TeamMemberRow]:
        """Get live member and its role name by ID"""
        stmt = (
            select(TeamMember, ProjectRoleType.role_name)
            .outerjoin(ProjectRoleType, self._role_join())
            .where(*self._live(member_id, tenant_id))
        )
        result = await self.session.execute(stmt)
        row = result.first()
        return (row[0], row[1]) if row else None

    async def exists(self, member_id: int, tenant_id: int) -> bool:
        """Check a live member exists in the tenant"""
        stmt = select(TeamMember.member_id).where(*self._live(member_id, tenant_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list_by_project(self, project_id: int, tenant_id: int) -> List[TeamMemberRow]:
        """Get live members of a project"""
        stmt = (
            select(TeamMember, ProjectRoleType.role_name)
            .outerjoin(ProjectRoleType, self._role_join())
            .where(
                TeamMember.project_id == project_id,
                TeamMember.tenant_id == tenant_id,
                TeamMember.is_deleted == False,
            )
            .order_by(TeamMember.member_id)
        )
        result = await self.session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]

    async def list_by_task(
        self, task_id: int, project_id: int, tenant_id: int
    ) -> List[AssignedMemberRow]:
        """Get live members actively assigned to a task with their hours"""
        stmt = (
            select(TeamMember, ProjectRoleType.role_name, TaskAssignment.task_hours)
            .join(
                TaskAssignment,
                and_(
                    TaskAssignment.member_id == TeamMember.member_id,
                    TaskAssignment.tenant_id == TeamMember.tenant_id,
                ),
            )
            .outerjoin(ProjectRoleType, self._role_join())
            .where(
                TaskAssignment.task_id == task_id,
                TaskAssignment.project_id == project_id,
                TaskAssignment.tenant_id == tenant_id,
                TaskAssignment.is_deleted == False,
                TeamMember.is_deleted == False,
            )
            .order_by(TeamMember.member_id)
        )
        result = await self.session.execute(stmt)
        return [(row[0], row[1], row[2]) for row in result.all()]

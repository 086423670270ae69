from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.versioned_repository import VersionedRepository
from src.app.repositories.project_role_type_repository import IProjectRoleTypeRepository
from src.domain.entities import ProjectRoleType


class ProjectRoleTypeRepository(VersionedRepository, IProjectRoleTypeRepository):
    """ProjectRoleType repository implementation using SQLModel"""

    entity = ProjectRoleType
    key_field = "project_role_id"

    def __init__(self, session: AsyncSession):
        super().__init__(session)

    async def create(self, role_type: ProjectRoleType) -> ProjectRoleType:
        """Insert a role type; duplicate ids raise IntegrityError on flush"""
        self.session.add(role_type)
        await self.session.flush()
        await self.session.refresh(role_type)
        return role_type

    async def get(self, project_role_id: int, tenant_id: int) -> Optional[ProjectRoleType]:
        """Get live role type by caller-assigned ID"""
        stmt = select(ProjectRoleType).where(*self._live(project_role_id, tenant_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_tenant(self, tenant_id: int) -> List[ProjectRoleType]:
        """Get all live role types of a tenant"""
        stmt = (
            select(ProjectRoleType)
            .where(
                ProjectRoleType.tenant_id == tenant_id,
                ProjectRoleType.is_deleted == False,
            )
            .order_by(ProjectRoleType.project_role_id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

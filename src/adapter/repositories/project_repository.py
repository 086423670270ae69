from typing import List, Optional

from sqlalchemy import and_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.versioned_repository import VersionedRepository
from src.app.repositories.project_repository import IProjectRepository, ProjectRow
from src.domain.entities import Project, StatusType


class ProjectRepository(VersionedRepository, IProjectRepository):
    """Project repository implementation using SQLModel"""

    entity = Project
    key_field = "project_id"

    def __init__(self, session: AsyncSession):
        super().__init__(session)

    def _select_with_status(self):
        return select(Project, StatusType.status_name).outerjoin(
            StatusType,
            and_(
                StatusType.status_id == Project.status_id,
                StatusType.tenant_id == Project.tenant_id,
                StatusType.is_deleted == False,
            ),
        )

    async def create(self, project: Project) -> Project:
        """Insert a new project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def get_by_id(self, project_id: int, tenant_id: int) -> Optional[ProjectRow]:
        """Get live project and its status name by ID"""
        stmt = self._select_with_status().where(*self._live(project_id, tenant_id))
        result = await self.session.execute(stmt)
        row = result.first()
        return (row[0], row[1]) if row else None

    async def get_by_name(self, name: str, tenant_id: int) -> Optional[ProjectRow]:
        """Get the first live project with this name"""
        stmt = (
            self._select_with_status()
            .where(
                Project.name == name,
                Project.tenant_id == tenant_id,
                Project.is_deleted == False,
            )
            .order_by(Project.project_id)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.first()
        return (row[0], row[1]) if row else None

    async def list_by_tenant(self, tenant_id: int) -> List[ProjectRow]:
        """Get all live projects of a tenant"""
        stmt = (
            self._select_with_status()
            .where(Project.tenant_id == tenant_id, Project.is_deleted == False)
            .order_by(Project.project_id)
        )
        result = await self.session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]

    async def get_names(self, tenant_id: int) -> List[str]:
        """Get the names of all live projects of a tenant"""
        stmt = (
            select(Project.name)
            .where(Project.tenant_id == tenant_id, Project.is_deleted == False)
            .order_by(Project.project_id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def exists(self, project_id: int, tenant_id: int) -> bool:
        """Check a live project exists in the tenant"""
        stmt = select(Project.project_id).where(*self._live(project_id, tenant_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

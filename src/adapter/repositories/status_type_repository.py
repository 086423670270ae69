from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.versioned_repository import VersionedRepository
from src.app.repositories.status_type_repository import IStatusTypeRepository
from src.domain.entities import StatusType


class StatusTypeRepository(VersionedRepository, IStatusTypeRepository):
    """StatusType repository implementation using SQLModel"""

    entity = StatusType
    key_field = "status_id"

    def __init__(self, session: AsyncSession):
        super().__init__(session)

    async def create(self, status_type: StatusType) -> StatusType:
        """Insert a status type; duplicate ids raise IntegrityError on flush"""
        self.session.add(status_type)
        await self.session.flush()
        await self.session.refresh(status_type)
        return status_type

    async def get(self, status_id: int, tenant_id: int) -> Optional[StatusType]:
        """Get live status type by caller-assigned ID"""
        stmt = select(StatusType).where(*self._live(status_id, tenant_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_tenant(self, tenant_id: int) -> List[StatusType]:
        """Get all live status types of a tenant"""
        stmt = (
            select(StatusType)
            .where(StatusType.tenant_id == tenant_id, StatusType.is_deleted == False)
            .order_by(StatusType.status_id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

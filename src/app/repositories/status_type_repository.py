from abc import abstractmethod
from typing import List, Optional

from src.app.repositories.versioned_repository import IVersionedRepository
from src.domain.entities import StatusType


class IStatusTypeRepository(IVersionedRepository):
    """StatusType repository interface - application layer"""

    @abstractmethod
    async def create(self, status_type: StatusType) -> StatusType:
        """Insert a status type; duplicate ids fail in storage"""
        pass

    @abstractmethod
    async def get(self, status_id: int, tenant_id: int) -> Optional[StatusType]:
        """Get live status type by caller-assigned ID"""
        pass

    @abstractmethod
    async def list_by_tenant(self, tenant_id: int) -> List[StatusType]:
        """Get all live status types of a tenant"""
        pass

from abc import abstractmethod
from typing import List, Optional

from src.app.repositories.versioned_repository import IVersionedRepository
from src.domain.entities import ProjectRoleType


class IProjectRoleTypeRepository(IVersionedRepository):
    """ProjectRoleType repository interface - application layer"""

    @abstractmethod
    async def create(self, role_type: ProjectRoleType) -> ProjectRoleType:
        """Insert a role type; duplicate ids fail in storage"""
        pass

    @abstractmethod
    async def get(self, project_role_id: int, tenant_id: int) -> Optional[ProjectRoleType]:
        """Get live role type by caller-assigned ID"""
        pass

    @abstractmethod
    async def list_by_tenant(self, tenant_id: int) -> List[ProjectRoleType]:
        """Get all live role types of a tenant"""
        pass

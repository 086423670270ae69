from abc import abstractmethod
from typing import List, Optional, Tuple

from src.app.repositories.versioned_repository import IVersionedRepository
from src.domain.entities import Project

ProjectRow = Tuple[Project, Optional[str]]


class IProjectRepository(IVersionedRepository):
    """Project repository interface - application layer"""

    @abstractmethod
    async def create(self, project: Project) -> Project:
        """Insert a new project"""
        pass

    @abstractmethod
    async def get_by_id(self, project_id: int, tenant_id: int) -> Optional[ProjectRow]:
        """Get live project and its status name by ID"""
        pass

    @abstractmethod
    async def get_by_name(self, name: str, tenant_id: int) -> Optional[ProjectRow]:
        """Get the first live project with this name"""
        pass

    @abstractmethod
    async def list_by_tenant(self, tenant_id: int) -> List[ProjectRow]:
        """Get all live projects of a tenant"""
        pass

    @abstractmethod
    async def get_names(self, tenant_id: int) -> List[str]:
        """Get the names of all live projects of a tenant"""
        pass

    @abstractmethod
    async def exists(self, project_id: int, tenant_id: int) -> bool:
        """Check a live project exists in the tenant"""
        pass

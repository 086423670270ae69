from abc import abstractmethod
from decimal import Decimal
from typing import List, Optional, Tuple

from src.app.repositories.versioned_repository import IVersionedRepository
from src.domain.entities import TeamMember

TeamMemberRow = Tuple[TeamMember, Optional[str]]
AssignedMemberRow = Tuple[TeamMember, Optional[str], Decimal]


class ITeamMemberRepository(IVersionedRepository):
    """TeamMember repository interface - application layer"""

    @abstractmethod
    async def create(self, member: TeamMember) -> TeamMember:
        """Insert a new team member"""
        pass

    @abstractmethod
    async def get_by_id(self, member_id: int, tenant_id: int) -> Optional[TeamMemberRow]:
        """Get live member and its role name by ID"""
        pass

    @abstractmethod
    async def exists(self, member_id: int, tenant_id: int) -> bool:
        """Check a live member exists in the tenant"""
        pass

    @abstractmethod
    async def list_by_project(self, project_id: int, tenant_id: int) -> List[TeamMemberRow]:
        """Get live members of a project"""
        pass

    @abstractmethod
    async def list_by_task(
        self, task_id: int, project_id: int, tenant_id: int
    ) -> List[AssignedMemberRow]:
        """Get live members actively assigned to a task with their hours"""
        pass

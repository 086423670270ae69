from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional

from src.domain.entities import TaskAssignment


class ITaskAssignmentRepository(ABC):
    """TaskAssignment repository interface - application layer"""

    @abstractmethod
    async def get(
        self, project_id: int, task_id: int, member_id: int, tenant_id: int
    ) -> Optional[TaskAssignment]:
        """Get association row, including a soft-deleted one"""
        pass

    @abstractmethod
    async def create(self, assignment: TaskAssignment) -> TaskAssignment:
        """Insert a new association with zero hours"""
        pass

    @abstractmethod
    async def revive(
        self, project_id: int, task_id: int, member_id: int, tenant_id: int
    ) -> int:
        """Undelete a soft-deleted association and reset hours to zero"""
        pass

    @abstractmethod
    async def remove(
        self, project_id: int, task_id: int, member_id: int, tenant_id: int
    ) -> int:
        """Soft delete an active association and reset hours to zero"""
        pass

    @abstractmethod
    async def add_hours(
        self, project_id: int, task_id: int, member_id: int, tenant_id: int, hours: Decimal
    ) -> int:
        """Add hours to an active association"""
        pass

    @abstractmethod
    async def list_by_project(self, project_id: int, tenant_id: int) -> List[TaskAssignment]:
        """Get active associations of a project"""
        pass

from abc import abstractmethod
from typing import List, Optional, Tuple

from src.app.repositories.versioned_repository import IVersionedRepository
from src.domain.entities import Task

TaskRow = Tuple[Task, Optional[str]]


class ITaskRepository(IVersionedRepository):
    """Task repository interface - application layer"""

    @abstractmethod
    async def create(self, task: Task) -> Task:
        """Insert a new task"""
        pass

    @abstractmethod
    async def get_by_id(self, task_id: int, tenant_id: int) -> Optional[TaskRow]:
        """Get live task and its status name by ID"""
        pass

    @abstractmethod
    async def get_project_id(self, task_id: int, tenant_id: int) -> Optional[int]:
        """Resolve the project of a live task in the tenant"""
        pass

    @abstractmethod
    async def exists_in_project(
        self, task_id: int, project_id: int, tenant_id: int
    ) -> bool:
        """Check a live task exists inside the given project"""
        pass

    @abstractmethod
    async def list_by_project(self, project_id: int, tenant_id: int) -> List[TaskRow]:
        """Get live tasks of a project ordered by (parent_id, position)"""
        pass

    @abstractmethod
    async def bump_version(self, task_id: int, tenant_id: int, version: int) -> int:
        """Conditional version bump without changing any other field"""
        pass

    @abstractmethod
    async def set_child_position(
        self, task_id: int, tenant_id: int, parent_id: int, position: int
    ) -> int:
        """Set position of a live child of parent_id and bump its version"""
        pass

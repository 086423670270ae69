from typing import List, Optional

from sqlalchemy import and_
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.versioned_repository import VersionedRepository
from src.app.repositories.task_repository import ITaskRepository, TaskRow
from src.domain.base import utcnow
from src.domain.entities import StatusType, Task


class TaskRepository(VersionedRepository, ITaskRepository):
    """Task repository implementation using SQLModel"""

    entity = Task
    key_field = "task_id"

    def __init__(self, session: AsyncSession):
        super().__init__(session)

    def _select_with_status(self):
        return select(Task, StatusType.status_name).outerjoin(
            StatusType,
            and_(
                StatusType.status_id == Task.status_id,
                StatusType.tenant_id == Task.tenant_id,
                StatusType.is_deleted == False,
            ),
        )

    async def create(self, task: Task) -> Task:
        """Insert a new task"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def get_by_id(self, task_id: int, tenant_id: int) -> Optional[TaskRow]:
        """Get live task and its status name by ID"""
        stmt = self._select_with_status().where(*self._live(task_id, tenant_id))
        result = await self.session.execute(stmt)
        row = result.first()
        return (row[0], row[1]) if row else None

    async def get_project_id(self, task_id: int, tenant_id: int) -> Optional[int]:
        """Resolve the project of a live task in the tenant"""
        stmt = select(Task.project_id).where(*self._live(task_id, tenant_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def exists_in_project(
        self, task_id: int, project_id: int, tenant_id: int
    ) -> bool:
        """Check a live task exists inside the given project"""
        stmt = select(Task.task_id).where(
            *self._live(task_id, tenant_id), Task.project_id == project_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list_by_project(self, project_id: int, tenant_id: int) -> List[TaskRow]:
        """Get live tasks of a project ordered by (parent_id, position)"""
        stmt = (
            self._select_with_status()
            .where(
                Task.project_id == project_id,
                Task.tenant_id == tenant_id,
                Task.is_deleted == False,
            )
            .order_by(Task.parent_id, Task.position, Task.task_id)
        )
        result = await self.session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]

    async def bump_version(self, task_id: int, tenant_id: int, version: int) -> int:
        """Conditional version bump without changing any other field"""
        return await self._conditional_write(task_id, tenant_id, version, {})

    async def set_child_position(
        self, task_id: int, tenant_id: int, parent_id: int, position: int
    ) -> int:
        """Set position of a live child of parent_id and bump its version"""
        stmt = (
            update(Task)
            .where(*self._live(task_id, tenant_id), Task.parent_id == parent_id)
            .values(position=position, modified=utcnow(), version=Task.version + 1)
        )
        result = await self.session.execute(stmt)
        return result.rowcount

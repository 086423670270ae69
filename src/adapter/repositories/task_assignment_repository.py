from decimal import Decimal
from typing import List, Optional

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.task_assignment_repository import ITaskAssignmentRepository
from src.domain.base import utcnow
from src.domain.entities import TaskAssignment


class TaskAssignmentRepository(ITaskAssignmentRepository):
    """TaskAssignment repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _key(self, project_id: int, task_id: int, member_id: int, tenant_id: int):
        return (
            TaskAssignment.project_id == project_id,
            TaskAssignment.task_id == task_id,
            TaskAssignment.member_id == member_id,
            TaskAssignment.tenant_id == tenant_id,
        )

    async def get(
        self, project_id: int, task_id: int, member_id: int, tenant_id: int
    ) -> Optional[TaskAssignment]:
        """Get association row, including a soft-deleted one"""
        stmt = select(TaskAssignment).where(
            *self._key(project_id, task_id, member_id, tenant_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, assignment: TaskAssignment) -> TaskAssignment:
        """Insert a new association with zero hours"""
        self.session.add(assignment)
        await self.session.flush()
        await self.session.refresh(assignment)
        return assignment

    async def revive(
        self, project_id: int, task_id: int, member_id: int, tenant_id: int
    ) -> int:
        """Undelete a soft-deleted association and reset hours to zero"""
        stmt = (
            update(TaskAssignment)
            .where(
                *self._key(project_id, task_id, member_id, tenant_id),
                TaskAssignment.is_deleted == True,
            )
            .values(
                is_deleted=False,
                deleted=None,
                task_hours=Decimal("0.00"),
                modified=utcnow(),
                version=TaskAssignment.version + 1,
            )
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def remove(
        self, project_id: int, task_id: int, member_id: int, tenant_id: int
    ) -> int:
        """Soft delete an active association and reset hours to zero"""
        now = utcnow()
        stmt = (
            update(TaskAssignment)
            .where(
                *self._key(project_id, task_id, member_id, tenant_id),
                TaskAssignment.is_deleted == False,
            )
            .values(
                is_deleted=True,
                deleted=now,
                task_hours=Decimal("0.00"),
                modified=now,
                version=TaskAssignment.version + 1,
            )
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def add_hours(
        self, project_id: int, task_id: int, member_id: int, tenant_id: int, hours: Decimal
    ) -> int:
        """Add hours to an active association"""
        stmt = (
            update(TaskAssignment)
            .where(
                *self._key(project_id, task_id, member_id, tenant_id),
                TaskAssignment.is_deleted == False,
            )
            .values(
                task_hours=TaskAssignment.task_hours + hours,
                modified=utcnow(),
                version=TaskAssignment.version + 1,
            )
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def list_by_project(self, project_id: int, tenant_id: int) -> List[TaskAssignment]:
        """Get active associations of a project"""
        stmt = select(TaskAssignment).where(
            TaskAssignment.project_id == project_id,
            TaskAssignment.tenant_id == tenant_id,
            TaskAssignment.is_deleted == False,
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

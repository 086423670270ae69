from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.project_repository import ProjectRepository
from src.adapter.repositories.project_role_type_repository import ProjectRoleTypeRepository
from src.adapter.repositories.status_type_repository import StatusTypeRepository
from src.adapter.repositories.task_assignment_repository import TaskAssignmentRepository
from src.adapter.repositories.task_repository import TaskRepository
from src.adapter.repositories.team_member_repository import TeamMemberRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.projects = ProjectRepository(self.session)
        self.status_types = StatusTypeRepository(self.session)
        self.role_types = ProjectRoleTypeRepository(self.session)
        self.tasks = TaskRepository(self.session)
        self.team_members = TeamMemberRepository(self.session)
        self.task_assignments = TaskAssignmentRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()

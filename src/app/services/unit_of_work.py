from abc import ABC, abstractmethod

from src.app.repositories.project_repository import IProjectRepository
from src.app.repositories.project_role_type_repository import IProjectRoleTypeRepository
from src.app.repositories.status_type_repository import IStatusTypeRepository
from src.app.repositories.task_assignment_repository import ITaskAssignmentRepository
from src.app.repositories.task_repository import ITaskRepository
from src.app.repositories.team_member_repository import ITeamMemberRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    projects: IProjectRepository
    status_types: IStatusTypeRepository
    role_types: IProjectRoleTypeRepository
    tasks: ITaskRepository
    team_members: ITeamMemberRepository
    task_assignments: ITaskAssignmentRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass

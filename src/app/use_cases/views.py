"""
Read models returned by the get/list/wrapper use cases.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities import Project, ProjectRoleType, StatusType, Task, TeamMember


class EntityView(BaseModel):
    """Lifecycle envelope fields visible to callers"""

    created: Optional[datetime] = None
    modified: Optional[datetime] = None
    version: int = 0
    tenant_id: int = 0


class ProjectView(EntityView):
    project_id: int
    name: str
    description: str
    status_id: int
    status_name: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    @classmethod
    def from_row(cls, project: Project, status_name: Optional[str]) -> "ProjectView":
        return cls(
            created=project.created,
            modified=project.modified,
            version=project.version,
            tenant_id=project.tenant_id,
            project_id=project.project_id,
            name=project.name,
            description=project.description,
            status_id=project.status_id,
            status_name=status_name,
            start_date=project.start_date,
            end_date=project.end_date,
        )


class StatusTypeView(EntityView):
    status_id: int
    status_name: str
    description: str

    @classmethod
    def from_entity(cls, status_type: StatusType) -> "StatusTypeView":
        return cls(
            created=status_type.created,
            modified=status_type.modified,
            version=status_type.version,
            tenant_id=status_type.tenant_id,
            status_id=status_type.status_id,
            status_name=status_type.status_name,
            description=status_type.description,
        )


class ProjectRoleTypeView(EntityView):
    project_role_id: int
    role_name: str
    description: str

    @classmethod
    def from_entity(cls, role_type: ProjectRoleType) -> "ProjectRoleTypeView":
        return cls(
            created=role_type.created,
            modified=role_type.modified,
            version=role_type.version,
            tenant_id=role_type.tenant_id,
            project_role_id=role_type.project_role_id,
            role_name=role_type.role_name,
            description=role_type.description,
        )


class TaskView(EntityView):
    task_id: int
    project_id: int
    name: str
    description: str
    status_id: int
    status_name: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    priority: int
    parent_id: int
    position: int

    @classmethod
    def from_row(cls, task: Task, status_name: Optional[str]) -> "TaskView":
        return cls(
            created=task.created,
            modified=task.modified,
            version=task.version,
            tenant_id=task.tenant_id,
            task_id=task.task_id,
            project_id=task.project_id,
            name=task.name,
            description=task.description,
            status_id=task.status_id,
            status_name=status_name,
            start_date=task.start_date,
            end_date=task.end_date,
            priority=task.priority,
            parent_id=task.parent_id,
            position=task.position,
        )


class TeamMemberView(EntityView):
    member_id: int
    project_id: int
    name: str
    project_role_id: int
    role_name: Optional[str] = None
    email: str

    @classmethod
    def from_row(cls, member: TeamMember, role_name: Optional[str]) -> "TeamMemberView":
        return cls(
            created=member.created,
            modified=member.modified,
            version=member.version,
            tenant_id=member.tenant_id,
            member_id=member.member_id,
            project_id=member.project_id,
            name=member.name,
            project_role_id=member.project_role_id,
            role_name=role_name,
            email=member.email,
        )


class TaskMemberView(TeamMemberView):
    """Team member as seen from one task, with the hours booked on it"""

    task_hours: Decimal = Decimal("0.00")


class TaskWrapper(TaskView):
    """Task with its nested children and assigned members"""

    child_task_wrappers: List["TaskWrapper"] = Field(default_factory=list)
    team_members: List[TaskMemberView] = Field(default_factory=list)


class ProjectWrapper(ProjectView):
    """Project with its team and its root tasks"""

    team_members: List[TeamMemberView] = Field(default_factory=list)
    task_wrappers: List[TaskWrapper] = Field(default_factory=list)

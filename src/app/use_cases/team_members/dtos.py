"""
Team Member Use Case DTOs (Data Transfer Objects)
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from src.app.use_cases.common import ServiceResponse, TenantCommand, VersionResponse
from src.app.use_cases.views import TaskMemberView, TeamMemberView


# ============================================================================
# Commands
# ============================================================================


class CreateTeamMemberCommand(TenantCommand):
    project_id: int = 0
    name: str = ""
    project_role_id: int = 0
    email: str = ""


class UpdateTeamMemberCommand(TenantCommand):
    """project_id is fixed at creation"""

    member_id: int = 0
    version: int = 0
    name: str = ""
    project_role_id: int = 0
    email: str = ""


class DeleteTeamMemberCommand(TenantCommand):
    member_id: int = 0
    version: int = 0


class GetTeamMemberByIdQuery(TenantCommand):
    member_id: int = 0


class GetTeamMemberByProjectQuery(TenantCommand):
    project_id: int = 0


class GetTeamMemberByTaskQuery(TenantCommand):
    task_id: int = 0


class TaskMemberCommand(TenantCommand):
    """Identifies one task <-> member association"""

    task_id: int = 0
    member_id: int = 0


class AddTaskHoursCommand(TaskMemberCommand):
    task_hours: Decimal = Decimal("0")


# ============================================================================
# Response DTOs
# ============================================================================


class CreateTeamMemberResponse(VersionResponse):
    member_id: int = 0


class UpdateTeamMemberResponse(VersionResponse):
    pass


class DeleteTeamMemberResponse(VersionResponse):
    pass


class GetTeamMemberResponse(ServiceResponse):
    team_member: Optional[TeamMemberView] = None


class GetTeamMembersResponse(ServiceResponse):
    team_members: List[TeamMemberView] = Field(default_factory=list)


class GetTaskMembersResponse(ServiceResponse):
    team_members: List[TaskMemberView] = Field(default_factory=list)


class TaskMemberResponse(ServiceResponse):
    """Outcome of add/remove/hours on an association"""

    pass

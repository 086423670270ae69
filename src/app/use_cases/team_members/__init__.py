"""
Team Member Use Cases

Member CRUD plus the task assignment operations.
"""

from .dtos import (
    AddTaskHoursCommand,
    CreateTeamMemberCommand,
    CreateTeamMemberResponse,
    DeleteTeamMemberCommand,
    DeleteTeamMemberResponse,
    GetTaskMembersResponse,
    GetTeamMemberByIdQuery,
    GetTeamMemberByProjectQuery,
    GetTeamMemberByTaskQuery,
    GetTeamMemberResponse,
    GetTeamMembersResponse,
    TaskMemberCommand,
    TaskMemberResponse,
    UpdateTeamMemberCommand,
    UpdateTeamMemberResponse,
)
from .task_member_use_cases import (
    AddTaskHoursUseCase,
    AddTeamMemberToTaskUseCase,
    GetTeamMemberByTaskUseCase,
    RemoveTeamMemberFromTaskUseCase,
)
from .team_member_use_cases import (
    CreateTeamMemberUseCase,
    DeleteTeamMemberUseCase,
    GetTeamMemberByIdUseCase,
    GetTeamMemberByProjectUseCase,
    UpdateTeamMemberUseCase,
)

__all__ = [
    "CreateTeamMemberUseCase",
    "UpdateTeamMemberUseCase",
    "DeleteTeamMemberUseCase",
    "GetTeamMemberByIdUseCase",
    "GetTeamMemberByProjectUseCase",
    "GetTeamMemberByTaskUseCase",
    "AddTeamMemberToTaskUseCase",
    "RemoveTeamMemberFromTaskUseCase",
    "AddTaskHoursUseCase",
    "CreateTeamMemberCommand",
    "UpdateTeamMemberCommand",
    "DeleteTeamMemberCommand",
    "GetTeamMemberByIdQuery",
    "GetTeamMemberByProjectQuery",
    "GetTeamMemberByTaskQuery",
    "TaskMemberCommand",
    "AddTaskHoursCommand",
    "CreateTeamMemberResponse",
    "UpdateTeamMemberResponse",
    "DeleteTeamMemberResponse",
    "GetTeamMemberResponse",
    "GetTeamMembersResponse",
    "GetTaskMembersResponse",
    "TaskMemberResponse",
]

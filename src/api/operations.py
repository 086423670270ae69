"""
Operation table: name -> required tier, handler, response model, audit field.
"""

from datetime import datetime
from typing import List

from src.api.gateway import Operation
from src.app.use_cases.projects import (
    CreateProjectResponse,
    CreateProjectUseCase,
    DeleteProjectResponse,
    DeleteProjectUseCase,
    GetProjectByIdUseCase,
    GetProjectByNameUseCase,
    GetProjectNamesResponse,
    GetProjectNamesUseCase,
    GetProjectResponse,
    GetProjectsResponse,
    GetProjectsUseCase,
    GetProjectWrapperResponse,
    GetProjectWrapperUseCase,
    UpdateProjectResponse,
    UpdateProjectUseCase,
)
from src.app.use_cases.role_types import (
    CreateProjectRoleTypeResponse,
    CreateProjectRoleTypeUseCase,
    DeleteProjectRoleTypeResponse,
    DeleteProjectRoleTypeUseCase,
    GetProjectRoleTypeResponse,
    GetProjectRoleTypesResponse,
    GetProjectRoleTypesUseCase,
    GetProjectRoleTypeUseCase,
    UpdateProjectRoleTypeResponse,
    UpdateProjectRoleTypeUseCase,
)
from src.app.use_cases.server import GetServerVersionResponse, GetServerVersionUseCase
from src.app.use_cases.status_types import (
    CreateStatusTypeResponse,
    CreateStatusTypeUseCase,
    DeleteStatusTypeResponse,
    DeleteStatusTypeUseCase,
    GetStatusTypeResponse,
    GetStatusTypesResponse,
    GetStatusTypesUseCase,
    GetStatusTypeUseCase,
    UpdateStatusTypeResponse,
    UpdateStatusTypeUseCase,
)
from src.app.use_cases.tasks import (
    CreateTaskResponse,
    CreateTaskUseCase,
    DeleteTaskResponse,
    DeleteTaskUseCase,
    GetTaskByIdUseCase,
    GetTaskResponse,
    GetTasksByProjectResponse,
    GetTasksByProjectUseCase,
    GetTaskWrapperResponse,
    GetTaskWrapperUseCase,
    ReorderChildTasksResponse,
    ReorderChildTasksUseCase,
    UpdateTaskResponse,
    UpdateTaskUseCase,
)
from src.app.use_cases.team_members import (
    AddTaskHoursUseCase,
    AddTeamMemberToTaskUseCase,
    CreateTeamMemberResponse,
    CreateTeamMemberUseCase,
    DeleteTeamMemberResponse,
    DeleteTeamMemberUseCase,
    GetTaskMembersResponse,
    GetTeamMemberByIdUseCase,
    GetTeamMemberByProjectUseCase,
    GetTeamMemberByTaskUseCase,
    GetTeamMemberResponse,
    GetTeamMembersResponse,
    RemoveTeamMemberFromTaskUseCase,
    TaskMemberResponse,
    UpdateTeamMemberResponse,
    UpdateTeamMemberUseCase,
)
from src.domain.entities import PermissionTier

ADMIN = PermissionTier.admin
READ_WRITE = PermissionTier.read_write
READ_ONLY = PermissionTier.read_only


def build_operations(
    server_version: str, started_at: datetime, reorder_atomic: bool = True
) -> List[Operation]:
    def run(use_case_cls, method: str = "execute"):
        async def handler(uow, request):
            return await getattr(use_case_cls(uow), method)(request)

        return handler

    async def reorder(uow, request):
        return await ReorderChildTasksUseCase(uow, atomic=reorder_atomic).execute(request)

    async def server_version_handler(uow, request):
        return await GetServerVersionUseCase(server_version, started_at).execute(request)

    return [
        # Projects
        Operation("CreateProject", ADMIN, run(CreateProjectUseCase), CreateProjectResponse, "name"),
        Operation("UpdateProject", READ_WRITE, run(UpdateProjectUseCase), UpdateProjectResponse, "project_id"),
        Operation("DeleteProject", ADMIN, run(DeleteProjectUseCase), DeleteProjectResponse, "project_id"),
        Operation("GetProjectById", READ_ONLY, run(GetProjectByIdUseCase), GetProjectResponse, "project_id"),
        Operation("GetProjectByName", READ_ONLY, run(GetProjectByNameUseCase), GetProjectResponse, "name"),
        Operation("GetProjects", READ_ONLY, run(GetProjectsUseCase), GetProjectsResponse),
        Operation("GetProjectNames", READ_ONLY, run(GetProjectNamesUseCase), GetProjectNamesResponse),
        Operation(
            "GetProjectWrapperById",
            READ_ONLY,
            run(GetProjectWrapperUseCase),
            GetProjectWrapperResponse,
            "project_id",
        ),
        Operation(
            "GetProjectWrapperByName",
            READ_ONLY,
            run(GetProjectWrapperUseCase, "execute_by_name"),
            GetProjectWrapperResponse,
            "name",
        ),
        # Status types
        Operation("CreateStatusType", ADMIN, run(CreateStatusTypeUseCase), CreateStatusTypeResponse, "status_id"),
        Operation("UpdateStatusType", ADMIN, run(UpdateStatusTypeUseCase), UpdateStatusTypeResponse, "status_id"),
        Operation("DeleteStatusType", ADMIN, run(DeleteStatusTypeUseCase), DeleteStatusTypeResponse, "status_id"),
        Operation("GetStatusType", READ_ONLY, run(GetStatusTypeUseCase), GetStatusTypeResponse, "status_id"),
        Operation("GetStatusTypes", READ_ONLY, run(GetStatusTypesUseCase), GetStatusTypesResponse),
        # Project role types
        Operation(
            "CreateProjectRoleType",
            ADMIN,
            run(CreateProjectRoleTypeUseCase),
            CreateProjectRoleTypeResponse,
            "project_role_id",
        ),
        Operation(
            "UpdateProjectRoleType",
            ADMIN,
            run(UpdateProjectRoleTypeUseCase),
            UpdateProjectRoleTypeResponse,
            "project_role_id",
        ),
        Operation(
            "DeleteProjectRoleType",
            ADMIN,
            run(DeleteProjectRoleTypeUseCase),
            DeleteProjectRoleTypeResponse,
            "project_role_id",
        ),
        Operation(
            "GetProjectRoleType",
            READ_ONLY,
            run(GetProjectRoleTypeUseCase),
            GetProjectRoleTypeResponse,
            "project_role_id",
        ),
        Operation("GetProjectRoleTypes", READ_ONLY, run(GetProjectRoleTypesUseCase), GetProjectRoleTypesResponse),
        # Tasks
        Operation("CreateTask", READ_WRITE, run(CreateTaskUseCase), CreateTaskResponse, "name"),
        Operation("UpdateTask", READ_WRITE, run(UpdateTaskUseCase), UpdateTaskResponse, "task_id"),
        Operation("DeleteTask", READ_WRITE, run(DeleteTaskUseCase), DeleteTaskResponse, "task_id"),
        Operation("GetTaskById", READ_ONLY, run(GetTaskByIdUseCase), GetTaskResponse, "task_id"),
        Operation("GetTasksByProject", READ_ONLY, run(GetTasksByProjectUseCase), GetTasksByProjectResponse, "project_id"),
        Operation("GetTaskWrapperById", READ_ONLY, run(GetTaskWrapperUseCase), GetTaskWrapperResponse, "task_id"),
        Operation("ReorderChildTasks", READ_WRITE, reorder, ReorderChildTasksResponse, "task_id"),
        # Team members
        Operation("CreateTeamMember", READ_WRITE, run(CreateTeamMemberUseCase), CreateTeamMemberResponse, "name"),
        Operation("UpdateTeamMember", READ_WRITE, run(UpdateTeamMemberUseCase), UpdateTeamMemberResponse, "member_id"),
        Operation("DeleteTeamMember", READ_WRITE, run(DeleteTeamMemberUseCase), DeleteTeamMemberResponse, "member_id"),
        Operation("GetTeamMemberById", READ_ONLY, run(GetTeamMemberByIdUseCase), GetTeamMemberResponse, "member_id"),
        Operation(
            "GetTeamMemberByProject",
            READ_ONLY,
            run(GetTeamMemberByProjectUseCase),
            GetTeamMembersResponse,
            "project_id",
        ),
        Operation("GetTeamMemberByTask", READ_ONLY, run(GetTeamMemberByTaskUseCase), GetTaskMembersResponse, "task_id"),
        Operation("AddTeamMemberToTask", READ_WRITE, run(AddTeamMemberToTaskUseCase), TaskMemberResponse, "task_id"),
        Operation(
            "RemoveTeamMemberFromTask",
            READ_WRITE,
            run(RemoveTeamMemberFromTaskUseCase),
            TaskMemberResponse,
            "task_id",
        ),
        Operation("AddTaskHours", READ_WRITE, run(AddTaskHoursUseCase), TaskMemberResponse, "task_id"),
        # Server
        Operation("GetServerVersion", None, server_version_handler, GetServerVersionResponse),
    ]

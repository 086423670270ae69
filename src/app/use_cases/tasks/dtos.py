"""
Task Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from src.app.use_cases.common import ServiceResponse, TenantCommand, VersionResponse
from src.app.use_cases.views import TaskView, TaskWrapper
from src.domain.entities import ROOT_PARENT_ID


# ============================================================================
# Commands
# ============================================================================


class TaskFields(TenantCommand):
    name: str = ""
    description: str = ""
    status_id: int = 0
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    priority: int = 5
    position: int = 1


class CreateTaskCommand(TaskFields):
    project_id: int = 0
    parent_id: int = ROOT_PARENT_ID


class UpdateTaskCommand(TaskFields):
    """parent_id and project_id are fixed at creation"""

    task_id: int = 0
    version: int = 0


class DeleteTaskCommand(TenantCommand):
    task_id: int = 0
    version: int = 0


class GetTaskByIdQuery(TenantCommand):
    task_id: int = 0


class GetTasksByProjectQuery(TenantCommand):
    project_id: int = 0


class ReorderChildTasksCommand(TenantCommand):
    task_id: int = 0
    version: int = 0
    child_task_ids: List[int] = Field(default_factory=list)


# ============================================================================
# Response DTOs
# ============================================================================


class CreateTaskResponse(VersionResponse):
    task_id: int = 0


class UpdateTaskResponse(VersionResponse):
    pass


class DeleteTaskResponse(VersionResponse):
    pass


class ReorderChildTasksResponse(VersionResponse):
    pass


class GetTaskResponse(ServiceResponse):
    task: Optional[TaskView] = None


class GetTasksByProjectResponse(ServiceResponse):
    tasks: List[TaskView] = Field(default_factory=list)


class GetTaskWrapperResponse(ServiceResponse):
    task_wrapper: Optional[TaskWrapper] = None

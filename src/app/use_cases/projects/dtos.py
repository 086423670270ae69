"""
Project Use Case DTOs (Data Transfer Objects)

Command classes double as request bodies; Response classes carry the
error_code/error_message pair alongside the payload.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from src.app.use_cases.common import ServiceResponse, TenantCommand, VersionResponse
from src.app.use_cases.views import ProjectView, ProjectWrapper


# ============================================================================
# Commands
# ============================================================================


class CreateProjectCommand(TenantCommand):
    name: str = ""
    description: str = ""
    status_id: int = 0
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class UpdateProjectCommand(CreateProjectCommand):
    project_id: int = 0
    version: int = 0


class DeleteProjectCommand(TenantCommand):
    project_id: int = 0
    version: int = 0


class GetProjectByIdQuery(TenantCommand):
    project_id: int = 0


class GetProjectByNameQuery(TenantCommand):
    name: str = ""


class GetProjectsQuery(TenantCommand):
    pass


# ============================================================================
# Response DTOs
# ============================================================================


class CreateProjectResponse(VersionResponse):
    project_id: int = 0


class UpdateProjectResponse(VersionResponse):
    pass


class DeleteProjectResponse(VersionResponse):
    pass


class GetProjectResponse(ServiceResponse):
    project: Optional[ProjectView] = None


class GetProjectsResponse(ServiceResponse):
    projects: List[ProjectView] = Field(default_factory=list)


class GetProjectNamesResponse(ServiceResponse):
    project_names: List[str] = Field(default_factory=list)


class GetProjectWrapperResponse(ServiceResponse):
    project_wrapper: Optional[ProjectWrapper] = None

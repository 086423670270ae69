"""
ProjectRoleType Use Case DTOs
"""

from typing import List, Optional

from pydantic import Field

from src.app.use_cases.common import ServiceResponse, TenantCommand, VersionResponse
from src.app.use_cases.views import ProjectRoleTypeView


class CreateProjectRoleTypeCommand(TenantCommand):
    project_role_id: int = 0
    role_name: str = ""
    description: str = ""


class UpdateProjectRoleTypeCommand(CreateProjectRoleTypeCommand):
    version: int = 0


class DeleteProjectRoleTypeCommand(TenantCommand):
    project_role_id: int = 0
    version: int = 0


class GetProjectRoleTypeQuery(TenantCommand):
    project_role_id: int = 0


class GetProjectRoleTypesQuery(TenantCommand):
    pass


class CreateProjectRoleTypeResponse(VersionResponse):
    project_role_id: int = 0


class UpdateProjectRoleTypeResponse(VersionResponse):
    pass


class DeleteProjectRoleTypeResponse(VersionResponse):
    pass


class GetProjectRoleTypeResponse(ServiceResponse):
    role_type: Optional[ProjectRoleTypeView] = None


class GetProjectRoleTypesResponse(ServiceResponse):
    role_types: List[ProjectRoleTypeView] = Field(default_factory=list)

"""
StatusType Use Case DTOs
"""

from typing import List, Optional

from pydantic import Field

from src.app.use_cases.common import ServiceResponse, TenantCommand, VersionResponse
from src.app.use_cases.views import StatusTypeView


class CreateStatusTypeCommand(TenantCommand):
    status_id: int = 0
    status_name: str = ""
    description: str = ""


class UpdateStatusTypeCommand(CreateStatusTypeCommand):
    version: int = 0


class DeleteStatusTypeCommand(TenantCommand):
    status_id: int = 0
    version: int = 0


class GetStatusTypeQuery(TenantCommand):
    status_id: int = 0


class GetStatusTypesQuery(TenantCommand):
    pass


class CreateStatusTypeResponse(VersionResponse):
    status_id: int = 0


class UpdateStatusTypeResponse(VersionResponse):
    pass


class DeleteStatusTypeResponse(VersionResponse):
    pass


class GetStatusTypeResponse(ServiceResponse):
    status_type: Optional[StatusTypeView] = None


class GetStatusTypesResponse(ServiceResponse):
    status_types: List[StatusTypeView] = Field(default_factory=list)

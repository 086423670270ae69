"""
Shared Command/Response bases.

Every command is scoped to a tenant; the authorization gateway overwrites
tenant_id with the verified claim before the use case runs. Every response
carries error_code/error_message, zero and empty on success.
"""

from pydantic import BaseModel, Field

from src.libs.result import Error


class TenantCommand(BaseModel):
    """Base for all use case inputs"""

    tenant_id: int = Field(default=0, description="Overwritten from the caller's claims")


class ServiceResponse(BaseModel):
    """Base for all use case outputs"""

    error_code: int = 0
    error_message: str = ""


class VersionResponse(ServiceResponse):
    """Response carrying the entity version after a write"""

    version: int = 0


def not_found(message: str = "not found") -> Error:
    return Error("NOT_FOUND", message)

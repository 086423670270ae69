"""
ProjectRoleType Use Cases
"""

from .dtos import (
    CreateProjectRoleTypeCommand,
    CreateProjectRoleTypeResponse,
    DeleteProjectRoleTypeCommand,
    DeleteProjectRoleTypeResponse,
    GetProjectRoleTypeQuery,
    GetProjectRoleTypeResponse,
    GetProjectRoleTypesQuery,
    GetProjectRoleTypesResponse,
    UpdateProjectRoleTypeCommand,
    UpdateProjectRoleTypeResponse,
)
from .role_type_use_cases import (
    CreateProjectRoleTypeUseCase,
    DeleteProjectRoleTypeUseCase,
    GetProjectRoleTypesUseCase,
    GetProjectRoleTypeUseCase,
    UpdateProjectRoleTypeUseCase,
)

__all__ = [
    "CreateProjectRoleTypeUseCase",
    "UpdateProjectRoleTypeUseCase",
    "DeleteProjectRoleTypeUseCase",
    "GetProjectRoleTypeUseCase",
    "GetProjectRoleTypesUseCase",
    "CreateProjectRoleTypeCommand",
    "UpdateProjectRoleTypeCommand",
    "DeleteProjectRoleTypeCommand",
    "GetProjectRoleTypeQuery",
    "GetProjectRoleTypesQuery",
    "CreateProjectRoleTypeResponse",
    "UpdateProjectRoleTypeResponse",
    "DeleteProjectRoleTypeResponse",
    "GetProjectRoleTypeResponse",
    "GetProjectRoleTypesResponse",
]

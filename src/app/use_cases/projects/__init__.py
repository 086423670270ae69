"""
Project Use Cases
"""

from .create_project_use_case import CreateProjectUseCase
from .dtos import (
    CreateProjectCommand,
    CreateProjectResponse,
    DeleteProjectCommand,
    DeleteProjectResponse,
    GetProjectByIdQuery,
    GetProjectByNameQuery,
    GetProjectNamesResponse,
    GetProjectResponse,
    GetProjectsQuery,
    GetProjectsResponse,
    GetProjectWrapperResponse,
    UpdateProjectCommand,
    UpdateProjectResponse,
)
from .get_project_use_case import (
    GetProjectByIdUseCase,
    GetProjectByNameUseCase,
    GetProjectNamesUseCase,
    GetProjectsUseCase,
)
from .get_project_wrapper_use_case import GetProjectWrapperUseCase
from .update_project_use_case import DeleteProjectUseCase, UpdateProjectUseCase

__all__ = [
    "CreateProjectUseCase",
    "UpdateProjectUseCase",
    "DeleteProjectUseCase",
    "GetProjectByIdUseCase",
    "GetProjectByNameUseCase",
    "GetProjectsUseCase",
    "GetProjectNamesUseCase",
    "GetProjectWrapperUseCase",
    "CreateProjectCommand",
    "UpdateProjectCommand",
    "DeleteProjectCommand",
    "GetProjectByIdQuery",
    "GetProjectByNameQuery",
    "GetProjectsQuery",
    "CreateProjectResponse",
    "UpdateProjectResponse",
    "DeleteProjectResponse",
    "GetProjectResponse",
    "GetProjectsResponse",
    "GetProjectNamesResponse",
    "GetProjectWrapperResponse",
]

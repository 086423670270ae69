"""
StatusType Use Cases
"""

from .dtos import (
    CreateStatusTypeCommand,
    CreateStatusTypeResponse,
    DeleteStatusTypeCommand,
    DeleteStatusTypeResponse,
    GetStatusTypeQuery,
    GetStatusTypeResponse,
    GetStatusTypesQuery,
    GetStatusTypesResponse,
    UpdateStatusTypeCommand,
    UpdateStatusTypeResponse,
)
from .status_type_use_cases import (
    CreateStatusTypeUseCase,
    DeleteStatusTypeUseCase,
    GetStatusTypesUseCase,
    GetStatusTypeUseCase,
    UpdateStatusTypeUseCase,
)

__all__ = [
    "CreateStatusTypeUseCase",
    "UpdateStatusTypeUseCase",
    "DeleteStatusTypeUseCase",
    "GetStatusTypeUseCase",
    "GetStatusTypesUseCase",
    "CreateStatusTypeCommand",
    "UpdateStatusTypeCommand",
    "DeleteStatusTypeCommand",
    "GetStatusTypeQuery",
    "GetStatusTypesQuery",
    "CreateStatusTypeResponse",
    "UpdateStatusTypeResponse",
    "DeleteStatusTypeResponse",
    "GetStatusTypeResponse",
    "GetStatusTypesResponse",
]

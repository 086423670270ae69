"""
Server Use Cases
"""

from .dtos import GetServerVersionQuery, GetServerVersionResponse
from .get_server_version_use_case import GetServerVersionUseCase

__all__ = [
    "GetServerVersionUseCase",
    "GetServerVersionQuery",
    "GetServerVersionResponse",
]

"""
Task Use Cases
"""

from .create_task_use_case import CreateTaskUseCase
from .dtos import (
    CreateTaskCommand,
    CreateTaskResponse,
    DeleteTaskCommand,
    DeleteTaskResponse,
    GetTaskByIdQuery,
    GetTaskResponse,
    GetTasksByProjectQuery,
    GetTasksByProjectResponse,
    GetTaskWrapperResponse,
    ReorderChildTasksCommand,
    ReorderChildTasksResponse,
    UpdateTaskCommand,
    UpdateTaskResponse,
)
from .get_task_use_case import GetTaskByIdUseCase, GetTasksByProjectUseCase, GetTaskWrapperUseCase
from .reorder_child_tasks_use_case import ReorderChildTasksUseCase
from .update_task_use_case import DeleteTaskUseCase, UpdateTaskUseCase

__all__ = [
    "CreateTaskUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
    "GetTaskByIdUseCase",
    "GetTasksByProjectUseCase",
    "GetTaskWrapperUseCase",
    "ReorderChildTasksUseCase",
    "CreateTaskCommand",
    "UpdateTaskCommand",
    "DeleteTaskCommand",
    "GetTaskByIdQuery",
    "GetTasksByProjectQuery",
    "ReorderChildTasksCommand",
    "CreateTaskResponse",
    "UpdateTaskResponse",
    "DeleteTaskResponse",
    "GetTaskResponse",
    "GetTasksByProjectResponse",
    "GetTaskWrapperResponse",
    "ReorderChildTasksResponse",
]

from fastapi import APIRouter, Depends, status

from src.api.gateway import AuthorizationGateway
from src.api.utils.jwt import Claims
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks import (
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
from src.depends import get_claims, get_gateway, get_unit_of_work
from src.libs.result import Result

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.post("/create", status_code=status.HTTP_200_OK, response_model=CreateTaskResponse)
async def create_task(
    request: CreateTaskCommand,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    """
    Create Task - requires projrw

    error_code 404 "project for task not found" / "parent task not found"
    when a reference does not resolve in the caller's tenant.
    """
    return await gateway.dispatch("CreateTask", request, claims, uow)


@router.post("/update", status_code=status.HTTP_200_OK, response_model=UpdateTaskResponse)
async def update_task(
    request: UpdateTaskCommand,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("UpdateTask", request, claims, uow)


@router.post("/delete", status_code=status.HTTP_200_OK, response_model=DeleteTaskResponse)
async def delete_task(
    request: DeleteTaskCommand,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("DeleteTask", request, claims, uow)


@router.post("/get-by-id", status_code=status.HTTP_200_OK, response_model=GetTaskResponse)
async def get_task_by_id(
    request: GetTaskByIdQuery,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("GetTaskById", request, claims, uow)


@router.post(
    "/get-by-project", status_code=status.HTTP_200_OK, response_model=GetTasksByProjectResponse
)
async def get_tasks_by_project(
    request: GetTasksByProjectQuery,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("GetTasksByProject", request, claims, uow)


@router.post(
    "/wrapper/get-by-id", status_code=status.HTTP_200_OK, response_model=GetTaskWrapperResponse
)
async def get_task_wrapper_by_id(
    request: GetTaskByIdQuery,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("GetTaskWrapperById", request, claims, uow)


@router.post(
    "/reorder-children", status_code=status.HTTP_200_OK, response_model=ReorderChildTasksResponse
)
async def reorder_child_tasks(
    request: ReorderChildTasksCommand,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    """
    Reorder Child Tasks - requires projrw

    Bumps the parent's version, then gives child_task_ids[i] position i + 1.
    Returns the parent's new version. After a 404 the caller should re-fetch
    the children before retrying.
    """
    return await gateway.dispatch("ReorderChildTasks", request, claims, uow)

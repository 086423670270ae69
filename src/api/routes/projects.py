from fastapi import APIRouter, Depends, status

from src.api.gateway import AuthorizationGateway
from src.api.utils.jwt import Claims
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.projects import (
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
from src.depends import get_claims, get_gateway, get_unit_of_work
from src.libs.result import Result

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.post("/create", status_code=status.HTTP_200_OK, response_model=CreateProjectResponse)
async def create_project(
    request: CreateProjectCommand,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    """
    Create Project - requires projadmin

    Returns the new project_id with version 1. error_code 510 when the name
    is not a slug or the description is blank.
    """
    return await gateway.dispatch("CreateProject", request, claims, uow)


@router.post("/update", status_code=status.HTTP_200_OK, response_model=UpdateProjectResponse)
async def update_project(
    request: UpdateProjectCommand,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    """
    Update Project - requires projrw

    error_code 404 when the project is gone or the version is stale.
    """
    return await gateway.dispatch("UpdateProject", request, claims, uow)


@router.post("/delete", status_code=status.HTTP_200_OK, response_model=DeleteProjectResponse)
async def delete_project(
    request: DeleteProjectCommand,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    """Delete Project (soft) - requires projadmin"""
    return await gateway.dispatch("DeleteProject", request, claims, uow)


@router.post("/get-by-id", status_code=status.HTTP_200_OK, response_model=GetProjectResponse)
async def get_project_by_id(
    request: GetProjectByIdQuery,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("GetProjectById", request, claims, uow)


@router.post("/get-by-name", status_code=status.HTTP_200_OK, response_model=GetProjectResponse)
async def get_project_by_name(
    request: GetProjectByNameQuery,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("GetProjectByName", request, claims, uow)


@router.post("/list", status_code=status.HTTP_200_OK, response_model=GetProjectsResponse)
async def get_projects(
    request: GetProjectsQuery,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("GetProjects", request, claims, uow)


@router.post("/names", status_code=status.HTTP_200_OK, response_model=GetProjectNamesResponse)
async def get_project_names(
    request: GetProjectsQuery,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("GetProjectNames", request, claims, uow)


@router.post(
    "/wrapper/get-by-id",
    status_code=status.HTTP_200_OK,
    response_model=GetProjectWrapperResponse,
)
async def get_project_wrapper_by_id(
    request: GetProjectByIdQuery,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    """
    Get Project Wrapper - any tier

    Project with its team and nested task tree; only root tasks at top level.
    """
    return await gateway.dispatch("GetProjectWrapperById", request, claims, uow)


@router.post(
    "/wrapper/get-by-name",
    status_code=status.HTTP_200_OK,
    response_model=GetProjectWrapperResponse,
)
async def get_project_wrapper_by_name(
    request: GetProjectByNameQuery,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("GetProjectWrapperByName", request, claims, uow)

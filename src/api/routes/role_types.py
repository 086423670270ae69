from fastapi import APIRouter, Depends, status

from src.api.gateway import AuthorizationGateway
from src.api.utils.jwt import Claims
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.role_types import (
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
from src.depends import get_claims, get_gateway, get_unit_of_work
from src.libs.result import Result

router = APIRouter(prefix="/role-types", tags=["Project Role Types"])


@router.post("/create", status_code=status.HTTP_200_OK, response_model=CreateProjectRoleTypeResponse)
async def create_project_role_type(
    request: CreateProjectRoleTypeCommand,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    """
    Create Project Role Type - requires projadmin

    project_role_id is chosen by the caller; reusing one in the same tenant
    answers error_code 501.
    """
    return await gateway.dispatch("CreateProjectRoleType", request, claims, uow)


@router.post("/update", status_code=status.HTTP_200_OK, response_model=UpdateProjectRoleTypeResponse)
async def update_project_role_type(
    request: UpdateProjectRoleTypeCommand,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("UpdateProjectRoleType", request, claims, uow)


@router.post("/delete", status_code=status.HTTP_200_OK, response_model=DeleteProjectRoleTypeResponse)
async def delete_project_role_type(
    request: DeleteProjectRoleTypeCommand,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("DeleteProjectRoleType", request, claims, uow)


@router.post("/get", status_code=status.HTTP_200_OK, response_model=GetProjectRoleTypeResponse)
async def get_project_role_type(
    request: GetProjectRoleTypeQuery,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("GetProjectRoleType", request, claims, uow)


@router.post("/list", status_code=status.HTTP_200_OK, response_model=GetProjectRoleTypesResponse)
async def get_project_role_types(
    request: GetProjectRoleTypesQuery,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("GetProjectRoleTypes", request, claims, uow)

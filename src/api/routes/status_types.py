from fastapi import APIRouter, Depends, status

from src.api.gateway import AuthorizationGateway
from src.api.utils.jwt import Claims
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.status_types import (
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
from src.depends import get_claims, get_gateway, get_unit_of_work
from src.libs.result import Result

router = APIRouter(prefix="/status-types", tags=["Status Types"])


@router.post("/create", status_code=status.HTTP_200_OK, response_model=CreateStatusTypeResponse)
async def create_status_type(
    request: CreateStatusTypeCommand,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    """
    Create Status Type - requires projadmin

    status_id is chosen by the caller; reusing one in the same tenant
    answers error_code 501.
    """
    return await gateway.dispatch("CreateStatusType", request, claims, uow)


@router.post("/update", status_code=status.HTTP_200_OK, response_model=UpdateStatusTypeResponse)
async def update_status_type(
    request: UpdateStatusTypeCommand,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("UpdateStatusType", request, claims, uow)


@router.post("/delete", status_code=status.HTTP_200_OK, response_model=DeleteStatusTypeResponse)
async def delete_status_type(
    request: DeleteStatusTypeCommand,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("DeleteStatusType", request, claims, uow)


@router.post("/get", status_code=status.HTTP_200_OK, response_model=GetStatusTypeResponse)
async def get_status_type(
    request: GetStatusTypeQuery,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("GetStatusType", request, claims, uow)


@router.post("/list", status_code=status.HTTP_200_OK, response_model=GetStatusTypesResponse)
async def get_status_types(
    request: GetStatusTypesQuery,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("GetStatusTypes", request, claims, uow)

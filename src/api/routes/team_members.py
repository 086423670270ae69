from fastapi import APIRouter, Depends, status

from src.api.gateway import AuthorizationGateway
from src.api.utils.jwt import Claims
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.team_members import (
    AddTaskHoursCommand,
    CreateTeamMemberCommand,
    CreateTeamMemberResponse,
    DeleteTeamMemberCommand,
    DeleteTeamMemberResponse,
    GetTaskMembersResponse,
    GetTeamMemberByIdQuery,
    GetTeamMemberByProjectQuery,
    GetTeamMemberByTaskQuery,
    GetTeamMemberResponse,
    GetTeamMembersResponse,
    TaskMemberCommand,
    TaskMemberResponse,
    UpdateTeamMemberCommand,
    UpdateTeamMemberResponse,
)
from src.depends import get_claims, get_gateway, get_unit_of_work
from src.libs.result import Result

router = APIRouter(prefix="/team-members", tags=["Team Members"])


@router.post("/create", status_code=status.HTTP_200_OK, response_model=CreateTeamMemberResponse)
async def create_team_member(
    request: CreateTeamMemberCommand,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("CreateTeamMember", request, claims, uow)


@router.post("/update", status_code=status.HTTP_200_OK, response_model=UpdateTeamMemberResponse)
async def update_team_member(
    request: UpdateTeamMemberCommand,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("UpdateTeamMember", request, claims, uow)


@router.post("/delete", status_code=status.HTTP_200_OK, response_model=DeleteTeamMemberResponse)
async def delete_team_member(
    request: DeleteTeamMemberCommand,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("DeleteTeamMember", request, claims, uow)


@router.post("/get-by-id", status_code=status.HTTP_200_OK, response_model=GetTeamMemberResponse)
async def get_team_member_by_id(
    request: GetTeamMemberByIdQuery,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("GetTeamMemberById", request, claims, uow)


@router.post(
    "/get-by-project", status_code=status.HTTP_200_OK, response_model=GetTeamMembersResponse
)
async def get_team_members_by_project(
    request: GetTeamMemberByProjectQuery,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("GetTeamMemberByProject", request, claims, uow)


@router.post("/get-by-task", status_code=status.HTTP_200_OK, response_model=GetTaskMembersResponse)
async def get_team_members_by_task(
    request: GetTeamMemberByTaskQuery,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    """Members actively assigned to the task, each with its task_hours"""
    return await gateway.dispatch("GetTeamMemberByTask", request, claims, uow)


@router.post("/add-to-task", status_code=status.HTTP_200_OK, response_model=TaskMemberResponse)
async def add_team_member_to_task(
    request: TaskMemberCommand,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    """
    Add Team Member to Task - requires projrw

    Inserts the association, or revives a removed one with hours reset to 0.
    """
    return await gateway.dispatch("AddTeamMemberToTask", request, claims, uow)


@router.post("/remove-from-task", status_code=status.HTTP_200_OK, response_model=TaskMemberResponse)
async def remove_team_member_from_task(
    request: TaskMemberCommand,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("RemoveTeamMemberFromTask", request, claims, uow)


@router.post("/add-task-hours", status_code=status.HTTP_200_OK, response_model=TaskMemberResponse)
async def add_task_hours(
    request: AddTaskHoursCommand,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    return await gateway.dispatch("AddTaskHours", request, claims, uow)

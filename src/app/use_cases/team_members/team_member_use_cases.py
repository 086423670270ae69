"""
Team Member CRUD Use Cases
"""

from src.app.services.unit_of_work import UnitOfWork
from src.app.services.validation import check_email, check_member_name, first_error
from src.app.use_cases.common import not_found
from src.app.use_cases.views import TeamMemberView
from src.domain.entities import TeamMember
from src.libs.result import Result, Return

from .dtos import (
    CreateTeamMemberCommand,
    CreateTeamMemberResponse,
    DeleteTeamMemberCommand,
    DeleteTeamMemberResponse,
    GetTeamMemberByIdQuery,
    GetTeamMemberByProjectQuery,
    GetTeamMemberResponse,
    GetTeamMembersResponse,
    UpdateTeamMemberCommand,
    UpdateTeamMemberResponse,
)


class CreateTeamMemberUseCase:
    """
    Use case for adding a person to a project.

    Business Rules:
    - name and email are required, email must be well formed
    - the project must be live in the tenant
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: CreateTeamMemberCommand
    ) -> Result[CreateTeamMemberResponse]:
        error = first_error(check_member_name(command.name), check_email(command.email))
        if error:
            return Return.err(error)

        async with self.uow:
            if not await self.uow.projects.exists(command.project_id, command.tenant_id):
                return Return.err(not_found("project for team member not found"))

            member = TeamMember(
                tenant_id=command.tenant_id,
                project_id=command.project_id,
                name=command.name.strip(),
                project_role_id=command.project_role_id,
                email=command.email.strip(),
            )
            member = await self.uow.team_members.create(member)
            await self.uow.commit()

            return Return.ok(
                CreateTeamMemberResponse(member_id=member.member_id, version=member.version)
            )


class UpdateTeamMemberUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: UpdateTeamMemberCommand
    ) -> Result[UpdateTeamMemberResponse]:
        error = first_error(check_member_name(command.name), check_email(command.email))
        if error:
            return Return.err(error)

        async with self.uow:
            updated = await self.uow.team_members.update(
                command.member_id,
                command.tenant_id,
                command.version,
                {
                    "name": command.name.strip(),
                    "project_role_id": command.project_role_id,
                    "email": command.email.strip(),
                },
            )
            if updated != 1:
                return Return.err(not_found())

            await self.uow.commit()
            return Return.ok(UpdateTeamMemberResponse(version=command.version + 1))


class DeleteTeamMemberUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: DeleteTeamMemberCommand
    ) -> Result[DeleteTeamMemberResponse]:
        async with self.uow:
            deleted = await self.uow.team_members.delete(
                command.member_id, command.tenant_id, command.version
            )
            if deleted != 1:
                return Return.err(not_found())

            await self.uow.commit()
            return Return.ok(DeleteTeamMemberResponse(version=command.version + 1))


class GetTeamMemberByIdUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: GetTeamMemberByIdQuery) -> Result[GetTeamMemberResponse]:
        async with self.uow:
            row = await self.uow.team_members.get_by_id(query.member_id, query.tenant_id)
            if row is None:
                return Return.err(not_found())
            return Return.ok(GetTeamMemberResponse(team_member=TeamMemberView.from_row(*row)))


class GetTeamMemberByProjectUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, query: GetTeamMemberByProjectQuery
    ) -> Result[GetTeamMembersResponse]:
        async with self.uow:
            rows = await self.uow.team_members.list_by_project(
                query.project_id, query.tenant_id
            )
            return Return.ok(
                GetTeamMembersResponse(
                    team_members=[TeamMemberView.from_row(*row) for row in rows]
                )
            )

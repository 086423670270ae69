"""
ProjectRoleType Use Cases

Tenant catalog with caller-assigned ids. A duplicate project_role_id is not
pre-checked; the unique constraint rejects it when the insert is flushed.
"""

from src.app.services.unit_of_work import UnitOfWork
from src.app.services.validation import check_description, check_name, first_error
from src.app.use_cases.common import not_found
from src.app.use_cases.views import ProjectRoleTypeView
from src.domain.entities import ProjectRoleType
from src.libs.result import Result, Return

from .dtos import (
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


class CreateProjectRoleTypeUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: CreateProjectRoleTypeCommand
    ) -> Result[CreateProjectRoleTypeResponse]:
        error = first_error(
            check_name(command.role_name, "role_name"),
            check_description(command.description),
        )
        if error:
            return Return.err(error)

        async with self.uow:
            role_type = ProjectRoleType(
                tenant_id=command.tenant_id,
                project_role_id=command.project_role_id,
                role_name=command.role_name,
                description=command.description.strip(),
            )
            role_type = await self.uow.role_types.create(role_type)
            await self.uow.commit()

            return Return.ok(
                CreateProjectRoleTypeResponse(
                    project_role_id=role_type.project_role_id, version=role_type.version
                )
            )


class UpdateProjectRoleTypeUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: UpdateProjectRoleTypeCommand
    ) -> Result[UpdateProjectRoleTypeResponse]:
        error = first_error(
            check_name(command.role_name, "role_name"),
            check_description(command.description),
        )
        if error:
            return Return.err(error)

        async with self.uow:
            updated = await self.uow.role_types.update(
                command.project_role_id,
                command.tenant_id,
                command.version,
                {
                    "role_name": command.role_name,
                    "description": command.description.strip(),
                },
            )
            if updated != 1:
                return Return.err(not_found())

            await self.uow.commit()
            return Return.ok(UpdateProjectRoleTypeResponse(version=command.version + 1))


class DeleteProjectRoleTypeUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: DeleteProjectRoleTypeCommand
    ) -> Result[DeleteProjectRoleTypeResponse]:
        async with self.uow:
            deleted = await self.uow.role_types.delete(
                command.project_role_id, command.tenant_id, command.version
            )
            if deleted != 1:
                return Return.err(not_found())

            await self.uow.commit()
            return Return.ok(DeleteProjectRoleTypeResponse(version=command.version + 1))


class GetProjectRoleTypeUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: GetProjectRoleTypeQuery) -> Result[GetProjectRoleTypeResponse]:
        async with self.uow:
            role_type = await self.uow.role_types.get(query.project_role_id, query.tenant_id)
            if role_type is None:
                return Return.err(not_found())
            return Return.ok(
                GetProjectRoleTypeResponse(role_type=ProjectRoleTypeView.from_entity(role_type))
            )


class GetProjectRoleTypesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: GetProjectRoleTypesQuery) -> Result[GetProjectRoleTypesResponse]:
        async with self.uow:
            role_types = await self.uow.role_types.list_by_tenant(query.tenant_id)
            return Return.ok(
                GetProjectRoleTypesResponse(
                    role_types=[ProjectRoleTypeView.from_entity(r) for r in role_types]
                )
            )

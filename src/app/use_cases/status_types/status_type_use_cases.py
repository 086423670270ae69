"""
StatusType Use Cases

Tenant catalog with caller-assigned ids. A duplicate status_id is not
pre-checked; the unique constraint rejects it when the insert is flushed.
"""

from src.app.services.unit_of_work import UnitOfWork
from src.app.services.validation import check_description, check_name, first_error
from src.app.use_cases.common import not_found
from src.app.use_cases.views import StatusTypeView
from src.domain.entities import StatusType
from src.libs.result import Result, Return

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


class CreateStatusTypeUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: CreateStatusTypeCommand
    ) -> Result[CreateStatusTypeResponse]:
        error = first_error(
            check_name(command.status_name, "status_name"),
            check_description(command.description),
        )
        if error:
            return Return.err(error)

        async with self.uow:
            status_type = StatusType(
                tenant_id=command.tenant_id,
                status_id=command.status_id,
                status_name=command.status_name,
                description=command.description.strip(),
            )
            status_type = await self.uow.status_types.create(status_type)
            await self.uow.commit()

            return Return.ok(
                CreateStatusTypeResponse(
                    status_id=status_type.status_id, version=status_type.version
                )
            )


class UpdateStatusTypeUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: UpdateStatusTypeCommand
    ) -> Result[UpdateStatusTypeResponse]:
        error = first_error(
            check_name(command.status_name, "status_name"),
            check_description(command.description),
        )
        if error:
            return Return.err(error)

        async with self.uow:
            updated = await self.uow.status_types.update(
                command.status_id,
                command.tenant_id,
                command.version,
                {
                    "status_name": command.status_name,
                    "description": command.description.strip(),
                },
            )
            if updated != 1:
                return Return.err(not_found())

            await self.uow.commit()
            return Return.ok(UpdateStatusTypeResponse(version=command.version + 1))


class DeleteStatusTypeUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: DeleteStatusTypeCommand
    ) -> Result[DeleteStatusTypeResponse]:
        async with self.uow:
            deleted = await self.uow.status_types.delete(
                command.status_id, command.tenant_id, command.version
            )
            if deleted != 1:
                return Return.err(not_found())

            await self.uow.commit()
            return Return.ok(DeleteStatusTypeResponse(version=command.version + 1))


class GetStatusTypeUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: GetStatusTypeQuery) -> Result[GetStatusTypeResponse]:
        async with self.uow:
            status_type = await self.uow.status_types.get(query.status_id, query.tenant_id)
            if status_type is None:
                return Return.err(not_found())
            return Return.ok(
                GetStatusTypeResponse(status_type=StatusTypeView.from_entity(status_type))
            )


class GetStatusTypesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: GetStatusTypesQuery) -> Result[GetStatusTypesResponse]:
        async with self.uow:
            status_types = await self.uow.status_types.list_by_tenant(query.tenant_id)
            return Return.ok(
                GetStatusTypesResponse(
                    status_types=[StatusTypeView.from_entity(s) for s in status_types]
                )
            )

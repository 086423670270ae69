"""
Update / Delete Project Use Cases

Both are single conditional writes guarded by the caller's version.
"""

from src.app.services.unit_of_work import UnitOfWork
from src.app.services.validation import check_description, check_name, first_error
from src.app.use_cases.common import not_found
from src.libs.result import Result, Return

from .dtos import (
    DeleteProjectCommand,
    DeleteProjectResponse,
    UpdateProjectCommand,
    UpdateProjectResponse,
)


class UpdateProjectUseCase:
    """
    Use case for overwriting a project's fields.

    Business Rules:
    - same validation as create
    - succeeds only if the live row of this tenant still has the given version
    - a stale version and a missing project are both NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: UpdateProjectCommand) -> Result[UpdateProjectResponse]:
        error = first_error(
            check_name(command.name), check_description(command.description)
        )
        if error:
            return Return.err(error)

        async with self.uow:
            updated = await self.uow.projects.update(
                command.project_id,
                command.tenant_id,
                command.version,
                {
                    "name": command.name,
                    "description": command.description.strip(),
                    "status_id": command.status_id,
                    "start_date": command.start_date,
                    "end_date": command.end_date,
                },
            )
            if updated != 1:
                return Return.err(not_found())

            await self.uow.commit()
            return Return.ok(UpdateProjectResponse(version=command.version + 1))


class DeleteProjectUseCase:
    """Soft delete a project; tasks and members are left untouched"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: DeleteProjectCommand) -> Result[DeleteProjectResponse]:
        async with self.uow:
            deleted = await self.uow.projects.delete(
                command.project_id, command.tenant_id, command.version
            )
            if deleted != 1:
                return Return.err(not_found())

            await self.uow.commit()
            return Return.ok(DeleteProjectResponse(version=command.version + 1))

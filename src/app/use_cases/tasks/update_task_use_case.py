"""
Update / Delete Task Use Cases
"""

from src.app.services.unit_of_work import UnitOfWork
from src.app.services.validation import (
    check_description,
    check_name,
    check_position,
    check_priority,
    first_error,
)
from src.app.use_cases.common import not_found
from src.libs.result import Result, Return

from .dtos import DeleteTaskCommand, DeleteTaskResponse, UpdateTaskCommand, UpdateTaskResponse


class UpdateTaskUseCase:
    """
    Use case for overwriting a task's fields.

    Business Rules:
    - same validation as create
    - never moves a task to another parent or project
    - stale version or missing task is NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: UpdateTaskCommand) -> Result[UpdateTaskResponse]:
        error = first_error(
            check_name(command.name),
            check_description(command.description),
            check_priority(command.priority),
            check_position(command.position),
        )
        if error:
            return Return.err(error)

        async with self.uow:
            updated = await self.uow.tasks.update(
                command.task_id,
                command.tenant_id,
                command.version,
                {
                    "name": command.name,
                    "description": command.description.strip(),
                    "status_id": command.status_id,
                    "start_date": command.start_date,
                    "end_date": command.end_date,
                    "priority": command.priority,
                    "position": command.position,
                },
            )
            if updated != 1:
                return Return.err(not_found())

            await self.uow.commit()
            return Return.ok(UpdateTaskResponse(version=command.version + 1))


class DeleteTaskUseCase:
    """Soft delete one task; its children become orphans in the nested view"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: DeleteTaskCommand) -> Result[DeleteTaskResponse]:
        async with self.uow:
            deleted = await self.uow.tasks.delete(
                command.task_id, command.tenant_id, command.version
            )
            if deleted != 1:
                return Return.err(not_found())

            await self.uow.commit()
            return Return.ok(DeleteTaskResponse(version=command.version + 1))

"""
Create Task Use Case
"""

import logging

from src.app.services.unit_of_work import UnitOfWork
from src.app.services.validation import (
    check_description,
    check_name,
    check_position,
    check_priority,
    first_error,
)
from src.app.use_cases.common import not_found
from src.domain.entities import ROOT_PARENT_ID, Task
from src.libs.result import Result, Return

from .dtos import CreateTaskCommand, CreateTaskResponse

logger = logging.getLogger(__name__)


class CreateTaskUseCase:
    """
    Use case for adding a task to a project tree.

    Business Rules:
    - name slug, non-blank description, priority 1-9, position >= 1
    - the project must be live and belong to the tenant
    - a non-zero parent_id must name a live task of the same project
    - nothing is inserted when a reference does not resolve
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateTaskCommand) -> Result[CreateTaskResponse]:
        error = first_error(
            check_name(command.name),
            check_description(command.description),
            check_priority(command.priority),
            check_position(command.position),
        )
        if error:
            return Return.err(error)

        async with self.uow:
            if not await self.uow.projects.exists(command.project_id, command.tenant_id):
                return Return.err(not_found("project for task not found"))

            if command.parent_id != ROOT_PARENT_ID:
                parent_found = await self.uow.tasks.exists_in_project(
                    command.parent_id, command.project_id, command.tenant_id
                )
                if not parent_found:
                    return Return.err(not_found("parent task not found"))

            task = Task(
                tenant_id=command.tenant_id,
                project_id=command.project_id,
                name=command.name,
                description=command.description.strip(),
                status_id=command.status_id,
                start_date=command.start_date,
                end_date=command.end_date,
                priority=command.priority,
                parent_id=command.parent_id,
                position=command.position,
            )
            task = await self.uow.tasks.create(task)
            await self.uow.commit()

            logger.info(f"Task {task.task_id} created in project {task.project_id}")
            return Return.ok(CreateTaskResponse(task_id=task.task_id, version=task.version))

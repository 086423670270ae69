"""
Create Project Use Case
"""

from src.app.services.unit_of_work import UnitOfWork
from src.app.services.validation import check_description, check_name, first_error
from src.domain.entities import Project
from src.libs.result import Result, Return

from .dtos import CreateProjectCommand, CreateProjectResponse


class CreateProjectUseCase:
    """
    Use case for creating a project.

    Business Rules:
    - name must match the slug format, description must not be blank
    - names are not unique; creating a second "alpha" is allowed
    - a new project starts at version 1
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateProjectCommand) -> Result[CreateProjectResponse]:
        error = first_error(
            check_name(command.name), check_description(command.description)
        )
        if error:
            return Return.err(error)

        async with self.uow:
            project = Project(
                tenant_id=command.tenant_id,
                name=command.name,
                description=command.description.strip(),
                status_id=command.status_id,
                start_date=command.start_date,
                end_date=command.end_date,
            )
            project = await self.uow.projects.create(project)
            await self.uow.commit()

            return Return.ok(
                CreateProjectResponse(project_id=project.project_id, version=project.version)
            )

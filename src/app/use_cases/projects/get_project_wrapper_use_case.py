"""
Get Project Wrapper Use Case

Assembles the project, its team and its nested task tree.
"""

from typing import Optional

from src.app.repositories.project_repository import ProjectRow
from src.app.services.task_hierarchy import assemble_project_wrapper
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import not_found
from src.app.use_cases.views import ProjectView
from src.libs.result import Result, Return

from .dtos import GetProjectByIdQuery, GetProjectByNameQuery, GetProjectWrapperResponse


class GetProjectWrapperUseCase:
    """
    Use case for the nested project view.

    Business Rules:
    - the project is resolved by id or, for by-name queries, first live match
    - only tasks with parent_id 0 appear at top level
    - each task node carries its assigned members with their hours
    - the project carries every live team member
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: GetProjectByIdQuery) -> Result[GetProjectWrapperResponse]:
        async with self.uow:
            row = await self.uow.projects.get_by_id(query.project_id, query.tenant_id)
            return await self._assemble(row, query.tenant_id)

    async def execute_by_name(
        self, query: GetProjectByNameQuery
    ) -> Result[GetProjectWrapperResponse]:
        async with self.uow:
            row = await self.uow.projects.get_by_name(query.name, query.tenant_id)
            return await self._assemble(row, query.tenant_id)

    async def _assemble(
        self, row: Optional[ProjectRow], tenant_id: int
    ) -> Result[GetProjectWrapperResponse]:
        if row is None:
            return Return.err(not_found())

        project, status_name = row
        project_id = project.project_id
        task_rows = await self.uow.tasks.list_by_project(project_id, tenant_id)
        member_rows = await self.uow.team_members.list_by_project(project_id, tenant_id)
        assignments = await self.uow.task_assignments.list_by_project(project_id, tenant_id)

        wrapper = assemble_project_wrapper(
            ProjectView.from_row(project, status_name), task_rows, member_rows, assignments
        )
        return Return.ok(GetProjectWrapperResponse(project_wrapper=wrapper))

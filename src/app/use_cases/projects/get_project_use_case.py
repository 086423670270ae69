"""
Project read use cases: by id, by name, list and names.
"""

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import not_found
from src.app.use_cases.views import ProjectView
from src.libs.result import Result, Return

from .dtos import (
    GetProjectByIdQuery,
    GetProjectByNameQuery,
    GetProjectNamesResponse,
    GetProjectResponse,
    GetProjectsQuery,
    GetProjectsResponse,
)


class GetProjectByIdUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: GetProjectByIdQuery) -> Result[GetProjectResponse]:
        async with self.uow:
            row = await self.uow.projects.get_by_id(query.project_id, query.tenant_id)
            if row is None:
                return Return.err(not_found())
            return Return.ok(GetProjectResponse(project=ProjectView.from_row(*row)))


class GetProjectByNameUseCase:
    """Names are not unique; the oldest live match wins"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: GetProjectByNameQuery) -> Result[GetProjectResponse]:
        async with self.uow:
            row = await self.uow.projects.get_by_name(query.name, query.tenant_id)
            if row is None:
                return Return.err(not_found())
            return Return.ok(GetProjectResponse(project=ProjectView.from_row(*row)))


class GetProjectsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: GetProjectsQuery) -> Result[GetProjectsResponse]:
        async with self.uow:
            rows = await self.uow.projects.list_by_tenant(query.tenant_id)
            return Return.ok(
                GetProjectsResponse(projects=[ProjectView.from_row(*row) for row in rows])
            )


class GetProjectNamesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: GetProjectsQuery) -> Result[GetProjectNamesResponse]:
        async with self.uow:
            names = await self.uow.projects.get_names(query.tenant_id)
            return Return.ok(GetProjectNamesResponse(project_names=names))

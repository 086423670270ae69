"""
Task read use cases: flat by id, flat by project, and the nested wrapper.
"""

from src.app.services.task_hierarchy import assemble_forest
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import not_found
from src.app.use_cases.views import TaskView
from src.libs.result import Result, Return

from .dtos import (
    GetTaskByIdQuery,
    GetTaskResponse,
    GetTasksByProjectQuery,
    GetTasksByProjectResponse,
    GetTaskWrapperResponse,
)


class GetTaskByIdUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: GetTaskByIdQuery) -> Result[GetTaskResponse]:
        async with self.uow:
            row = await self.uow.tasks.get_by_id(query.task_id, query.tenant_id)
            if row is None:
                return Return.err(not_found())
            return Return.ok(GetTaskResponse(task=TaskView.from_row(*row)))


class GetTasksByProjectUseCase:
    """Flat list ordered by (parent_id, position)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, query: GetTasksByProjectQuery
    ) -> Result[GetTasksByProjectResponse]:
        async with self.uow:
            rows = await self.uow.tasks.list_by_project(query.project_id, query.tenant_id)
            return Return.ok(
                GetTasksByProjectResponse(tasks=[TaskView.from_row(*row) for row in rows])
            )


class GetTaskWrapperUseCase:
    """
    Use case for the subtree rooted at one task.

    Business Rules:
    - the task must be live in the tenant ("referenced task not found")
    - the whole project forest is assembled and the node for the task returned
    - an orphaned task is still returned with its own children
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: GetTaskByIdQuery) -> Result[GetTaskWrapperResponse]:
        async with self.uow:
            project_id = await self.uow.tasks.get_project_id(query.task_id, query.tenant_id)
            if project_id is None:
                return Return.err(not_found("referenced task not found"))

            task_rows = await self.uow.tasks.list_by_project(project_id, query.tenant_id)
            member_rows = await self.uow.team_members.list_by_project(
                project_id, query.tenant_id
            )
            assignments = await self.uow.task_assignments.list_by_project(
                project_id, query.tenant_id
            )

            forest = assemble_forest(task_rows, member_rows, assignments)
            node = forest.get(query.task_id)
            if node is None:
                return Return.err(not_found("referenced task not found"))
            return Return.ok(GetTaskWrapperResponse(task_wrapper=node))

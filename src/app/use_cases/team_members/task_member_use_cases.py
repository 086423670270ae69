"""
Task <-> Team Member Association Use Cases

Assignments are keyed by (project_id, task_id, member_id). The project is
always taken from the task, never from the caller.
"""

import logging

from src.app.services.unit_of_work import UnitOfWork
from src.app.services.validation import check_hours
from src.app.use_cases.common import not_found
from src.app.use_cases.views import TaskMemberView, TeamMemberView
from src.domain.entities import TaskAssignment
from src.libs.result import Result, Return

from .dtos import (
    AddTaskHoursCommand,
    GetTaskMembersResponse,
    GetTeamMemberByTaskQuery,
    TaskMemberCommand,
    TaskMemberResponse,
)

logger = logging.getLogger(__name__)

TASK_NOT_FOUND = "referenced task not found"
MEMBER_NOT_FOUND = "referenced member not found"


class AddTeamMemberToTaskUseCase:
    """
    Use case for assigning a member to a task.

    Business Rules:
    - task and member must each be live in the tenant
    - no association yet: insert one with zero hours at version 1
    - soft-deleted association: revive the same row with hours reset to zero
    - active association: NOT_FOUND, nothing changes
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: TaskMemberCommand) -> Result[TaskMemberResponse]:
        async with self.uow:
            project_id = await self.uow.tasks.get_project_id(
                command.task_id, command.tenant_id
            )
            if project_id is None:
                return Return.err(not_found(TASK_NOT_FOUND))

            if not await self.uow.team_members.exists(command.member_id, command.tenant_id):
                return Return.err(not_found(MEMBER_NOT_FOUND))

            existing = await self.uow.task_assignments.get(
                project_id, command.task_id, command.member_id, command.tenant_id
            )
            if existing is None:
                await self.uow.task_assignments.create(
                    TaskAssignment(
                        tenant_id=command.tenant_id,
                        project_id=project_id,
                        task_id=command.task_id,
                        member_id=command.member_id,
                    )
                )
            elif existing.is_deleted:
                revived = await self.uow.task_assignments.revive(
                    project_id, command.task_id, command.member_id, command.tenant_id
                )
                if revived != 1:
                    return Return.err(not_found())
                logger.info(
                    f"Revived assignment of member {command.member_id} "
                    f"to task {command.task_id}"
                )
            else:
                return Return.err(not_found("team member already assigned to task"))

            await self.uow.commit()
            return Return.ok(TaskMemberResponse())


class RemoveTeamMemberFromTaskUseCase:
    """Soft delete the active association and zero its hours"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: TaskMemberCommand) -> Result[TaskMemberResponse]:
        async with self.uow:
            project_id = await self.uow.tasks.get_project_id(
                command.task_id, command.tenant_id
            )
            if project_id is None:
                return Return.err(not_found(TASK_NOT_FOUND))

            removed = await self.uow.task_assignments.remove(
                project_id, command.task_id, command.member_id, command.tenant_id
            )
            if removed != 1:
                return Return.err(not_found())

            await self.uow.commit()
            return Return.ok(TaskMemberResponse())


class AddTaskHoursUseCase:
    """
    Use case for booking hours on an assignment.

    Business Rules:
    - hours must not be negative
    - hours are added to the active association's running total
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: AddTaskHoursCommand) -> Result[TaskMemberResponse]:
        error = check_hours(command.task_hours)
        if error:
            return Return.err(error)

        async with self.uow:
            project_id = await self.uow.tasks.get_project_id(
                command.task_id, command.tenant_id
            )
            if project_id is None:
                return Return.err(not_found(TASK_NOT_FOUND))

            added = await self.uow.task_assignments.add_hours(
                project_id,
                command.task_id,
                command.member_id,
                command.tenant_id,
                command.task_hours,
            )
            if added != 1:
                return Return.err(not_found())

            await self.uow.commit()
            return Return.ok(TaskMemberResponse())


class GetTeamMemberByTaskUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, query: GetTeamMemberByTaskQuery
    ) -> Result[GetTaskMembersResponse]:
        async with self.uow:
            project_id = await self.uow.tasks.get_project_id(query.task_id, query.tenant_id)
            if project_id is None:
                return Return.err(not_found(TASK_NOT_FOUND))

            rows = await self.uow.team_members.list_by_task(
                query.task_id, project_id, query.tenant_id
            )
            members = [
                TaskMemberView(
                    **TeamMemberView.from_row(member, role_name).model_dump(),
                    task_hours=task_hours,
                )
                for member, role_name, task_hours in rows
            ]
            return Return.ok(GetTaskMembersResponse(team_members=members))

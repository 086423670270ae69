"""
Reorder Child Tasks Use Case

Rewrites the sibling positions under one parent task.
"""

import logging

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import not_found
from src.libs.result import Result, Return

from .dtos import ReorderChildTasksCommand, ReorderChildTasksResponse

logger = logging.getLogger(__name__)


class ReorderChildTasksUseCase:
    """
    Use case for ordering the children of a task.

    Business Rules:
    - the parent's version is checked and bumped first, as in UpdateTask
    - child_task_ids[i] gets position i + 1 and a version bump
    - each child write is scoped to (child, tenant, parent) on live rows
    - the first child that does not match aborts with NOT_FOUND
    - atomic=True: parent and child writes share one transaction and an
      abort rolls all of them back
    - atomic=False: every write is committed as soon as it is applied, so
      an abort leaves the parent bump and earlier children in place
    """

    def __init__(self, uow: UnitOfWork, atomic: bool = True):
        self.uow = uow
        self.atomic = atomic

    async def execute(
        self, command: ReorderChildTasksCommand
    ) -> Result[ReorderChildTasksResponse]:
        async with self.uow:
            bumped = await self.uow.tasks.bump_version(
                command.task_id, command.tenant_id, command.version
            )
            if bumped != 1:
                return Return.err(not_found())
            await self._checkpoint()

            for index, child_id in enumerate(command.child_task_ids):
                moved = await self.uow.tasks.set_child_position(
                    child_id, command.tenant_id, command.task_id, index + 1
                )
                if moved != 1:
                    logger.warning(
                        f"Reorder of task {command.task_id} stopped at child {child_id} "
                        f"({index} of {len(command.child_task_ids)} applied, "
                        f"atomic={self.atomic})"
                    )
                    return Return.err(not_found())
                await self._checkpoint()

            await self.uow.commit()
            return Return.ok(ReorderChildTasksResponse(version=command.version + 1))

    async def _checkpoint(self):
        if not self.atomic:
            await self.uow.commit()

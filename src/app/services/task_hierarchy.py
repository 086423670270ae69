"""
Task Hierarchy Assembler

Builds the nested wrapper view of a project's task tree from flat rows.
Pure functions: the caller fetches rows through the unit of work and hands
them in, so the assembly itself never touches storage.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from src.app.repositories.task_repository import TaskRow
from src.app.repositories.team_member_repository import TeamMemberRow
from src.app.use_cases.views import (
    ProjectView,
    ProjectWrapper,
    TaskMemberView,
    TaskView,
    TaskWrapper,
    TeamMemberView,
)
from src.domain.entities import ROOT_PARENT_ID, TaskAssignment

logger = logging.getLogger(__name__)


@dataclass
class TaskForest:
    """Assembled tree: root nodes in position order plus an index of every node"""

    roots: List[TaskWrapper]
    nodes: Dict[int, TaskWrapper]

    def get(self, task_id: int) -> Optional[TaskWrapper]:
        return self.nodes.get(task_id)


def assemble_forest(
    task_rows: Sequence[TaskRow],
    member_rows: Sequence[TeamMemberRow],
    assignments: Sequence[TaskAssignment],
) -> TaskForest:
    """
    Nest tasks under their parents and attach assigned members.

    Business Rules:
    - task_rows arrive ordered by (parent_id, position); children keep that order
    - a task whose parent is not in task_rows is dropped from the nested view
    - an assignment attaches a copy of the member carrying its own task_hours
    - assignments whose task or member does not resolve are ignored
    """
    nodes: Dict[int, TaskWrapper] = {}
    for task, status_name in task_rows:
        node = TaskWrapper(**TaskView.from_row(task, status_name).model_dump())
        nodes[node.task_id] = node

    roots: List[TaskWrapper] = []
    for node in nodes.values():
        if node.parent_id == ROOT_PARENT_ID:
            roots.append(node)
            continue
        parent = nodes.get(node.parent_id)
        if parent is None:
            logger.debug(
                f"Dropping task {node.task_id}: parent {node.parent_id} not in project"
            )
            continue
        parent.child_task_wrappers.append(node)

    members = {
        member.member_id: TeamMemberView.from_row(member, role_name)
        for member, role_name in member_rows
    }
    for assignment in assignments:
        node = nodes.get(assignment.task_id)
        member = members.get(assignment.member_id)
        if node is None or member is None:
            continue
        node.team_members.append(
            TaskMemberView(**member.model_dump(), task_hours=assignment.task_hours)
        )

    return TaskForest(roots=roots, nodes=nodes)


def assemble_project_wrapper(
    project_view: ProjectView,
    task_rows: Sequence[TaskRow],
    member_rows: Sequence[TeamMemberRow],
    assignments: Sequence[TaskAssignment],
) -> ProjectWrapper:
    """Project fields, the full team and only the root tasks at top level"""
    forest = assemble_forest(task_rows, member_rows, assignments)
    return ProjectWrapper(
        **project_view.model_dump(),
        team_members=[
            TeamMemberView.from_row(member, role_name) for member, role_name in member_rows
        ],
        task_wrappers=forest.roots,
    )


"""
Project Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import PermissionTier

# Export all entities
from .project import Project
from .status_type import StatusType
from .project_role_type import ProjectRoleType
from .task import ROOT_PARENT_ID, Task
from .team_member import TeamMember
from .task_assignment import TaskAssignment

__all__ = [
    # Enums
    "PermissionTier",
    # Entities
    "Project",
    "StatusType",
    "ProjectRoleType",
    "Task",
    "TeamMember",
    "TaskAssignment",
    # Constants
    "ROOT_PARENT_ID",
]

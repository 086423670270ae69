import pytest
from unittest.mock import AsyncMock, MagicMock

REPOSITORIES = {
    "projects": ["create", "get_by_id", "get_by_name", "list_by_tenant", "get_names", "exists", "update", "delete"],
    "status_types": ["create", "get", "list_by_tenant", "update", "delete"],
    "role_types": ["create", "get", "list_by_tenant", "update", "delete"],
    "tasks": [
        "create",
        "get_by_id",
        "get_project_id",
        "exists_in_project",
        "list_by_project",
        "bump_version",
        "set_child_position",
        "update",
        "delete",
    ],
    "team_members": ["create", "get_by_id", "exists", "list_by_project", "list_by_task", "update", "delete"],
    "task_assignments": ["get", "create", "revive", "remove", "add_hours", "list_by_project"],
}


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    for name, methods in REPOSITORIES.items():
        repository = MagicMock()
        for method in methods:
            setattr(repository, method, AsyncMock())
        setattr(uow, name, repository)

    return uow

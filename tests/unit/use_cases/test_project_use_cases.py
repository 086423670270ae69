from datetime import datetime

import pytest

from src.app.use_cases.projects import (
    CreateProjectCommand,
    CreateProjectUseCase,
    DeleteProjectCommand,
    DeleteProjectUseCase,
    GetProjectByIdQuery,
    GetProjectByIdUseCase,
    GetProjectByNameQuery,
    GetProjectByNameUseCase,
    GetProjectNamesUseCase,
    GetProjectsQuery,
    GetProjectsUseCase,
    UpdateProjectCommand,
    UpdateProjectUseCase,
)
from src.domain.entities import Project


def make_project(**overrides) -> Project:
    fields = dict(
        project_id=7,
        tenant_id=1,
        name="alpha",
        description="demo",
        status_id=1,
        start_date=datetime(2024, 1, 1),
        end_date=datetime(2024, 12, 31),
        version=1,
    )
    fields.update(overrides)
    return Project(**fields)


@pytest.mark.asyncio
async def test_create_project_returns_id_and_version_one(mock_uow):
    """Created project reports its generated id and version 1"""
    mock_uow.projects.create.side_effect = lambda project: make_project(
        name=project.name, description=project.description
    )

    command = CreateProjectCommand(
        tenant_id=1,
        name="alpha",
        description="demo",
        status_id=1,
        start_date=datetime(2024, 1, 1),
        end_date=datetime(2024, 12, 31),
    )
    result = await CreateProjectUseCase(mock_uow).execute(command)

    assert result.is_ok()
    assert result.value.project_id == 7
    assert result.value.version == 1
    created = mock_uow.projects.create.call_args.args[0]
    assert created.tenant_id == 1
    assert created.status_id == 1
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_project_trims_description(mock_uow):
    mock_uow.projects.create.side_effect = lambda project: make_project(
        name=project.name, description=project.description
    )

    result = await CreateProjectUseCase(mock_uow).execute(
        CreateProjectCommand(tenant_id=1, name="alpha", description="  demo  ")
    )

    assert result.is_ok()
    assert mock_uow.projects.create.call_args.args[0].description == "demo"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "name,description,message",
    [
        ("Alpha", "demo", "name invalid format"),
        ("", "demo", "name invalid format"),
        ("a" * 33, "demo", "name invalid format"),
        ("has space", "demo", "name invalid format"),
        ("alpha", "", "description missing"),
        ("alpha", "   ", "description missing"),
    ],
)
async def test_create_project_validation_never_touches_storage(
    mock_uow, name, description, message
):
    result = await CreateProjectUseCase(mock_uow).execute(
        CreateProjectCommand(tenant_id=1, name=name, description=description)
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_FAILED"
    assert result.error.message == message
    mock_uow.__aenter__.assert_not_called()
    mock_uow.projects.create.assert_not_called()


@pytest.mark.asyncio
async def test_update_project_bumps_version(mock_uow):
    mock_uow.projects.update.return_value = 1

    command = UpdateProjectCommand(
        tenant_id=1, project_id=7, version=3, name="beta", description="new", status_id=2
    )
    result = await UpdateProjectUseCase(mock_uow).execute(command)

    assert result.is_ok()
    assert result.value.version == 4
    args = mock_uow.projects.update.call_args.args
    assert args[:3] == (7, 1, 3)
    assert args[3]["name"] == "beta"
    assert args[3]["status_id"] == 2
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_update_project_stale_version_is_not_found(mock_uow):
    mock_uow.projects.update.return_value = 0

    command = UpdateProjectCommand(
        tenant_id=1, project_id=7, version=2, name="beta", description="new"
    )
    result = await UpdateProjectUseCase(mock_uow).execute(command)

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"
    assert result.error.message == "not found"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_delete_project(mock_uow):
    mock_uow.projects.delete.return_value = 1

    result = await DeleteProjectUseCase(mock_uow).execute(
        DeleteProjectCommand(tenant_id=1, project_id=7, version=1)
    )

    assert result.value.version == 2
    mock_uow.projects.delete.assert_called_once_with(7, 1, 1)


@pytest.mark.asyncio
async def test_delete_project_already_deleted(mock_uow):
    mock_uow.projects.delete.return_value = 0

    result = await DeleteProjectUseCase(mock_uow).execute(
        DeleteProjectCommand(tenant_id=1, project_id=7, version=2)
    )

    assert result.error.code == "NOT_FOUND"


@pytest.mark.asyncio
async def test_get_project_by_id_includes_status_name(mock_uow):
    mock_uow.projects.get_by_id.return_value = (make_project(), "open")

    result = await GetProjectByIdUseCase(mock_uow).execute(
        GetProjectByIdQuery(tenant_id=1, project_id=7)
    )

    project = result.value.project
    assert project.project_id == 7
    assert project.status_name == "open"
    assert project.start_date == datetime(2024, 1, 1)


@pytest.mark.asyncio
async def test_get_project_by_id_missing(mock_uow):
    mock_uow.projects.get_by_id.return_value = None

    result = await GetProjectByIdUseCase(mock_uow).execute(
        GetProjectByIdQuery(tenant_id=1, project_id=99)
    )

    assert result.error.code == "NOT_FOUND"


@pytest.mark.asyncio
async def test_get_project_by_name_without_status(mock_uow):
    mock_uow.projects.get_by_name.return_value = (make_project(status_id=0), None)

    result = await GetProjectByNameUseCase(mock_uow).execute(
        GetProjectByNameQuery(tenant_id=1, name="alpha")
    )

    assert result.value.project.name == "alpha"
    assert result.value.project.status_name is None
    mock_uow.projects.get_by_name.assert_called_once_with("alpha", 1)


@pytest.mark.asyncio
async def test_list_projects_and_names(mock_uow):
    mock_uow.projects.list_by_tenant.return_value = [
        (make_project(project_id=1, name="alpha"), "open"),
        (make_project(project_id=2, name="beta"), None),
    ]
    mock_uow.projects.get_names.return_value = ["alpha", "beta"]

    projects = await GetProjectsUseCase(mock_uow).execute(GetProjectsQuery(tenant_id=1))
    names = await GetProjectNamesUseCase(mock_uow).execute(GetProjectsQuery(tenant_id=1))

    assert [p.name for p in projects.value.projects] == ["alpha", "beta"]
    assert names.value.project_names == ["alpha", "beta"]

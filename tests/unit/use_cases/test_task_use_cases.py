import pytest

from src.app.use_cases.tasks import (
    CreateTaskCommand,
    CreateTaskUseCase,
    DeleteTaskCommand,
    DeleteTaskUseCase,
    GetTaskByIdQuery,
    GetTaskByIdUseCase,
    GetTaskWrapperUseCase,
    UpdateTaskCommand,
    UpdateTaskUseCase,
)
from src.domain.entities import Task


def make_task(task_id: int, parent_id: int = 0, position: int = 1, **overrides) -> Task:
    fields = dict(
        task_id=task_id,
        tenant_id=1,
        project_id=10,
        name=f"task-{task_id}",
        description="work",
        status_id=1,
        priority=5,
        parent_id=parent_id,
        position=position,
        version=1,
    )
    fields.update(overrides)
    return Task(**fields)


def create_command(**overrides) -> CreateTaskCommand:
    fields = dict(tenant_id=1, project_id=10, name="design", description="Design it")
    fields.update(overrides)
    return CreateTaskCommand(**fields)


@pytest.mark.asyncio
async def test_create_root_task(mock_uow):
    mock_uow.projects.exists.return_value = True
    mock_uow.tasks.create.side_effect = lambda task: make_task(
        21, parent_id=task.parent_id, name=task.name
    )

    result = await CreateTaskUseCase(mock_uow).execute(create_command())

    assert result.value.task_id == 21
    assert result.value.version == 1
    mock_uow.projects.exists.assert_called_once_with(10, 1)
    mock_uow.tasks.exists_in_project.assert_not_called()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_task_in_missing_project(mock_uow):
    mock_uow.projects.exists.return_value = False

    result = await CreateTaskUseCase(mock_uow).execute(create_command(project_id=999))

    assert result.error.code == "NOT_FOUND"
    assert result.error.message == "project for task not found"
    mock_uow.tasks.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_create_task_parent_must_be_in_same_project(mock_uow):
    mock_uow.projects.exists.return_value = True
    mock_uow.tasks.exists_in_project.return_value = False

    result = await CreateTaskUseCase(mock_uow).execute(create_command(parent_id=55))

    assert result.error.message == "parent task not found"
    mock_uow.tasks.exists_in_project.assert_called_once_with(55, 10, 1)
    mock_uow.tasks.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_child_task(mock_uow):
    mock_uow.projects.exists.return_value = True
    mock_uow.tasks.exists_in_project.return_value = True
    mock_uow.tasks.create.side_effect = lambda task: make_task(22, parent_id=task.parent_id)

    result = await CreateTaskUseCase(mock_uow).execute(create_command(parent_id=21, position=2))

    assert result.is_ok()
    created = mock_uow.tasks.create.call_args.args[0]
    assert (created.parent_id, created.position) == (21, 2)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides,message",
    [
        ({"priority": 0}, "priority out of range"),
        ({"priority": 10}, "priority out of range"),
        ({"position": 0}, "position out of range"),
        ({"name": "Design"}, "name invalid format"),
        ({"description": ""}, "description missing"),
    ],
)
async def test_create_task_validation(mock_uow, overrides, message):
    result = await CreateTaskUseCase(mock_uow).execute(create_command(**overrides))

    assert result.error.code == "VALIDATION_FAILED"
    assert result.error.message == message
    mock_uow.projects.exists.assert_not_called()


@pytest.mark.asyncio
async def test_update_task_stale_version(mock_uow):
    """Stored version 4, caller sends 3"""
    mock_uow.tasks.update.return_value = 0

    result = await UpdateTaskUseCase(mock_uow).execute(
        UpdateTaskCommand(tenant_id=1, task_id=21, version=3, name="design", description="d")
    )

    assert result.error.code == "NOT_FOUND"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_update_task_does_not_touch_parent(mock_uow):
    mock_uow.tasks.update.return_value = 1

    result = await UpdateTaskUseCase(mock_uow).execute(
        UpdateTaskCommand(
            tenant_id=1, task_id=21, version=4, name="design", description="d", priority=2
        )
    )

    assert result.value.version == 5
    values = mock_uow.tasks.update.call_args.args[3]
    assert "parent_id" not in values
    assert "project_id" not in values
    assert values["priority"] == 2


@pytest.mark.asyncio
async def test_delete_task(mock_uow):
    mock_uow.tasks.delete.return_value = 1

    result = await DeleteTaskUseCase(mock_uow).execute(
        DeleteTaskCommand(tenant_id=1, task_id=21, version=2)
    )

    assert result.value.version == 3


@pytest.mark.asyncio
async def test_get_task_by_id(mock_uow):
    mock_uow.tasks.get_by_id.return_value = (make_task(21), "open")

    result = await GetTaskByIdUseCase(mock_uow).execute(GetTaskByIdQuery(tenant_id=1, task_id=21))

    assert result.value.task.task_id == 21
    assert result.value.task.status_name == "open"


@pytest.mark.asyncio
async def test_get_task_wrapper_returns_subtree(mock_uow):
    mock_uow.tasks.get_project_id.return_value = 10
    mock_uow.tasks.list_by_project.return_value = [
        (make_task(1), None),
        (make_task(2, parent_id=1, position=1), None),
        (make_task(3, parent_id=2, position=1), None),
    ]
    mock_uow.team_members.list_by_project.return_value = []
    mock_uow.task_assignments.list_by_project.return_value = []

    result = await GetTaskWrapperUseCase(mock_uow).execute(GetTaskByIdQuery(tenant_id=1, task_id=2))

    wrapper = result.value.task_wrapper
    assert wrapper.task_id == 2
    assert [c.task_id for c in wrapper.child_task_wrappers] == [3]


@pytest.mark.asyncio
async def test_get_task_wrapper_unknown_task(mock_uow):
    mock_uow.tasks.get_project_id.return_value = None

    result = await GetTaskWrapperUseCase(mock_uow).execute(GetTaskByIdQuery(tenant_id=1, task_id=2))

    assert result.error.message == "referenced task not found"
    mock_uow.tasks.list_by_project.assert_not_called()

import pytest
from httpx import AsyncClient

from tests.utils.api import call, call_ok


async def _family(client, auth, test_data, children: int = 3):
    """Project with a root task and `children` direct children at positions 1..n"""
    admin = auth("projadmin")
    project = await call_ok(client, "/projects/create", test_data.payload("project_alpha"), admin)
    root = await call_ok(
        client,
        "/tasks/create",
        test_data.payload("task_design", project_id=project["project_id"], name="root"),
        admin,
    )
    child_ids = []
    for index in range(children):
        child = await call_ok(
            client,
            "/tasks/create",
            test_data.payload(
                "task_design",
                project_id=project["project_id"],
                parent_id=root["task_id"],
                name=f"child_{index}",
                position=index + 1,
            ),
            admin,
        )
        child_ids.append(child["task_id"])
    return root["task_id"], child_ids


async def _task(client, auth, task_id):
    data = await call_ok(client, "/tasks/get-by-id", {"task_id": task_id}, auth("projro"))
    return data["task"]


@pytest.mark.asyncio
async def test_reorder_rewrites_positions(client: AsyncClient, auth, test_data):
    parent_id, (a, b, c) = await _family(client, auth, test_data)

    data = await call_ok(
        client,
        "/tasks/reorder-children",
        {"task_id": parent_id, "version": 1, "child_task_ids": [c, a, b]},
        auth("projrw"),
    )

    assert data["version"] == 2
    assert (await _task(client, auth, parent_id))["version"] == 2
    for task_id, position in [(c, 1), (a, 2), (b, 3)]:
        child = await _task(client, auth, task_id)
        assert child["position"] == position
        assert child["version"] == 2


@pytest.mark.asyncio
async def test_reorder_same_order_twice_only_bumps_versions(client: AsyncClient, auth, test_data):
    parent_id, children = await _family(client, auth, test_data)
    rw = auth("projrw")

    await call_ok(
        client, "/tasks/reorder-children", {"task_id": parent_id, "version": 1, "child_task_ids": children}, rw
    )
    again = await call_ok(
        client, "/tasks/reorder-children", {"task_id": parent_id, "version": 2, "child_task_ids": children}, rw
    )

    assert again["version"] == 3
    for index, task_id in enumerate(children):
        child = await _task(client, auth, task_id)
        assert child["position"] == index + 1
        assert child["version"] == 3


@pytest.mark.asyncio
async def test_reorder_with_stale_parent_version(client: AsyncClient, auth, test_data):
    parent_id, children = await _family(client, auth, test_data)

    data = await call(
        client,
        "/tasks/reorder-children",
        {"task_id": parent_id, "version": 5, "child_task_ids": children},
        auth("projrw"),
    )

    assert data["error_code"] == 404
    assert (await _task(client, auth, children[0]))["version"] == 1


@pytest.mark.asyncio
async def test_reorder_with_foreign_child_rolls_back(client: AsyncClient, auth, test_data):
    """A child of another parent aborts the whole reorder"""
    parent_id, (first, second) = await _family(client, auth, test_data, children=2)
    _, (stranger,) = await _family(client, auth, test_data, children=1)

    data = await call(
        client,
        "/tasks/reorder-children",
        {"task_id": parent_id, "version": 1, "child_task_ids": [second, stranger, first]},
        auth("projrw"),
    )

    assert data["error_code"] == 404
    assert (await _task(client, auth, parent_id))["version"] == 1
    moved = await _task(client, auth, second)
    assert (moved["position"], moved["version"]) == (2, 1)
    untouched = await _task(client, auth, first)
    assert (untouched["position"], untouched["version"]) == (1, 1)
    assert (await _task(client, auth, stranger))["version"] == 1


@pytest.mark.asyncio
async def test_non_atomic_reorder_keeps_applied_writes(
    non_atomic_client: AsyncClient, auth, test_data
):
    """Without atomic reorder, writes before the failing child stay committed"""
    client = non_atomic_client
    parent_id, (first, second) = await _family(client, auth, test_data, children=2)
    _, (stranger,) = await _family(client, auth, test_data, children=1)

    data = await call(
        client,
        "/tasks/reorder-children",
        {"task_id": parent_id, "version": 1, "child_task_ids": [second, stranger, first]},
        auth("projrw"),
    )

    assert data["error_code"] == 404
    assert (await _task(client, auth, parent_id))["version"] == 2
    moved = await _task(client, auth, second)
    assert (moved["position"], moved["version"]) == (1, 2)
    untouched = await _task(client, auth, first)
    assert (untouched["position"], untouched["version"]) == (1, 1)


@pytest.mark.asyncio
async def test_reorder_needs_read_write(client: AsyncClient, auth, test_data):
    parent_id, children = await _family(client, auth, test_data)

    data = await call(
        client,
        "/tasks/reorder-children",
        {"task_id": parent_id, "version": 1, "child_task_ids": children},
        auth("projro"),
    )

    assert data["error_code"] == 401
    assert (await _task(client, auth, parent_id))["version"] == 1

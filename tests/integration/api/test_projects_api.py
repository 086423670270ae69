from datetime import datetime

import pytest
from httpx import AsyncClient

from tests.utils.api import call, call_ok
from tests.utils.json_compare import business_fields


@pytest.mark.asyncio
async def test_create_project_as_admin(client: AsyncClient, auth, test_data):
    """Create "alpha" twice (names are not unique), then reject a blank description"""
    headers = auth("projadmin")

    first = await call_ok(client, "/projects/create", test_data.payload("project_alpha"), headers)
    second = await call_ok(client, "/projects/create", test_data.payload("project_alpha"), headers)
    blank = await call(
        client, "/projects/create", test_data.payload("project_alpha", description=""), headers
    )

    assert first["version"] == 1
    assert first["project_id"] > 0
    assert second["project_id"] != first["project_id"]
    assert blank["error_code"] == 510
    assert blank["error_message"] == "description missing"

    names = await call_ok(client, "/projects/names", {}, headers)
    assert names["project_names"] == ["alpha", "alpha"]


@pytest.mark.asyncio
async def test_get_project_joins_status_name(client: AsyncClient, auth, test_data):
    headers = auth("projadmin")
    await call_ok(client, "/status-types/create", test_data.payload("status_open"), headers)
    created = await call_ok(client, "/projects/create", test_data.payload("project_alpha"), headers)

    data = await call_ok(
        client, "/projects/get-by-id", {"project_id": created["project_id"]}, auth("projro")
    )

    assert business_fields(data["project"]) == {
        "project_id": created["project_id"],
        "name": "alpha",
        "description": "demo",
        "status_id": 1,
        "status_name": "open",
        "start_date": "2024-01-01T00:00:00",
        "end_date": "2024-12-31T00:00:00",
    }
    assert data["project"]["version"] == 1
    assert data["project"]["tenant_id"] == 1


@pytest.mark.asyncio
async def test_status_name_is_null_without_catalog_row(client: AsyncClient, auth, test_data):
    headers = auth("projadmin")
    created = await call_ok(
        client, "/projects/create", test_data.payload("project_alpha", status_id=42), headers
    )

    data = await call_ok(client, "/projects/get-by-id", {"project_id": created["project_id"]}, headers)

    assert data["project"]["status_id"] == 42
    assert data["project"]["status_name"] is None


@pytest.mark.asyncio
async def test_update_versions_are_monotonic(client: AsyncClient, auth, test_data):
    headers = auth("projrw")
    created = await call_ok(
        client, "/projects/create", test_data.payload("project_alpha"), auth("projadmin")
    )
    project_id = created["project_id"]

    version = 1
    for name in ["beta", "gamma", "delta"]:
        body = test_data.payload("project_alpha", project_id=project_id, version=version, name=name)
        updated = await call_ok(client, "/projects/update", body, headers)
        assert updated["version"] == version + 1
        version = updated["version"]

    stale = await call(
        client,
        "/projects/update",
        test_data.payload("project_alpha", project_id=project_id, version=1, name="stale"),
        headers,
    )
    assert stale["error_code"] == 404
    assert stale["error_message"] == "not found"

    data = await call_ok(client, "/projects/get-by-id", {"project_id": project_id}, headers)
    assert data["project"]["name"] == "delta"
    assert data["project"]["version"] == 4


@pytest.mark.asyncio
async def test_deleted_project_disappears(client: AsyncClient, auth, test_data):
    admin = auth("projadmin")
    created = await call_ok(client, "/projects/create", test_data.payload("project_alpha"), admin)
    project_id = created["project_id"]

    deleted = await call_ok(
        client, "/projects/delete", {"project_id": project_id, "version": 1}, admin
    )
    assert deleted["version"] == 2

    by_id = await call(client, "/projects/get-by-id", {"project_id": project_id}, admin)
    by_name = await call(client, "/projects/get-by-name", {"name": "alpha"}, admin)
    listed = await call_ok(client, "/projects/list", {}, admin)
    update = await call(
        client,
        "/projects/update",
        test_data.payload("project_alpha", project_id=project_id, version=2),
        admin,
    )
    delete_again = await call(
        client, "/projects/delete", {"project_id": project_id, "version": 2}, admin
    )

    assert by_id["error_code"] == 404
    assert by_id["project"] is None
    assert by_name["error_code"] == 404
    assert listed["projects"] == []
    assert update["error_code"] == 404
    assert delete_again["error_code"] == 404


@pytest.mark.asyncio
async def test_get_by_name_returns_first_match(client: AsyncClient, auth, test_data):
    admin = auth("projadmin")
    first = await call_ok(client, "/projects/create", test_data.payload("project_alpha"), admin)
    await call_ok(
        client, "/projects/create", test_data.payload("project_alpha", description="later"), admin
    )

    data = await call_ok(client, "/projects/get-by-name", {"name": "alpha"}, admin)

    assert data["project"]["project_id"] == first["project_id"]
    assert data["project"]["description"] == "demo"


@pytest.mark.asyncio
async def test_validation_on_update(client: AsyncClient, auth, test_data):
    data = await call(
        client,
        "/projects/update",
        test_data.payload("project_alpha", project_id=1, version=1, name="Not A Slug"),
        auth("projrw"),
    )

    assert data["error_code"] == 510
    assert data["error_message"] == "name invalid format"


@pytest.mark.asyncio
async def test_timestamps_survive_create_and_update(client: AsyncClient, auth, test_data):
    admin = auth("projadmin")
    created = await call_ok(client, "/projects/create", test_data.payload("project_alpha"), admin)
    project_id = created["project_id"]
    before = (await call_ok(client, "/projects/get-by-id", {"project_id": project_id}, admin))["project"]

    await call_ok(
        client,
        "/projects/update",
        test_data.payload("project_alpha", project_id=project_id, version=1, name="beta"),
        admin,
    )
    after = (await call_ok(client, "/projects/get-by-id", {"project_id": project_id}, admin))["project"]

    assert before["created"] is not None
    assert after["created"] == before["created"]
    assert datetime.fromisoformat(after["modified"]) >= datetime.fromisoformat(before["modified"])
    assert after["start_date"] == "2024-01-01T00:00:00"
    assert after["end_date"] == "2024-12-31T00:00:00"

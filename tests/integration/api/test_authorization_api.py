from datetime import timedelta

import pytest
from httpx import AsyncClient

from tests.utils.api import call, call_ok


@pytest.mark.asyncio
async def test_missing_token_is_unauthorized(client: AsyncClient, test_data):
    data = await call(client, "/projects/create", test_data.payload("project_alpha"), {})

    assert data["error_code"] == 401
    assert data["error_message"] == "not authorized"
    assert data["project_id"] == 0


@pytest.mark.asyncio
async def test_garbage_token_is_unauthorized(client: AsyncClient):
    data = await call(client, "/projects/list", {}, {"Authorization": "Bearer not-a-jwt"})

    assert data["error_code"] == 401
    assert data["projects"] == []


@pytest.mark.asyncio
async def test_expired_token(client: AsyncClient, auth):
    headers = auth("projadmin", expires_delta=timedelta(minutes=-5))

    data = await call(client, "/projects/list", {}, headers)

    assert data["error_code"] == 498


@pytest.mark.asyncio
async def test_unknown_tier_is_unauthorized(client: AsyncClient, auth):
    data = await call(client, "/projects/list", {}, auth("superuser"))

    assert data["error_code"] == 401


@pytest.mark.asyncio
async def test_read_only_cannot_create(client: AsyncClient, auth, test_data):
    data = await call(client, "/projects/create", test_data.payload("project_alpha"), auth("projro"))
    names = await call_ok(client, "/projects/names", {}, auth("projro"))

    assert data["error_code"] == 401
    assert names["project_names"] == []


@pytest.mark.asyncio
async def test_read_write_cannot_delete_project(client: AsyncClient, auth, test_data):
    created = await call_ok(
        client, "/projects/create", test_data.payload("project_alpha"), auth("projadmin")
    )

    data = await call(
        client,
        "/projects/delete",
        {"project_id": created["project_id"], "version": 1},
        auth("projrw"),
    )

    assert data["error_code"] == 401
    still_there = await call_ok(
        client, "/projects/get-by-id", {"project_id": created["project_id"]}, auth("projro")
    )
    assert still_there["project"]["version"] == 1


@pytest.mark.asyncio
async def test_tenants_are_isolated(client: AsyncClient, auth, test_data):
    created = await call_ok(
        client, "/projects/create", test_data.payload("project_alpha"), auth("projadmin", 1)
    )
    other = auth("projadmin", 2)

    by_id = await call(client, "/projects/get-by-id", {"project_id": created["project_id"]}, other)
    listed = await call_ok(client, "/projects/list", {}, other)
    update = await call(
        client,
        "/projects/update",
        test_data.payload("project_alpha", project_id=created["project_id"], version=1, name="stolen"),
        other,
    )

    assert by_id["error_code"] == 404
    assert listed["projects"] == []
    assert update["error_code"] == 404


@pytest.mark.asyncio
async def test_caller_tenant_id_is_overwritten(client: AsyncClient, auth, test_data):
    created = await call_ok(
        client,
        "/projects/create",
        test_data.payload("project_alpha", tenant_id=2),
        auth("projadmin", 1),
    )

    mine = await call_ok(
        client, "/projects/get-by-id", {"project_id": created["project_id"], "tenant_id": 2}, auth("projro", 1)
    )
    theirs = await call_ok(client, "/projects/list", {}, auth("projro", 2))

    assert mine["project"]["tenant_id"] == 1
    assert theirs["projects"] == []


@pytest.mark.asyncio
async def test_server_version_without_token(client: AsyncClient):
    data = await call_ok(client, "/server/version", {}, {})

    assert data["server_version"] == "v0.9.2"
    assert data["server_uptime"] >= 0

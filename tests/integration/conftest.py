from datetime import timedelta

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlmodel import SQLModel

from config import ApplicationConfig
from src.api.app import create_app
from src.api.utils.jwt import generate_jwt
from tests.fixtures.json_loader import TestDataLoader

TEST_SECRET = "integration-test-secret"


def make_config(db_path, reorder_atomic: bool = True):
    class IntegrationConfig(ApplicationConfig):
        DB_URI = f"sqlite+aiosqlite:///{db_path}"
        API_PREFIX = "/api"
        CREATE_SCHEMA = False
        JWT_ALGORITHM = "HS256"
        JWT_SECRET = TEST_SECRET
        REORDER_ATOMIC = reorder_atomic

    return IntegrationConfig


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest.fixture
def auth():
    """Build Authorization headers for a tier and tenant"""

    def headers(tier: str = "projadmin", tenant_id: int = 1, expires_delta=timedelta(minutes=15)):
        token = generate_jwt(tenant_id, tier, TEST_SECRET, expires_delta=expires_delta)
        return {"Authorization": f"Bearer {token}"}

    return headers


async def _start(app):
    async with app.state.context.engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def _client(app):
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def app(tmp_path):
    app = create_app(make_config(tmp_path / "test.db"))
    await _start(app)
    yield app
    await app.state.context.engine.dispose()


@pytest_asyncio.fixture
async def non_atomic_app(tmp_path):
    app = create_app(make_config(tmp_path / "partial.db", reorder_atomic=False))
    await _start(app)
    yield app
    await app.state.context.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    async with await _client(app) as ac:
        yield ac


@pytest_asyncio.fixture
async def non_atomic_client(non_atomic_app):
    async with await _client(non_atomic_app) as ac:
        yield ac

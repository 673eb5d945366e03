import logging
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from groupchat.db.session import build_engine, get_db, init_models
from groupchat.main import app


@pytest.fixture
async def engine(tmp_path):
    test_engine = build_engine(f"sqlite+aiosqlite:///{tmp_path}/chat_test.sqlite")
    await init_models(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def logger():
    return logging.getLogger("groupchat.tests")


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    async def _register(username: str) -> dict:
        response = await client.post("/users", json={"username": username})
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def create_group(client):
    async def _create_group(name: str, owner_id: str) -> dict:
        response = await client.post("/groups", json={"name": name, "user_id": owner_id})
        assert response.status_code == 201, response.text
        return response.json()

    return _create_group

"""API test fixtures: the FastAPI app over an in-memory store, driven through httpx.

Invariants:
    - get_db yields sessions from the per-test SQLite engine
    - Uploaded images go to an in-memory FakeImageStore, never to disk
    - The process-wide view cache starts and ends every test empty
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_image_store
from app.infrastructure.database import get_db
from app.infrastructure.view_cache import view_cache
from app.main import app
from tests.services.fakes import FakeImageStore


@pytest.fixture
def api_image_store():
    return FakeImageStore()


@pytest.fixture
async def client(test_session_factory, api_image_store):
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_image_store] = lambda: api_image_store
    view_cache.clear()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    view_cache.clear()


@pytest.fixture
def create_category(client):
    async def _create(name: str) -> str:
        await client.post("/api/v1/categories", data={"categoryName": name})
        listing = (await client.get("/api/v1/categories")).json()
        return next(c["id"] for c in listing["categories"] if c["name"] == name)
    return _create


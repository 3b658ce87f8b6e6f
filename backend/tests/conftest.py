"""Root conftest: shared test configuration and the in-memory SQLite store."""

import os

import pytest

# Ensure tests never touch a real database or write logs as JSON
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("LOG_FORMAT", "text")

from app.db.base import Base  # noqa: E402
from app.db.session import create_engine_for_url, create_session_factory  # noqa: E402
import app.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_engine_for_url("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(test_engine)

"""Async Session Factory: DB engines and sessions for usage outside FastAPI.

Invariants:
    - SQLite engines always enforce foreign keys; DatabaseSessionManager builds
      its SQLite engines here too
    - In-memory SQLite uses a single shared connection, so every session sees
      the same database

Design Decisions:
    - Separate from infrastructure/database.py: scripts and test fixtures need a
      raw engine and session factory without the request-scoped manager
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite ignores FOREIGN KEY clauses unless asked per connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_engine_for_url(database_url: str) -> AsyncEngine:
    """Create an async engine; SQLite gets FK enforcement."""
    if not database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=False)
    if ":memory:" in database_url:
        engine = create_async_engine(
            database_url, echo=False, poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_async_engine(database_url, echo=False)
    enable_sqlite_foreign_keys(engine)
    return engine


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to engine."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )

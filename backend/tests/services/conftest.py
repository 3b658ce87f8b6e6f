"""Service test fixtures: async SQLite store, spies and fakes around the pipeline.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys on
    - Repositories are wrapped in SpyRepository so tests can assert store writes
    - Fan-out uses the default invalidation paths and a recording invalidator

Design Decisions:
    - SQLite in-memory: fast, no external dependency; the lower(name) unique index
      and FK RESTRICT behave as on PostgreSQL for what these tests exercise
"""

import pytest
from sqlalchemy import func, select

from app.config import DEFAULT_INVALIDATION_PATHS
from app.infrastructure.catalog_repository import (
    SqlCategoryRepository, SqlProductRepository,
)
from app.models.category import Category
from app.services.category_actions import CategoryActions
from app.services.invalidation_fanout import InvalidationFanout
from app.services.product_actions import ProductActions
from tests.services.fakes import FakeImageStore, RecordingInvalidator, SpyRepository


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def invalidator():
    return RecordingInvalidator()


@pytest.fixture
def fanout(invalidator):
    return InvalidationFanout(invalidator, DEFAULT_INVALIDATION_PATHS)


@pytest.fixture
def image_store():
    return FakeImageStore()


@pytest.fixture
def category_repo(test_db):
    return SpyRepository(SqlCategoryRepository(test_db))


@pytest.fixture
def product_repo(test_db):
    return SpyRepository(SqlProductRepository(test_db))


@pytest.fixture
def category_actions(category_repo, fanout):
    return CategoryActions(category_repo, fanout)


@pytest.fixture
def product_actions(product_repo, test_db, image_store, fanout):
    return ProductActions(
        product_repo, SqlCategoryRepository(test_db), image_store, fanout,
    )


@pytest.fixture
async def seed_category(test_db):
    """Insert a category named Snacks directly into the test DB."""
    category = Category(name="Snacks")
    test_db.add(category)
    await test_db.commit()
    return category


@pytest.fixture
def count_rows(test_db):
    async def _count(model) -> int:
        result = await test_db.execute(select(func.count()).select_from(model))
        return result.scalar_one()
    return _count

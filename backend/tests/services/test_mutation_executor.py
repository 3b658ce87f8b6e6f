"""Mutation Executor: store failures come back as the catalog's typed errors.

Invariants:
    - The store's lower(name) index yields the same DuplicateNameError as the guard
    - A product pointing at a missing category yields a ValidationError on categoryId
    - Missing ids yield NotFoundError; delete never reaches the store for them
"""

from uuid import uuid4

import pytest

from app.core.domain_types import ResourceType
from app.core.errors import (
    DuplicateNameError, NotFoundError, ResourceInUseError, ValidationError,
)
from app.models.category import Category
from app.services.mutation_executor import MutationExecutor


@pytest.fixture
def category_executor(category_repo):
    return MutationExecutor(category_repo, ResourceType.CATEGORY, name_field="categoryName")


@pytest.fixture
def product_executor(product_repo):
    return MutationExecutor(
        product_repo, ResourceType.PRODUCT, name_field="name",
        reference_field="categoryId",
        reference_message="Selected category does not exist",
    )


def _product_fields(category_id):
    return {
        "name": "Dashboard",
        "description": "Admin dashboard",
        "category_id": category_id,
        "live_demo_link": None,
        "git_hub_link": None,
        "technologies": ["Svelte"],
        "addon": "UI",
        "image": "/uploads/products/x.png",
    }


async def test_create_returns_new_id(category_executor, category_repo):
    new_id = await category_executor.create({"name": "Drinks"})
    assert (await category_repo.inner.find_by_id(new_id)).name == "Drinks"


async def test_unique_index_maps_to_duplicate_name(
    category_executor, seed_category, count_rows,
):
    with pytest.raises(DuplicateNameError) as exc_info:
        await category_executor.create({"name": "SNACKS"})

    exc = exc_info.value
    assert exc.http_status == 409
    assert exc.message == "Category already exists."
    assert exc.field_errors == {"categoryName": 'Category "SNACKS" already exists.'}
    assert await count_rows(Category) == 1


async def test_update_into_taken_name_maps_to_duplicate_name(
    category_executor, seed_category,
):
    other_id = await category_executor.create({"name": "Drinks"})
    with pytest.raises(DuplicateNameError):
        await category_executor.update(other_id, {"name": "snacks"})


async def test_update_missing_record(category_executor):
    with pytest.raises(NotFoundError) as exc_info:
        await category_executor.update(uuid4(), {"name": "Tea"})
    assert exc_info.value.http_status == 404


async def test_delete_missing_record_skips_store_delete(category_executor, category_repo):
    with pytest.raises(NotFoundError):
        await category_executor.delete(uuid4())
    assert category_repo.writes == []


async def test_missing_category_reference_maps_to_validation_error(product_executor):
    with pytest.raises(ValidationError) as exc_info:
        await product_executor.create(_product_fields(uuid4()))
    assert exc_info.value.field_errors == {
        "categoryId": "Selected category does not exist",
    }


async def test_referenced_category_delete_maps_to_in_use(
    category_executor, product_executor, seed_category,
):
    await product_executor.create(_product_fields(seed_category.id))
    with pytest.raises(ResourceInUseError) as exc_info:
        await category_executor.delete(seed_category.id)
    assert exc_info.value.http_status == 409
    assert exc_info.value.code == "RESOURCE_IN_USE"


async def test_unrelated_failures_propagate():
    class ExplodingRepository:
        async def create(self, fields):
            raise ConnectionError("connection reset")

    executor = MutationExecutor(
        ExplodingRepository(), ResourceType.CATEGORY, name_field="categoryName",
    )
    with pytest.raises(ConnectionError):
        await executor.create({"name": "Drinks"})

"""Product Actions: add/update/delete entry points for the product mutation pipeline.

Invariants:
    - Steps run strictly in order: validate → category link check → image
      upload → write → invalidate
    - categoryId must reference a live category; otherwise 400 on categoryId
      and nothing is written or uploaded
    - On update the image is optional; without one the stored image is kept
    - Product names are not unique, so there is no duplicate check
    - Every entry point returns an ActionResult, never raises

Design Decisions:
    - Update confirms the product exists before uploading a replacement image:
      a 404 must not leave an orphaned file behind
    - A saved image is deleted again when the write referencing it fails, so
      no failure path leaves an orphaned file in the image store
"""

import logging
from collections.abc import Mapping
from contextlib import asynccontextmanager
from typing import Any
from uuid import UUID

from app.core.action_result import ActionResult, STATUS_CREATED
from app.core.domain_types import Operation, ResourceType
from app.core.errors import ErrorContext, NotFoundError, ValidationError
from app.core.repository_protocols import ImageStore, ResourceRepository
from app.schemas.product import ProductForm, validate_product_form
from app.schemas.validation import Invalid
from app.services.action_boundary import parse_resource_id, run_action
from app.services.invalidation_fanout import InvalidationFanout
from app.services.mutation_executor import MutationExecutor

CATEGORY_FIELD = "categoryId"
MISSING_CATEGORY = "Selected category does not exist"

logger = logging.getLogger(__name__)


class ProductActions:
    """Product mutation entry points bound to stores, image storage and fan-out."""

    def __init__(
        self,
        repository: ResourceRepository,
        categories: ResourceRepository,
        image_store: ImageStore,
        fanout: InvalidationFanout,
    ):
        self.repository = repository
        self.categories = categories
        self.image_store = image_store
        self.fanout = fanout
        self.executor = MutationExecutor(
            repository, ResourceType.PRODUCT, name_field="name",
            reference_field=CATEGORY_FIELD, reference_message=MISSING_CATEGORY,
        )

    async def add(
        self, prev_state: Any, form: Mapping[str, Any],
    ) -> ActionResult:
        result = await run_action(
            self._add(form),
            operation="addProduct", resource_type=ResourceType.PRODUCT,
        )
        return self._after_write(result)

    async def update(
        self, product_id: Any, prev_state: Any, form: Mapping[str, Any],
    ) -> ActionResult:
        result = await run_action(
            self._update(product_id, form),
            operation="updateProduct", resource_type=ResourceType.PRODUCT,
            resource_id=str(product_id),
        )
        return self._after_write(result)

    async def delete(self, product_id: Any) -> ActionResult:
        result = await run_action(
            self._delete(product_id),
            operation="deleteProduct", resource_type=ResourceType.PRODUCT,
            resource_id=str(product_id),
        )
        return self._after_write(result)

    # ─── Pipelines ───────────────────────────────────────────────

    async def _add(self, form: Mapping[str, Any]) -> ActionResult:
        data = _validated(form, is_create=True)
        await self._require_category(data.category_id)
        fields = data.to_fields()
        fields["image"] = await self.image_store.save(data.image)
        async with self._discard_image_on_failure(fields["image"]):
            await self.executor.create(fields)
        return ActionResult.success(
            "Product added successfully.", STATUS_CREATED,
        )

    async def _update(self, raw_id: Any, form: Mapping[str, Any]) -> ActionResult:
        product_id = parse_resource_id(raw_id, ResourceType.PRODUCT)
        data = _validated(form, is_create=False)
        await self._require_category(data.category_id)
        fields = data.to_fields()
        if data.image is not None:
            if await self.repository.find_by_id(product_id) is None:
                raise NotFoundError(
                    ResourceType.PRODUCT, str(product_id),
                    ErrorContext(operation=Operation.UPDATE.value),
                )
            fields["image"] = await self.image_store.save(data.image)
        async with self._discard_image_on_failure(fields.get("image")):
            await self.executor.update(product_id, fields)
        return ActionResult.success("Product updated successfully.")

    async def _delete(self, raw_id: Any) -> ActionResult:
        product_id = parse_resource_id(raw_id, ResourceType.PRODUCT)
        await self.executor.delete(product_id)
        return ActionResult.success("Product deleted successfully.")

    async def _require_category(self, category_id: UUID) -> None:
        if await self.categories.find_by_id(category_id) is None:
            raise ValidationError({CATEGORY_FIELD: MISSING_CATEGORY})

    @asynccontextmanager
    async def _discard_image_on_failure(self, location: str | None):
        """Remove a just-saved image if the write that references it fails."""
        try:
            yield
        except Exception:
            if location is not None:
                await self._discard_image(location)
            raise

    async def _discard_image(self, location: str) -> None:
        try:
            await self.image_store.delete(location)
        except Exception as e:
            logger.warning(
                f"Could not remove orphaned product image {location}: {e}",
                extra={"resource_type": ResourceType.PRODUCT.value},
            )

    def _after_write(self, result: ActionResult) -> ActionResult:
        if result.ok:
            self.fanout.invalidate(ResourceType.PRODUCT)
        return result


def _validated(form: Mapping[str, Any], *, is_create: bool) -> ProductForm:
    outcome = validate_product_form(dict(form), is_create=is_create)
    if isinstance(outcome, Invalid):
        raise ValidationError(outcome.errors)
    return outcome.data

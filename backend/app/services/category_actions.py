"""Category Actions: add/update/delete entry points for the category mutation pipeline.

Invariants:
    - Steps run strictly in order: validate → duplicate check → write → invalidate
    - A failed step stops the pipeline; no store write happens after a validation
      failure or a guard conflict
    - Invalidation runs only after a successful write and never changes the result
    - Every entry point returns an ActionResult, never raises

Design Decisions:
    - prev_state accepted and ignored: entry points mirror form-action signatures
      so a caller can thread the previous result through
    - Duplicate check excludes the category itself on update, so saving an
      unchanged name is not a conflict
"""

from collections.abc import Mapping
from typing import Any

from app.core.action_result import ActionResult, STATUS_CREATED
from app.core.domain_types import ResourceType
from app.core.errors import DuplicateNameError, ValidationError
from app.core.repository_protocols import ResourceRepository
from app.schemas.category import CategoryForm, validate_category_form
from app.schemas.validation import Invalid
from app.services.action_boundary import parse_resource_id, run_action
from app.services.invalidation_fanout import InvalidationFanout
from app.services.mutation_executor import MutationExecutor
from app.services.uniqueness_guard import check_duplicate

NAME_FIELD = "categoryName"


class CategoryActions:
    """Category mutation entry points bound to one store and one fan-out."""

    def __init__(
        self, repository: ResourceRepository, fanout: InvalidationFanout,
    ):
        self.repository = repository
        self.fanout = fanout
        self.executor = MutationExecutor(
            repository, ResourceType.CATEGORY, name_field=NAME_FIELD,
        )

    async def add(
        self, prev_state: Any, form: Mapping[str, Any],
    ) -> ActionResult:
        result = await run_action(
            self._add(form),
            operation="addCategory", resource_type=ResourceType.CATEGORY,
        )
        return self._after_write(result)

    async def update(
        self, category_id: Any, prev_state: Any, form: Mapping[str, Any],
    ) -> ActionResult:
        result = await run_action(
            self._update(category_id, form),
            operation="updateCategory", resource_type=ResourceType.CATEGORY,
            resource_id=str(category_id),
        )
        return self._after_write(result)

    async def delete(self, category_id: Any) -> ActionResult:
        result = await run_action(
            self._delete(category_id),
            operation="deleteCategory", resource_type=ResourceType.CATEGORY,
            resource_id=str(category_id),
        )
        return self._after_write(result)

    # ─── Pipelines ───────────────────────────────────────────────

    async def _add(self, form: Mapping[str, Any]) -> ActionResult:
        data = _validated(form)
        await self._reject_duplicate(data.category_name)
        await self.executor.create(data.to_fields())
        return ActionResult.success(
            "Category added successfully.", STATUS_CREATED,
        )

    async def _update(self, raw_id: Any, form: Mapping[str, Any]) -> ActionResult:
        category_id = parse_resource_id(raw_id, ResourceType.CATEGORY)
        data = _validated(form)
        await self._reject_duplicate(data.category_name, exclude_id=category_id)
        await self.executor.update(category_id, data.to_fields())
        return ActionResult.success("Category updated successfully.")

    async def _delete(self, raw_id: Any) -> ActionResult:
        category_id = parse_resource_id(raw_id, ResourceType.CATEGORY)
        await self.executor.delete(category_id)
        return ActionResult.success("Category deleted successfully.")

    async def _reject_duplicate(self, name: str, exclude_id=None) -> None:
        conflict = await check_duplicate(
            self.repository, ResourceType.CATEGORY, name, exclude_id,
        )
        if conflict:
            raise DuplicateNameError(conflict.resource_type, conflict.name, NAME_FIELD)

    def _after_write(self, result: ActionResult) -> ActionResult:
        if result.ok:
            self.fanout.invalidate(ResourceType.CATEGORY)
        return result


def _validated(form: Mapping[str, Any]) -> CategoryForm:
    outcome = validate_category_form(dict(form))
    if isinstance(outcome, Invalid):
        raise ValidationError(outcome.errors)
    return outcome.data

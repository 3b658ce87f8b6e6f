"""Mutation Executor: performs create/update/delete and translates store failures.

Invariants:
    - RecordNotFoundError → NotFoundError
    - UniqueViolationError → DuplicateNameError on name_field (same 409 as the guard)
    - ReferenceViolationError on create/update → ValidationError on reference_field;
      on delete → ResourceInUseError
    - delete() re-reads the resource first; a missing id never reaches store.delete
    - Other exceptions propagate untouched (the action boundary degrades them)

Design Decisions:
    - One executor class for every resource type, configured with the form field
      names its errors are reported under (ADR: store errors carry no UI names)
"""

import logging
from typing import Any
from uuid import UUID

from app.core.domain_types import Operation, ResourceType
from app.core.errors import (
    DuplicateNameError, ErrorContext, NotFoundError, RecordNotFoundError,
    ReferenceViolationError, ResourceInUseError, UniqueViolationError,
    ValidationError,
)
from app.core.repository_protocols import ResourceRepository

logger = logging.getLogger(__name__)


class MutationExecutor:
    """Writes one resource type through its repository."""

    def __init__(
        self,
        repository: ResourceRepository,
        resource_type: ResourceType,
        name_field: str,
        reference_field: str | None = None,
        reference_message: str = "The referenced record does not exist.",
    ):
        self.repository = repository
        self.resource_type = resource_type
        self.name_field = name_field
        self.reference_field = reference_field
        self.reference_message = reference_message

    async def create(self, fields: dict[str, Any]) -> UUID:
        try:
            resource = await self.repository.create(fields)
        except UniqueViolationError:
            raise self._duplicate(fields, Operation.CREATE)
        except ReferenceViolationError:
            raise self._broken_reference(Operation.CREATE)
        logger.info(
            f"{self.resource_type.label} created",
            extra={
                "operation": Operation.CREATE.value,
                "resource_type": self.resource_type.value,
                "resource_id": str(resource.id),
            },
        )
        return resource.id

    async def update(self, resource_id: UUID, fields: dict[str, Any]) -> None:
        try:
            await self.repository.update(resource_id, fields)
        except RecordNotFoundError:
            raise NotFoundError(
                self.resource_type, str(resource_id),
                ErrorContext(operation=Operation.UPDATE.value),
            )
        except UniqueViolationError:
            raise self._duplicate(fields, Operation.UPDATE, resource_id)
        except ReferenceViolationError:
            raise self._broken_reference(Operation.UPDATE, resource_id)
        logger.info(
            f"{self.resource_type.label} updated",
            extra={
                "operation": Operation.UPDATE.value,
                "resource_type": self.resource_type.value,
                "resource_id": str(resource_id),
            },
        )

    async def delete(self, resource_id: UUID) -> None:
        context = ErrorContext(operation=Operation.DELETE.value)
        if await self.repository.find_by_id(resource_id) is None:
            raise NotFoundError(self.resource_type, str(resource_id), context)
        try:
            await self.repository.delete(resource_id)
        except RecordNotFoundError:
            raise NotFoundError(self.resource_type, str(resource_id), context)
        except ReferenceViolationError:
            context.resource_type = self.resource_type.value
            context.resource_id = str(resource_id)
            raise ResourceInUseError(self.resource_type, str(resource_id), context)
        logger.info(
            f"{self.resource_type.label} deleted",
            extra={
                "operation": Operation.DELETE.value,
                "resource_type": self.resource_type.value,
                "resource_id": str(resource_id),
            },
        )

    def _duplicate(
        self, fields: dict[str, Any], operation: Operation,
        resource_id: UUID | None = None,
    ) -> DuplicateNameError:
        # Lost the race against a concurrent write of the same name
        logger.warning(
            f"Store rejected duplicate {self.resource_type.value} name",
            extra={
                "operation": operation.value,
                "resource_type": self.resource_type.value,
                "resource_id": str(resource_id) if resource_id else None,
            },
        )
        return DuplicateNameError(
            self.resource_type, fields["name"], self.name_field,
            ErrorContext(
                operation=operation.value,
                resource_type=self.resource_type.value,
                resource_id=str(resource_id) if resource_id else None,
            ),
        )

    def _broken_reference(
        self, operation: Operation, resource_id: UUID | None = None,
    ) -> ValidationError:
        field = self.reference_field or "general"
        return ValidationError(
            {field: self.reference_message},
            context=ErrorContext(
                operation=operation.value,
                resource_type=self.resource_type.value,
                resource_id=str(resource_id) if resource_id else None,
            ),
        )

"""Action Boundary: the single place where pipeline outcomes become ActionResults.

Invariants:
    - run_action() never raises; every exit is an ActionResult
    - CatalogError → its own status/message/fields
    - Any other exception → logged with operation and resource id, then degraded
      to UnexpectedError (500) without internal details
    - Malformed resource ids are rejected as 400 before any store access
"""

import logging
from collections.abc import Awaitable
from uuid import UUID

from app.core.action_result import ActionResult
from app.core.domain_types import ResourceType
from app.core.errors import CatalogError, ErrorContext, UnexpectedError, ValidationError

logger = logging.getLogger(__name__)


async def run_action(
    step: Awaitable[ActionResult],
    *,
    operation: str,
    resource_type: ResourceType,
    resource_id: str | None = None,
) -> ActionResult:
    """Await one action's pipeline and map whatever it raises."""
    extra = {
        "operation": operation,
        "resource_type": resource_type.value,
        "resource_id": resource_id,
    }
    try:
        return await step
    except CatalogError as exc:
        logger.info(
            f"[{operation}] {exc.code}: {exc.message}",
            extra={**extra, "error_code": exc.code},
        )
        return ActionResult.from_error(exc)
    except Exception as exc:
        logger.error(
            f"[{operation}] Unexpected error: {exc}",
            extra={**extra, "error_code": "UNEXPECTED_ERROR"},
            exc_info=True,
        )
        return ActionResult.from_error(UnexpectedError(
            operation,
            ErrorContext(
                resource_type=resource_type.value, resource_id=resource_id,
            ),
        ))


def parse_resource_id(raw_id: object, resource_type: ResourceType) -> UUID:
    """Parse a caller-supplied id or raise a 400 ValidationError."""
    if isinstance(raw_id, UUID):
        return raw_id
    try:
        return UUID(str(raw_id).strip())
    except ValueError:
        raise ValidationError(
            {"id": f"{resource_type.label} ID is required and must be a valid identifier."},
            message=f"Invalid {resource_type.value} ID.",
        )

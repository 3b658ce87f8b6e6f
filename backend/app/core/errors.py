"""Error Hierarchy: typed, categorized exceptions for every catalog failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every CatalogError carries a user-facing message and optional per-field messages
    - Store errors (StoreError) never reach the caller: the executor translates them
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CatalogError base: action boundary and FastAPI handler
      catch one type (ADR: uniform error shape)
    - Store failures are their own typed hierarchy instead of message matching on
      driver exceptions (ADR: no error-message matching)
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from app.core.domain_types import ResourceType


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    resource_type: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class CatalogError(Exception):
    """Base exception for all caller-visible catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        field_errors: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.field_errors = field_errors


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(CatalogError):
    """One or more form fields failed validation. User-correctable."""
    def __init__(
        self, field_errors: dict[str, str],
        message: str = "Invalid input data.",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400, field_errors,
        )


class NotFoundError(CatalogError):
    """Requested id does not resolve to a live resource."""
    def __init__(
        self, resource_type: ResourceType, resource_id: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type.value
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type.label} not found.",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
            {"id": f"The specified {resource_type.value} does not exist."},
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(CatalogError):
    """Write conflicts with existing state."""
    def __init__(
        self, message: str, field_errors: dict[str, str],
        code: str = "CONFLICT", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409, field_errors,
        )


class DuplicateNameError(ConflictError):
    """Another resource of the same type already uses this name."""
    def __init__(
        self, resource_type: ResourceType, name: str, field: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type.label} already exists.",
            {field: f'{resource_type.label} "{name}" already exists.'},
            "DUPLICATE_NAME", context,
        )
        self.resource_type = resource_type
        self.name = name


class ResourceInUseError(ConflictError):
    """Resource is still referenced by others and cannot be deleted."""
    def __init__(
        self, resource_type: ResourceType, resource_id: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type.label} is in use.",
            {"id": f"The {resource_type.value} is still referenced by other records."},
            "RESOURCE_IN_USE", context,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class UnexpectedError(CatalogError):
    """Anything else, including store connectivity failures."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            "An unexpected error occurred.",
            "UNEXPECTED_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
            {"general": "The operation could not be completed. Please try again later."},
        )
        self.operation = operation


# ─── Store Boundary Errors ──────────────────────────────────────

class StoreError(Exception):
    """Base for typed failures raised by resource store implementations."""


class RecordNotFoundError(StoreError):
    """No row matched the given id."""
    def __init__(self, resource_id: str):
        super().__init__(f"no record with id {resource_id}")
        self.resource_id = resource_id


class UniqueViolationError(StoreError):
    """A store-level unique constraint rejected the write."""
    def __init__(self, value: str):
        super().__init__(f"unique constraint violated for {value!r}")
        self.value = value


class ReferenceViolationError(StoreError):
    """A foreign key constraint rejected the write or delete."""
    def __init__(self, detail: str = ""):
        super().__init__(f"reference constraint violated {detail}".strip())

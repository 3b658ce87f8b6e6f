"""Action Result Protocol: the uniform response contract of every mutation entry point.

Invariants:
    - Shape is always {status, message[, error]}; error present only when non-empty
    - Status convention: 200 update/delete, 201 create, 400 validation,
      404 not found, 409 conflict, 500 unexpected
    - Built only at the action boundary; internal steps raise or return typed values

Design Decisions:
    - Frozen dataclass: results are values, never mutated after the boundary
    - from_error() reads status/message/fields off CatalogError so the error
      taxonomy is the single source of status codes
"""

from dataclasses import dataclass

from app.core.errors import CatalogError

STATUS_OK = 200
STATUS_CREATED = 201


@dataclass(frozen=True)
class ActionResult:
    """Outcome of one mutation action, ready for rendering by the caller."""
    status: int
    message: str
    error: dict[str, str] | None = None

    @property
    def ok(self) -> bool:
        return self.status < 400

    @classmethod
    def success(cls, message: str, status: int = STATUS_OK) -> "ActionResult":
        return cls(status=status, message=message)

    @classmethod
    def from_error(cls, exc: CatalogError) -> "ActionResult":
        return cls(
            status=exc.http_status,
            message=exc.message,
            error=dict(exc.field_errors) if exc.field_errors else None,
        )

    def to_dict(self) -> dict:
        data: dict = {"status": self.status, "message": self.message}
        if self.error:
            data["error"] = self.error
        return data

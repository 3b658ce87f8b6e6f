"""Uniqueness Guard: case-insensitive duplicate-name check before a write.

Invariants:
    - Compares names case-insensitively within one resource type
    - On update the resource's own id is excluded, so keeping a name never conflicts
    - Advisory only: the store's unique index is the final authority, and the
      executor maps its violation to the same DuplicateNameError

Design Decisions:
    - Returns a Conflict value instead of raising: the action decides how to
      surface it, keeping the guard testable without the error taxonomy
"""

from dataclasses import dataclass
from uuid import UUID

from app.core.domain_types import ResourceType
from app.core.repository_protocols import ResourceRepository


@dataclass(frozen=True)
class Conflict:
    """An existing resource already uses the requested name."""
    resource_type: ResourceType
    name: str
    existing_id: UUID


async def check_duplicate(
    repository: ResourceRepository,
    resource_type: ResourceType,
    name: str,
    exclude_id: UUID | None = None,
) -> Conflict | None:
    existing = await repository.find_by_name(
        name, case_insensitive=True, exclude_id=exclude_id,
    )
    if existing is None:
        return None
    return Conflict(resource_type=resource_type, name=name, existing_id=existing.id)

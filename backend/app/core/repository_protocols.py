"""Boundary Protocols: contracts between the mutation pipeline and its collaborators.

Invariants:
    - Services depend on these Protocols, never on SQLAlchemy directly
    - Store implementations raise StoreError subclasses (core/errors.py) for
      not-found and constraint failures; never generic exceptions with magic text
    - CacheInvalidator.invalidate is idempotent and safe on uncached paths

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass simple fakes
    - One repository instance per resource type: the type parameter of the
      store operations is bound at construction
"""

from typing import Any, Protocol
from uuid import UUID

from app.core.domain_types import ImageUpload


class ResourceLike(Protocol):
    """Structural contract for stored resources (Category, Product ORM rows)."""
    id: UUID
    name: str


class ResourceRepository(Protocol):
    """Resource store for one resource type, implemented by infrastructure."""
    async def find_by_name(
        self, name: str, case_insensitive: bool = True,
        exclude_id: UUID | None = None,
    ) -> ResourceLike | None: ...
    async def find_by_id(self, resource_id: UUID) -> ResourceLike | None: ...
    async def create(self, fields: dict[str, Any]) -> ResourceLike: ...
    async def update(
        self, resource_id: UUID, fields: dict[str, Any],
    ) -> ResourceLike: ...
    async def delete(self, resource_id: UUID) -> None: ...


class CacheInvalidator(Protocol):
    """Cached view collaborator: drops whatever is cached under a path."""
    def invalidate(self, path: str) -> None: ...


class ImageStore(Protocol):
    """Persists uploaded product images, addressed by their public location."""
    async def save(self, image: ImageUpload) -> str: ...
    async def delete(self, location: str) -> None: ...
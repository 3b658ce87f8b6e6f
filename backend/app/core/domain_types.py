"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - CategoryId, ProductId wrap UUIDs; never use bare UUID in domain logic
    - All valid states encoded as Enums; no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

CategoryId = NewType("CategoryId", UUID)
ProductId = NewType("ProductId", UUID)
ResourceId = CategoryId | ProductId


# ─── Enums ───────────────────────────────────────────────────────

class ResourceType(str, Enum):
    """Catalog resource kinds managed by the mutation pipeline."""
    CATEGORY = "category"
    PRODUCT = "product"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class PackageOption(str, Enum):
    """Add-on package a product is sold with. Exactly one per product."""
    FULL_STACK = "FullStack"
    BACKEND = "Backend"
    FRONTEND = "Frontend"
    UI = "UI"
    UX = "UX"


class Operation(str, Enum):
    """Mutation operations, used for logging context."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class ImageUpload:
    """Uploaded file as received from a form, decoupled from the web framework."""
    filename: str
    content_type: str
    content: bytes = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.content)

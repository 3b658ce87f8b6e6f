"""Category Schemas: form validation and response models for categories.

Invariants:
    - categoryName: sanitized, stripped, 1-100 chars
    - Missing categoryName is reported as "required", never as a type error
    - order: optional non-negative listing position; blank means "leave as is"
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from app.schemas.validation import Invalid, SanitizedStr, Validated, validate_form

MAX_CATEGORY_NAME = 100


class CategoryForm(BaseModel):
    """Add/update category form. Same rules for both operations."""
    model_config = ConfigDict(
        populate_by_name=True, validate_default=True, extra="ignore",
    )

    category_name: SanitizedStr = Field("", alias="categoryName")
    order: int | None = Field(None, ge=0)

    @field_validator("category_name")
    @classmethod
    def check_category_name(cls, v: str) -> str:
        if not v:
            raise PydanticCustomError(
                "required", "Category name is required.",
            )
        if len(v) > MAX_CATEGORY_NAME:
            raise PydanticCustomError(
                "too_long", "Category name must be less than 100 characters",
            )
        return v

    @field_validator("order", mode="before")
    @classmethod
    def blank_order_is_unset(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v

    def to_fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {"name": self.category_name}
        if self.order is not None:
            fields["order"] = self.order
        return fields


def validate_category_form(raw: dict) -> Validated[CategoryForm] | Invalid:
    return validate_form(CategoryForm, raw)


class CategoryResponse(BaseModel):
    """Category as listed in admin views."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    order: int
    created_at: datetime

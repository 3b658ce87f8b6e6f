"""Product Schemas: form validation and response models for products.

Invariants:
    - name: sanitized, 1-100 chars; description: sanitized, 1-1000 chars
    - categoryId parses as a UUID (existence is checked by the action, not here)
    - liveDemoLink/gitHubLink optional; when given must be http(s) URLs of at
      most 2000 chars, and gitHubLink must point at a github.com/<owner>/<repo> path
    - productTechs: at least one entry, every name 1-100 chars
    - Every length limit fits its column, so accepted input never fails at the store
    - productAddons: exactly one entry, name is a PackageOption
    - image: required on create, optional on update; jpeg/png/gif/webp/svg/bmp
      under 15 MB. A zero-byte upload counts as no upload.

Design Decisions:
    - Create/update differ only in image requirement: one base class with a
      ClassVar flag instead of two parallel schemas
    - All messages raised as PydanticCustomError so the text reaching the caller
      is exactly ours (no "Value error, " prefix)
    - Only http and https links are accepted; other URL schemes (ftp://, mailto:)
      are rejected as invalid links
    - Lengths count Unicode code points, not UTF-16 units, so 100 emoji
      fit a 100-char limit where a UTF-16 count would stop at 50
"""

import re
from datetime import datetime
from typing import Any, ClassVar
from uuid import UUID

import pydantic
from pydantic import (
    BaseModel, ConfigDict, Field, HttpUrl, TypeAdapter, field_validator,
)
from pydantic_core import PydanticCustomError

from app.core.domain_types import ImageUpload, PackageOption
from app.core.sanitize_input import sanitize_input
from app.schemas.validation import (
    Invalid, SanitizedStr, Validated, coerce_named_entries, validate_form,
)

MAX_PRODUCT_NAME = 100
MAX_DESCRIPTION = 1000
MAX_TECH_NAME = 100
MAX_LINK = 2000
MAX_IMAGE_SIZE = 15 * 1024 * 1024
VALID_IMAGE_TYPES = frozenset({
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
    "image/svg+xml",
    "image/bmp",
})
GITHUB_REPO_URL = re.compile(r"^https?://(www\.)?github\.com/[\w-]+/[\w-]+(/.*)?$")

ERROR_MESSAGES = {
    "required_name": "Product name is required",
    "name_too_long": "Product name must be less than 100 characters",
    "required_description": "Product description is required",
    "description_too_long": "Description must be less than 1000 characters",
    "required_category": "Category is required",
    "required_image": "Product image is required",
    "invalid_image": "Image must be a valid file (JPEG, PNG, GIF, WebP, SVG, BMP) under 15MB",
    "required_tech": "At least one technology is required",
    "invalid_tech": "Technology name is required",
    "tech_name_too_long": "Technology name must be less than 100 characters",
    "required_addon": "Exactly one addon is required",
    "invalid_addon": "Addon must be a valid package option (FullStack, Backend, Frontend, UI, UX)",
    "too_many_addons": "Only one addon is allowed",
    "invalid_live_demo_link": "Live demo link must be a valid URL",
    "live_demo_link_too_long": "Live demo link must be less than 2000 characters",
    "invalid_github_link": "GitHub link must be a valid GitHub repository URL (e.g., https://github.com/user/repo)",
    "github_link_too_long": "GitHub link must be less than 2000 characters",
}

_http_url = TypeAdapter(HttpUrl)


def _error(key: str) -> PydanticCustomError:
    return PydanticCustomError(key, ERROR_MESSAGES[key])


def _is_http_url(value: str) -> bool:
    try:
        _http_url.validate_python(value)
    except pydantic.ValidationError:
        return False
    return True


def _optional_link(value: Any) -> str | None:
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


class TechnologyEntry(BaseModel):
    model_config = ConfigDict(validate_default=True, extra="ignore")

    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v: Any) -> str:
        v = sanitize_input(v)
        if not v:
            raise _error("invalid_tech")
        if len(v) > MAX_TECH_NAME:
            raise _error("tech_name_too_long")
        return v


class AddonEntry(BaseModel):
    model_config = ConfigDict(validate_default=True, extra="ignore")

    name: PackageOption | None = None

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v: Any) -> PackageOption:
        try:
            return PackageOption(v.strip() if isinstance(v, str) else v)
        except ValueError:
            raise _error("invalid_addon")


class ProductForm(BaseModel):
    """Fields shared by add and update product forms."""
    model_config = ConfigDict(
        populate_by_name=True, validate_default=True, extra="ignore",
    )

    image_required: ClassVar[bool] = True

    name: SanitizedStr = ""
    description: SanitizedStr = ""
    category_id: UUID | None = Field(None, alias="categoryId")
    live_demo_link: str | None = Field(None, alias="liveDemoLink")
    git_hub_link: str | None = Field(None, alias="gitHubLink")
    product_techs: list[TechnologyEntry] = Field(
        default_factory=list, alias="productTechs",
    )
    product_addons: list[AddonEntry] = Field(
        default_factory=list, alias="productAddons",
    )
    image: ImageUpload | None = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        if not v:
            raise _error("required_name")
        if len(v) > MAX_PRODUCT_NAME:
            raise _error("name_too_long")
        return v

    @field_validator("description")
    @classmethod
    def check_description(cls, v: str) -> str:
        if not v:
            raise _error("required_description")
        if len(v) > MAX_DESCRIPTION:
            raise _error("description_too_long")
        return v

    @field_validator("category_id", mode="before")
    @classmethod
    def parse_category_id(cls, v: Any) -> UUID:
        if isinstance(v, UUID):
            return v
        try:
            return UUID(str(v).strip())
        except ValueError:
            raise _error("required_category")

    @field_validator("live_demo_link", mode="before")
    @classmethod
    def check_live_demo_link(cls, v: Any) -> str | None:
        link = _optional_link(v)
        if link is not None and len(link) > MAX_LINK:
            raise _error("live_demo_link_too_long")
        if link is not None and not _is_http_url(link):
            raise _error("invalid_live_demo_link")
        return link

    @field_validator("git_hub_link", mode="before")
    @classmethod
    def check_git_hub_link(cls, v: Any) -> str | None:
        link = _optional_link(v)
        if link is not None and len(link) > MAX_LINK:
            raise _error("github_link_too_long")
        if link is not None and not (
            _is_http_url(link) and GITHUB_REPO_URL.match(link)
        ):
            raise _error("invalid_github_link")
        return link

    @field_validator("product_techs", "product_addons", mode="before")
    @classmethod
    def coerce_entries(cls, v: Any) -> Any:
        return coerce_named_entries(v)

    @field_validator("product_techs")
    @classmethod
    def require_technology(cls, v: list[TechnologyEntry]) -> list[TechnologyEntry]:
        if not v:
            raise _error("required_tech")
        return v

    @field_validator("product_addons")
    @classmethod
    def require_single_addon(cls, v: list[AddonEntry]) -> list[AddonEntry]:
        if not v:
            raise _error("required_addon")
        if len(v) > 1:
            raise _error("too_many_addons")
        return v

    @field_validator("image", mode="plain")
    @classmethod
    def check_image(cls, v: Any) -> ImageUpload | None:
        if v is not None and not isinstance(v, ImageUpload):
            raise _error("invalid_image")
        if v is None or v.size == 0:
            if cls.image_required:
                raise _error("required_image")
            return None
        if v.content_type not in VALID_IMAGE_TYPES or v.size > MAX_IMAGE_SIZE:
            raise _error("invalid_image")
        return v

    def to_fields(self) -> dict[str, Any]:
        """Store fields for this product (image handled separately)."""
        return {
            "name": self.name,
            "description": self.description,
            "category_id": self.category_id,
            "live_demo_link": self.live_demo_link,
            "git_hub_link": self.git_hub_link,
            "technologies": [tech.name for tech in self.product_techs],
            "addon": self.product_addons[0].name.value,
        }


class ProductCreateForm(ProductForm):
    image_required: ClassVar[bool] = True


class ProductUpdateForm(ProductForm):
    image_required: ClassVar[bool] = False


def validate_product_form(
    raw: dict, *, is_create: bool,
) -> Validated[ProductForm] | Invalid:
    schema = ProductCreateForm if is_create else ProductUpdateForm
    return validate_form(schema, raw)


# ─── Responses ───────────────────────────────────────────────────

class NamedItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class ProductResponse(BaseModel):
    """Product with its technologies, addon and category."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str
    image: str | None
    category_id: UUID
    live_demo_link: str | None
    git_hub_link: str | None
    technologies: list[NamedItem]
    addons: list[NamedItem]
    category: NamedItem
    created_at: datetime
    updated_at: datetime

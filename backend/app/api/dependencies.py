"""API Dependencies: per-request wiring of actions to the store, cache and image storage.

Invariants:
    - Repositories are bound to the request's AsyncSession
    - Fan-out paths come from Settings.invalidation_paths
    - read_form() flattens multipart/urlencoded bodies into the flat field map the
      actions expect; repeated keys become lists, uploads become ImageUpload
"""

from typing import Any

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.datastructures import UploadFile

from app.config import get_settings
from app.core.domain_types import ImageUpload
from app.infrastructure.catalog_repository import (
    SqlCategoryRepository, SqlProductRepository,
)
from app.infrastructure.database import get_db
from app.infrastructure.image_store import LocalImageStore
from app.infrastructure.view_cache import ViewCache, get_view_cache
from app.services.category_actions import CategoryActions
from app.services.invalidation_fanout import InvalidationFanout
from app.services.product_actions import ProductActions


def get_fanout(cache: ViewCache = Depends(get_view_cache)) -> InvalidationFanout:
    return InvalidationFanout(cache, get_settings().invalidation_paths)


def get_image_store() -> LocalImageStore:
    settings = get_settings()
    return LocalImageStore(settings.upload_dir, settings.upload_url_prefix)


def get_category_actions(
    db: AsyncSession = Depends(get_db),
    fanout: InvalidationFanout = Depends(get_fanout),
) -> CategoryActions:
    return CategoryActions(SqlCategoryRepository(db), fanout)


def get_product_actions(
    db: AsyncSession = Depends(get_db),
    fanout: InvalidationFanout = Depends(get_fanout),
    image_store: LocalImageStore = Depends(get_image_store),
) -> ProductActions:
    return ProductActions(
        SqlProductRepository(db), SqlCategoryRepository(db), image_store, fanout,
    )


async def read_form(request: Request) -> dict[str, Any]:
    """Flatten the submitted form into {field: value | [values]}."""
    form = await request.form()
    fields: dict[str, Any] = {}
    for key in form.keys():
        values = [await _plain(v) for v in form.getlist(key)]
        fields[key] = values[0] if len(values) == 1 else values
    return fields


async def _plain(value: Any) -> Any:
    if isinstance(value, UploadFile):
        return ImageUpload(
            filename=value.filename or "",
            content_type=value.content_type or "application/octet-stream",
            content=await value.read(),
        )
    return value

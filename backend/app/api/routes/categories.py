"""Category Routes: form-submission endpoints and the cached admin category list.

Invariants:
    - Mutation endpoints return the ActionResult dict with status_code == result.status
    - GET list is served from the view cache under VIEW_PATH when present
    - Routes contain no business logic; CategoryActions owns the pipeline

Design Decisions:
    - Form bodies over JSON: endpoints mirror HTML form submissions one-to-one
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_category_actions, read_form
from app.core.action_result import ActionResult
from app.infrastructure.database import get_db
from app.infrastructure.view_cache import ViewCache, get_view_cache
from app.models.category import Category
from app.schemas.category import CategoryResponse
from app.services.category_actions import CategoryActions

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/categories", tags=["categories"])

VIEW_PATH = "/admin/categories"


def _respond(result: ActionResult) -> JSONResponse:
    return JSONResponse(status_code=result.status, content=result.to_dict())


@router.get("")
async def list_categories(
    db: AsyncSession = Depends(get_db),
    cache: ViewCache = Depends(get_view_cache),
):
    """All categories in listing order."""
    cached = cache.get(VIEW_PATH)
    if cached is not None:
        return JSONResponse(content=cached, headers={"X-Cache": "hit"})

    result = await db.execute(
        select(Category).order_by(Category.order, Category.name),
    )
    payload = {
        "categories": [
            CategoryResponse.model_validate(c).model_dump(mode="json")
            for c in result.scalars().all()
        ],
    }
    cache.set(VIEW_PATH, payload)
    return JSONResponse(content=payload, headers={"X-Cache": "miss"})


@router.post("")
async def add_category(
    form: dict = Depends(read_form),
    actions: CategoryActions = Depends(get_category_actions),
):
    """Create a category from form field categoryName."""
    return _respond(await actions.add(None, form))


@router.put("/{category_id}")
async def update_category(
    category_id: str,
    form: dict = Depends(read_form),
    actions: CategoryActions = Depends(get_category_actions),
):
    """Rename a category (and optionally reorder it)."""
    return _respond(await actions.update(category_id, None, form))


@router.delete("/{category_id}")
async def delete_category(
    category_id: str,
    actions: CategoryActions = Depends(get_category_actions),
):
    """Delete a category that no product references."""
    return _respond(await actions.delete(category_id))

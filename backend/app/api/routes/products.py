"""Product Routes: form-submission endpoints, product detail and the cached admin list.

Invariants:
    - Mutation endpoints return the ActionResult dict with status_code == result.status
    - GET list is served from the view cache under VIEW_PATH when present
    - GET detail raises NotFoundError (→ 404 via global handler) for unknown ids
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_product_actions, read_form
from app.core.action_result import ActionResult
from app.core.domain_types import ResourceType
from app.core.errors import NotFoundError
from app.infrastructure.database import get_db
from app.infrastructure.view_cache import ViewCache, get_view_cache
from app.models.product import Product
from app.schemas.product import ProductResponse
from app.services.product_actions import ProductActions

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/products", tags=["products"])

VIEW_PATH = "/admin/menu-items"


def _respond(result: ActionResult) -> JSONResponse:
    return JSONResponse(status_code=result.status, content=result.to_dict())


@router.get("")
async def list_products(
    db: AsyncSession = Depends(get_db),
    cache: ViewCache = Depends(get_view_cache),
):
    """All products, newest first."""
    cached = cache.get(VIEW_PATH)
    if cached is not None:
        return JSONResponse(content=cached, headers={"X-Cache": "hit"})

    result = await db.execute(
        select(Product).order_by(Product.created_at.desc()),
    )
    payload = {
        "products": [
            ProductResponse.model_validate(p).model_dump(mode="json")
            for p in result.scalars().all()
        ],
    }
    cache.set(VIEW_PATH, payload)
    return JSONResponse(content=payload, headers={"X-Cache": "miss"})


@router.get("/{product_id}")
async def get_product(product_id: UUID, db: AsyncSession = Depends(get_db)):
    """Product with technologies, addon and category."""
    result = await db.execute(select(Product).where(Product.id == product_id))
    product = result.scalar_one_or_none()
    if product is None:
        raise NotFoundError(ResourceType.PRODUCT, str(product_id))
    return ProductResponse.model_validate(product).model_dump(mode="json")


@router.post("")
async def add_product(
    form: dict = Depends(read_form),
    actions: ProductActions = Depends(get_product_actions),
):
    """Create a product. Image upload is required."""
    return _respond(await actions.add(None, form))


@router.put("/{product_id}")
async def update_product(
    product_id: str,
    form: dict = Depends(read_form),
    actions: ProductActions = Depends(get_product_actions),
):
    """Replace a product's fields. Image upload is optional."""
    return _respond(await actions.update(product_id, None, form))


@router.delete("/{product_id}")
async def delete_product(
    product_id: str,
    actions: ProductActions = Depends(get_product_actions),
):
    return _respond(await actions.delete(product_id))

"""Menu Route: public catalog view of categories with their products.

Invariants:
    - Categories in (order, name) order, products by name within each
    - Served from the view cache under VIEW_PATH; any category or product write
      invalidates it
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.infrastructure.database import get_db
from app.infrastructure.view_cache import ViewCache, get_view_cache
from app.models.category import Category

router = APIRouter(prefix="/api/v1/menu", tags=["menu"])

VIEW_PATH = "/menu"


@router.get("")
async def get_menu(
    db: AsyncSession = Depends(get_db),
    cache: ViewCache = Depends(get_view_cache),
):
    cached = cache.get(VIEW_PATH)
    if cached is not None:
        return JSONResponse(content=cached, headers={"X-Cache": "hit"})

    result = await db.execute(
        select(Category)
        .options(selectinload(Category.products))
        .order_by(Category.order, Category.name),
    )
    payload = {
        "categories": [
            {
                "id": str(c.id),
                "name": c.name,
                "order": c.order,
                "products": [
                    {
                        "id": str(p.id),
                        "name": p.name,
                        "description": p.description,
                        "image": p.image,
                        "technologies": [t.name for t in p.technologies],
                        "addon": p.addons[0].name if p.addons else None,
                    }
                    for p in sorted(c.products, key=lambda p: p.name)
                ],
            }
            for c in result.scalars().all()
        ],
    }
    cache.set(VIEW_PATH, payload)
    return JSONResponse(content=payload, headers={"X-Cache": "miss"})

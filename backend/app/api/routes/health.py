"""Health & Readiness Probes: liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the database is unreachable or the
      catalog tables are missing (migrations not applied)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from
      load balancer
    - db_manager read through the module at request time: it is assigned during
      lifespan startup, after this module is imported
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import func, select

import app.infrastructure.database as database
from app.core.errors import CatalogError
from app.models.category import Category

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "catalog-admin-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe: database reachable and catalog schema in place."""
    manager = database.db_manager
    if not manager or not await manager.health_check():
        return _not_ready("database_unavailable")
    if not await _schema_ready(manager):
        return _not_ready("schema_missing")
    return {
        "status": "ready",
        "checks": {"database": "healthy", "schema": "present"},
    }


async def _schema_ready(manager: database.DatabaseSessionManager) -> bool:
    try:
        async with manager.session() as db:
            await db.execute(select(func.count()).select_from(Category))
    except CatalogError as e:
        logger.warning(f"Catalog schema check failed: {e.message}")
        return False
    return True


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )

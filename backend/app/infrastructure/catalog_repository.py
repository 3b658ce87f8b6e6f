"""Catalog Repositories: SQLAlchemy implementations of the resource store boundary.

Invariants:
    - One repository per resource type, bound to a single AsyncSession
    - Every write commits on success and rolls back on IntegrityError
    - IntegrityError is translated to a typed StoreError by what the table can
      violate: category writes hit the lower(name) unique index, product writes
      hit the category FK, deletes hit inbound FKs
    - update/delete on a missing id raise RecordNotFoundError

Design Decisions:
    - Constraint identity comes from the table, not from the driver's message text
      (ADR: no string matching on errors)
    - Products replace their technology/addon children wholesale on update:
      delete-orphan cascade removes the old rows in the same flush
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import (
    RecordNotFoundError, ReferenceViolationError, StoreError,
    UniqueViolationError,
)
from app.models.category import Category
from app.models.product import Product, ProductAddon, ProductTech

logger = logging.getLogger(__name__)


class SqlResourceRepository:
    """Shared store operations; subclasses bind the model and field mapping."""

    model: type[Category] | type[Product]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_name(
        self, name: str, case_insensitive: bool = True,
        exclude_id: UUID | None = None,
    ):
        column = self.model.name
        if case_insensitive:
            query = select(self.model).where(
                func.lower(column) == func.lower(name),
            )
        else:
            query = select(self.model).where(column == name)
        if exclude_id is not None:
            query = query.where(self.model.id != exclude_id)
        result = await self.db.execute(query.limit(1))
        return result.scalars().first()

    async def find_by_id(self, resource_id: UUID):
        result = await self.db.execute(
            select(self.model).where(self.model.id == resource_id),
        )
        return result.scalar_one_or_none()

    async def create(self, fields: dict[str, Any]):
        row = self.model()
        self._apply(row, fields)
        self.db.add(row)
        await self._commit(fields)
        return row

    async def update(self, resource_id: UUID, fields: dict[str, Any]):
        row = await self.find_by_id(resource_id)
        if row is None:
            raise RecordNotFoundError(str(resource_id))
        self._apply(row, fields)
        await self._commit(fields)
        return row

    async def delete(self, resource_id: UUID) -> None:
        row = await self.find_by_id(resource_id)
        if row is None:
            raise RecordNotFoundError(str(resource_id))
        await self.db.delete(row)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Delete blocked by reference: {e}")
            raise ReferenceViolationError(f"on {self.model.__tablename__}")

    async def _commit(self, fields: dict[str, Any]) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Write rejected by constraint: {e}")
            raise self._write_violation(fields)

    def _apply(self, row, fields: dict[str, Any]) -> None:
        raise NotImplementedError

    def _write_violation(self, fields: dict[str, Any]) -> StoreError:
        raise NotImplementedError


class SqlCategoryRepository(SqlResourceRepository):
    """Category store. The only write constraint is the case-insensitive name index."""

    model = Category

    def _apply(self, row: Category, fields: dict[str, Any]) -> None:
        row.name = fields["name"]
        if "order" in fields:
            row.order = fields["order"]

    def _write_violation(self, fields: dict[str, Any]) -> StoreError:
        return UniqueViolationError(fields["name"])


class SqlProductRepository(SqlResourceRepository):
    """Product store. Writes can only violate the category FK."""

    model = Product

    def _apply(self, row: Product, fields: dict[str, Any]) -> None:
        row.name = fields["name"]
        row.description = fields["description"]
        row.category_id = fields["category_id"]
        row.live_demo_link = fields.get("live_demo_link")
        row.git_hub_link = fields.get("git_hub_link")
        if fields.get("image"):
            row.image = fields["image"]
        row.technologies = [
            ProductTech(name=name) for name in fields["technologies"]
        ]
        row.addons = [ProductAddon(name=fields["addon"])]

    def _write_violation(self, fields: dict[str, Any]) -> StoreError:
        return ReferenceViolationError(f"category_id={fields['category_id']}")

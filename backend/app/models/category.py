"""Category ORM: persists the top-level grouping of catalog products.

Invariants:
    - id is UUID primary key generated on insert, never reassigned
    - name is unique under case-insensitive comparison (index on lower(name))
    - A category referenced by products cannot be deleted (FK is RESTRICT)

Design Decisions:
    - Functional unique index on lower(name): the store-level backstop for the
      check-then-act duplicate guard, portable across PostgreSQL and SQLite
    - passive_deletes="all" on products: the ORM never nullifies child FKs, so
      the database's RESTRICT decides whether a delete may proceed
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, Index, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Category(Base):
    """Category entity: a uniquely named group of products."""
    __tablename__ = "categories"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    products: Mapped[list["Product"]] = relationship(
        "Product", back_populates="category", passive_deletes="all",
    )


Index("uq_categories_name_lower", func.lower(Category.name), unique=True)

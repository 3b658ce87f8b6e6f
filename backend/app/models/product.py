"""Product ORM: persists sellable catalog items with their technologies and addon.

Invariants:
    - Always belongs to a Category (category_id FK, RESTRICT on category delete)
    - technologies: one or more ProductTech rows; addons: exactly one ProductAddon
      row (enforced by form validation, not by the schema)
    - Deleting a product deletes its technologies and addons

Design Decisions:
    - Technologies/addons as child tables over JSON columns: queryable by name
    - selectin loading for children and category: product reads never lazy-load
      in async context
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Product(Base):
    """Product entity: an item listed under one category."""
    __tablename__ = "products"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    image: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    category_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False, index=True,
    )
    live_demo_link: Mapped[str | None] = mapped_column(
        String(2000), nullable=True,
    )
    git_hub_link: Mapped[str | None] = mapped_column(
        String(2000), nullable=True,
    )
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
    category: Mapped["Category"] = relationship(
        "Category", back_populates="products", lazy="selectin",
    )
    technologies: Mapped[list["ProductTech"]] = relationship(
        "ProductTech", back_populates="product",
        cascade="all, delete-orphan", lazy="selectin",
    )
    addons: Mapped[list["ProductAddon"]] = relationship(
        "ProductAddon", back_populates="product",
        cascade="all, delete-orphan", lazy="selectin",
    )


class ProductTech(Base):
    """Technology a product is built with."""
    __tablename__ = "product_techs"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    product_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    product: Mapped["Product"] = relationship(
        "Product", back_populates="technologies",
    )


class ProductAddon(Base):
    """Package option a product is sold as (see PackageOption)."""
    __tablename__ = "product_addons"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    product_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(20), nullable=False)

    product: Mapped["Product"] = relationship(
        "Product", back_populates="addons",
    )

"""Catalog schema: categories, products, product_techs, product_addons.

Revision ID: 001_catalog
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_catalog"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "categories",
        sa.Column("id", UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("order", sa.Integer, nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_categories")),
    )
    op.create_index(
        "uq_categories_name_lower", "categories",
        [sa.text("lower(name)")], unique=True,
    )

    op.create_table(
        "products",
        sa.Column("id", UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("image", sa.String(2000), nullable=True),
        sa.Column(
            "category_id", UUID(as_uuid=True),
            sa.ForeignKey(
                "categories.id", ondelete="RESTRICT",
                name="fk_products_category_id_categories",
            ),
            nullable=False,
        ),
        sa.Column("live_demo_link", sa.String(2000), nullable=True),
        sa.Column("git_hub_link", sa.String(2000), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_products")),
    )
    op.create_index("ix_products_category_id", "products", ["category_id"])

    op.create_table(
        "product_techs",
        sa.Column("id", UUID(as_uuid=True), nullable=False),
        sa.Column(
            "product_id", UUID(as_uuid=True),
            sa.ForeignKey(
                "products.id", ondelete="CASCADE",
                name="fk_product_techs_product_id_products",
            ),
            nullable=False,
        ),
        sa.Column("name", sa.String(100), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_product_techs")),
    )
    op.create_index("ix_product_techs_product_id", "product_techs", ["product_id"])

    op.create_table(
        "product_addons",
        sa.Column("id", UUID(as_uuid=True), nullable=False),
        sa.Column(
            "product_id", UUID(as_uuid=True),
            sa.ForeignKey(
                "products.id", ondelete="CASCADE",
                name="fk_product_addons_product_id_products",
            ),
            nullable=False,
        ),
        sa.Column("name", sa.String(20), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_product_addons")),
    )
    op.create_index("ix_product_addons_product_id", "product_addons", ["product_id"])


def downgrade() -> None:
    op.drop_index("ix_product_addons_product_id", table_name="product_addons")
    op.drop_table("product_addons")
    op.drop_index("ix_product_techs_product_id", table_name="product_techs")
    op.drop_table("product_techs")
    op.drop_index("ix_products_category_id", table_name="products")
    op.drop_table("products")
    op.drop_index("uq_categories_name_lower", table_name="categories")
    op.drop_table("categories")

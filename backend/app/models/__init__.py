"""ORM Models: SQLAlchemy declarative models for catalog entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Category is referenced by Product; Product owns ProductTech and ProductAddon

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (ADR: standard SQLAlchemy pattern)
"""

from app.models.category import Category  # noqa: F401
from app.models.product import Product, ProductTech, ProductAddon  # noqa: F401

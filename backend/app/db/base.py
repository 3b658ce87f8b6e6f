"""SQLAlchemy Declarative Base: shared base class for all catalog ORM models.

Invariants:
    - All models inherit from Base
    - Constraint and index names follow NAMING_CONVENTION, matching the names
      the migrations create

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - Explicit naming convention: Alembic can only alter or drop constraints it
      can name
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)

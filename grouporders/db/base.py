"""SQLAlchemy Declarative Base: shared base class for all ORM models.

Invariants:
    - All models and reference tables share Base.metadata
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all group-orders ORM models."""
    pass

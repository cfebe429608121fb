"""User ORM: identity plus the ordered reference lists of owned Orders and OrdersPacks.

Invariants:
    - email is unique
    - password holds a passlib hash, never the raw credential
    - `orders` / `orders_packs` are read-only views over user_orders / user_orders_packs
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from grouporders.db.base import Base
from grouporders.models.references import user_orders, user_orders_packs


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )

    # Relationships
    orders: Mapped[list["Order"]] = relationship(
        "Order", secondary=user_orders,
        order_by=user_orders.c.position,
        viewonly=True, lazy="selectin",
    )
    orders_packs: Mapped[list["OrdersPack"]] = relationship(
        "OrdersPack", secondary=user_orders_packs,
        order_by=user_orders_packs.c.position,
        viewonly=True, lazy="selectin",
    )

"""OrdersPack ORM: time-bounded container of Orders.

Invariants:
    - Accepts new or edited Orders only while expiration_date is in the future
    - `orders` is a read-only view over orders_pack_orders, ordered by position
    - owner_id is the User who opened the pack
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from grouporders.db.base import Base
from grouporders.models.references import orders_pack_orders


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrdersPack(Base):
    __tablename__ = "orders_packs"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    owner_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    expiration_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )

    # Relationships
    orders: Mapped[list["Order"]] = relationship(
        "Order", secondary=orders_pack_orders,
        order_by=orders_pack_orders.c.position,
        viewonly=True, lazy="selectin",
    )

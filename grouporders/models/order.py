"""Order ORM: a single purchase record owned by one User.

Invariants:
    - id is UUID primary key (client-side default)
    - price is non-negative (checked by OrderDraft and the request schema)
    - payment_method stores PaymentMethod values ("CARD" | "CASH")
    - An Order has no pack column; packs reach it through orders_pack_orders
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import (
    String, Text, Boolean, DateTime, ForeignKey, Numeric, CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from grouporders.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Order(Base):
    """Purchase record inside an OrdersPack."""
    __tablename__ = "orders"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_orders_price_non_negative"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2), nullable=False,
    )
    payed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    payment_method: Mapped[str] = mapped_column(
        String(10), nullable=False, default="CASH",
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )

"""Reference Lists: ordered id lists linking users and packs to the orders they hold.

Invariants:
    - One row per (owner, referenced id); position keeps insertion order
    - Rows are written only by the repositories' add/delete-reference methods
    - No ON DELETE CASCADE toward orders: the order workflow removes
      references explicitly before deleting the Order itself
"""

from sqlalchemy import Column, ForeignKey, Integer, Table
from sqlalchemy.dialects.postgresql import UUID

from grouporders.db.base import Base


user_orders = Table(
    "user_orders",
    Base.metadata,
    Column(
        "user_id", UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"), primary_key=True,
    ),
    Column(
        "order_id", UUID(as_uuid=True),
        ForeignKey("orders.id"), primary_key=True,
    ),
    Column("position", Integer, nullable=False),
)

user_orders_packs = Table(
    "user_orders_packs",
    Base.metadata,
    Column(
        "user_id", UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"), primary_key=True,
    ),
    Column(
        "orders_pack_id", UUID(as_uuid=True),
        ForeignKey("orders_packs.id", ondelete="CASCADE"), primary_key=True,
    ),
    Column("position", Integer, nullable=False),
)

orders_pack_orders = Table(
    "orders_pack_orders",
    Base.metadata,
    Column(
        "orders_pack_id", UUID(as_uuid=True),
        ForeignKey("orders_packs.id", ondelete="CASCADE"), primary_key=True,
    ),
    Column(
        "order_id", UUID(as_uuid=True),
        ForeignKey("orders.id"), primary_key=True,
    ),
    Column("position", Integer, nullable=False),
)

"""ORM Models: SQLAlchemy declarative models for users, orders packs and orders.

Invariants:
    - All models inherit from Base (db/base.py)
    - Reference lists live in association tables (models/references.py)

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from grouporders.models.references import (  # noqa: F401
    user_orders, user_orders_packs, orders_pack_orders,
)
from grouporders.models.user import User  # noqa: F401
from grouporders.models.order import Order  # noqa: F401
from grouporders.models.orders_pack import OrdersPack  # noqa: F401

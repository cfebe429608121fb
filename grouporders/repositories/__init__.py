"""Repositories: SQLAlchemy implementations of core/repository_protocols.py.

Invariants:
    - Repositories flush, never commit; the caller owns the transaction
    - Every find_by_id re-reads rows (populate_existing) so reference lists are current
"""

from grouporders.repositories.user_repository import SqlUserRepository  # noqa: F401
from grouporders.repositories.order_repository import SqlOrderRepository  # noqa: F401
from grouporders.repositories.orders_pack_repository import (  # noqa: F401
    SqlOrdersPackRepository,
)

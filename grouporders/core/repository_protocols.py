"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Repositories stage writes; the unit of work commits them

Design Decisions:
    - Protocol over ABC: SQLAlchemy repositories and test fakes satisfy these structurally
    - Async in Protocol: boundary methods are async because implementations do IO,
      but the eligibility functions that read these shapes are never async themselves
"""

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal
from typing import Protocol

from grouporders.core.domain_types import (
    UserId, OrderId, OrdersPackId, PaymentMethod,
)
from grouporders.core.drafts import OrderDraft, UserDraft, OrdersPackDraft


# ─── Entity shapes ──────────────────────────────────────────────

class UserLike(Protocol):
    id: UserId


class OrderLike(Protocol):
    id: OrderId
    user_id: UserId


class Expiring(Protocol):
    expiration_date: datetime


class OrdersPackLike(Expiring, Protocol):
    """Structural contract for packs handed to the eligibility functions.

    `orders` is the pack's reference list, already resolved to Order objects.
    """
    id: OrdersPackId
    orders: Sequence[OrderLike]


# ─── Repositories ───────────────────────────────────────────────

class UnitOfWork(Protocol):
    """Transaction boundary shared by the repositories of one request."""
    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...


class UserRepository(Protocol):
    async def find_by_id(self, user_id: UserId) -> UserLike | None: ...
    async def find_by_email(self, email: str) -> UserLike | None: ...
    async def save(self, draft: UserDraft) -> UserLike: ...
    async def add_order(self, user_id: UserId, order_id: OrderId) -> None: ...
    async def delete_order(self, user_id: UserId, order_id: OrderId) -> None: ...
    async def add_orders_pack(
        self, user_id: UserId, orders_pack_id: OrdersPackId,
    ) -> None: ...


class OrderRepository(Protocol):
    async def find_by_id(self, order_id: OrderId) -> OrderLike | None: ...
    async def save(self, draft: OrderDraft) -> OrderLike: ...
    async def edit_order_information(
        self,
        order: OrderLike,
        description: str,
        payment_method: PaymentMethod,
        payed: bool,
        price: Decimal,
    ) -> OrderLike: ...
    async def delete(self, order_id: OrderId) -> None: ...


class OrdersPackRepository(Protocol):
    async def find_by_id(self, orders_pack_id: OrdersPackId) -> OrdersPackLike | None: ...
    async def save(self, draft: OrdersPackDraft) -> OrdersPackLike: ...
    async def add_order(
        self, orders_pack_id: OrdersPackId, order_id: OrderId,
    ) -> None: ...
    async def delete_order(
        self, orders_pack_id: OrdersPackId, order_id: OrderId,
    ) -> None: ...

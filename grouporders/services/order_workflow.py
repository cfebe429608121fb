"""Order Workflow: load, check eligibility, mutate, keep reference lists consistent.

Invariants:
    - Each operation runs Start -> EntitiesLoaded -> EligibilityChecked -> Committed | Rejected
    - Missing users, packs or orders are folded into the eligibility result, never raised
    - A rejection raises one coarse error per operation; the specific cause goes to
      ErrorContext.debug_info and the log, never to the caller
    - All writes of one operation share a transaction and are committed once;
      any failure rolls back the writes already issued
    - Persistence errors are not caught here beyond the rollback and are not retried

Design Decisions:
    - No locking: two concurrent creates for the same actor and pack can both pass
      the duplicate check before either commits
"""

import logging
from contextlib import asynccontextmanager
from decimal import Decimal

from grouporders.core.domain_types import (
    UserId, OrderId, OrdersPackId, PaymentMethod, RejectionReason,
)
from grouporders.core.drafts import OrderDraft
from grouporders.core.errors import (
    ErrorContext, OrderPlacementError, OrderUpdateError, OrderDeleteError,
)
from grouporders.core.order_eligibility import check_place_order, check_edit_order
from grouporders.core.repository_protocols import (
    UnitOfWork, UserRepository, OrderRepository, OrdersPackRepository, OrderLike,
)

logger = logging.getLogger(__name__)


def _rejection_context(
    reason: RejectionReason,
    user_id: UserId,
    orders_pack_id: OrdersPackId,
    order_id: OrderId | None = None,
) -> ErrorContext:
    return ErrorContext(
        user_id=str(user_id),
        orders_pack_id=str(orders_pack_id),
        order_id=str(order_id) if order_id else None,
        debug_info={"reason": reason.value},
    )


class OrderWorkflow:
    """Create, edit and delete Orders inside OrdersPacks."""

    def __init__(
        self,
        db: UnitOfWork,
        users: UserRepository,
        orders: OrderRepository,
        orders_packs: OrdersPackRepository,
    ):
        self.db = db
        self.users = users
        self.orders = orders
        self.orders_packs = orders_packs

    @asynccontextmanager
    async def _transaction(self):
        try:
            yield
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

    async def create_order(
        self,
        orders_pack_id: OrdersPackId,
        user_id: UserId,
        description: str,
        price: Decimal,
        payment_method: PaymentMethod = PaymentMethod.CASH,
        payed: bool = False,
    ) -> OrderLike:
        """Place a new Order for user_id in the pack and reference it from both."""
        user = await self.users.find_by_id(user_id)
        orders_pack = await self.orders_packs.find_by_id(orders_pack_id)

        reason = check_place_order(user, orders_pack, user_id)
        if reason:
            error = OrderPlacementError(
                _rejection_context(reason, user_id, orders_pack_id),
            )
            logger.warning("Order placement rejected", extra=error.log_extra())
            raise error

        draft = OrderDraft(
            description=description,
            price=price,
            user_id=user_id,
            payed=payed,
            payment_method=payment_method,
        )
        async with self._transaction():
            order = await self.orders.save(draft)
            await self.orders_packs.add_order(orders_pack_id, order.id)
            await self.users.add_order(user_id, order.id)

        logger.info(
            "Order placed",
            extra={
                "order_id": order.id,
                "orders_pack_id": orders_pack_id,
                "user_id": user_id,
            },
        )
        return order

    async def edit_order(
        self,
        order_id: OrderId,
        orders_pack_id: OrdersPackId,
        user_id: UserId,
        description: str,
        price: Decimal,
        payment_method: PaymentMethod,
        payed: bool,
    ) -> None:
        """Overwrite description, payment method, payed flag and price in place."""
        orders_pack = await self.orders_packs.find_by_id(orders_pack_id)
        order = await self.orders.find_by_id(order_id)

        reason = check_edit_order(order, orders_pack, user_id)
        if reason:
            error = OrderUpdateError(
                _rejection_context(reason, user_id, orders_pack_id, order_id),
            )
            logger.warning("Order update rejected", extra=error.log_extra())
            raise error

        async with self._transaction():
            await self.orders.edit_order_information(
                order, description, payment_method, payed, price,
            )

        logger.info(
            "Order updated",
            extra={"order_id": order_id, "user_id": user_id},
        )

    async def delete_order(
        self,
        order_id: OrderId,
        orders_pack_id: OrdersPackId,
        user_id: UserId,
    ) -> None:
        """Remove the Order from its owner, from its pack, then from storage."""
        orders_pack = await self.orders_packs.find_by_id(orders_pack_id)
        order = await self.orders.find_by_id(order_id)

        reason = check_edit_order(order, orders_pack, user_id)
        if reason:
            error = OrderDeleteError(
                _rejection_context(reason, user_id, orders_pack_id, order_id),
            )
            logger.warning("Order deletion rejected", extra=error.log_extra())
            raise error

        async with self._transaction():
            await self.users.delete_order(user_id, order_id)
            await self.orders_packs.delete_order(orders_pack_id, order_id)
            await self.orders.delete(order_id)

        logger.info(
            "Order deleted",
            extra={
                "order_id": order_id,
                "orders_pack_id": orders_pack_id,
                "user_id": user_id,
            },
        )

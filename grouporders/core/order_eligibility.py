"""Order Eligibility: decides whether an actor may create, edit or delete an Order.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - The only impurity is the wall clock, injectable through `now`
    - A pack accepts changes only while expiration_date is strictly after now
    - An actor holds at most one Order per pack (checked on create only)
    - Ownership is id-value equality: order.user_id == actor_id
    - Edit and delete only reach Orders referenced by the given pack
    - check_* return the first failing RejectionReason, or None on success

Design Decisions:
    - Edit and delete share one rule (check_edit_order)
    - Naive datetimes are read as UTC; SQLite drops tzinfo on the way back
"""

from datetime import datetime, timezone

from grouporders.core.domain_types import UserId, OrderId, RejectionReason
from grouporders.core.repository_protocols import (
    UserLike, OrderLike, OrdersPackLike, Expiring,
)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def is_expired(orders_pack: Expiring, now: datetime | None = None) -> bool:
    """True once the pack's expiration date is at or before `now`."""
    now = _as_utc(now or datetime.now(timezone.utc))
    return _as_utc(orders_pack.expiration_date) <= now


def has_placed_order(actor_id: UserId, orders_pack: OrdersPackLike) -> bool:
    """True if any Order referenced by the pack belongs to `actor_id`."""
    return any(order.user_id == actor_id for order in orders_pack.orders)


def contains_order(orders_pack: OrdersPackLike, order_id: OrderId) -> bool:
    """True if the pack's reference list holds `order_id`."""
    return any(order.id == order_id for order in orders_pack.orders)


def check_place_order(
    user: UserLike | None,
    orders_pack: OrdersPackLike | None,
    actor_id: UserId,
    now: datetime | None = None,
) -> RejectionReason | None:
    if user is None:
        return RejectionReason.USER_NOT_FOUND
    if orders_pack is None:
        return RejectionReason.ORDERS_PACK_NOT_FOUND
    if is_expired(orders_pack, now):
        return RejectionReason.ORDERS_PACK_EXPIRED
    if has_placed_order(actor_id, orders_pack):
        return RejectionReason.ALREADY_ORDERED
    return None


def can_place_order(
    user: UserLike | None,
    orders_pack: OrdersPackLike | None,
    actor_id: UserId,
    now: datetime | None = None,
) -> bool:
    return check_place_order(user, orders_pack, actor_id, now) is None


def check_edit_order(
    order: OrderLike | None,
    orders_pack: OrdersPackLike | None,
    actor_id: UserId,
    now: datetime | None = None,
) -> RejectionReason | None:
    if orders_pack is None:
        return RejectionReason.ORDERS_PACK_NOT_FOUND
    if is_expired(orders_pack, now):
        return RejectionReason.ORDERS_PACK_EXPIRED
    if order is None:
        return RejectionReason.ORDER_NOT_FOUND
    if not contains_order(orders_pack, order.id):
        return RejectionReason.ORDER_NOT_IN_PACK
    if order.user_id != actor_id:
        return RejectionReason.NOT_ORDER_OWNER
    return None


def can_edit_order(
    order: OrderLike | None,
    orders_pack: OrdersPackLike | None,
    actor_id: UserId,
    now: datetime | None = None,
) -> bool:
    """Gate for both edit and delete."""
    return check_edit_order(order, orders_pack, actor_id, now) is None

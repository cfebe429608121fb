"""Orders Pack Service: open a new pack and reference it from its owner.

Invariants:
    - The owner must exist and the expiration date must lie in the future
    - Pack row and owner reference are committed together
"""

import logging
from datetime import datetime, timezone

from grouporders.core.domain_types import UserId
from grouporders.core.drafts import OrdersPackDraft
from grouporders.core.errors import ErrorContext, OrdersPackCreationError
from grouporders.core.order_eligibility import is_expired
from grouporders.core.repository_protocols import (
    UnitOfWork, UserRepository, OrdersPackRepository, OrdersPackLike,
)

logger = logging.getLogger(__name__)


async def open_orders_pack(
    db: UnitOfWork,
    users: UserRepository,
    orders_packs: OrdersPackRepository,
    name: str,
    owner_id: UserId,
    expiration_date: datetime,
) -> OrdersPackLike:
    owner = await users.find_by_id(owner_id)
    draft = OrdersPackDraft(
        name=name, owner_id=owner_id, expiration_date=expiration_date,
    )
    if owner is None or is_expired(draft, datetime.now(timezone.utc)):
        reason = "owner_not_found" if owner is None else "expiration_in_past"
        error = OrdersPackCreationError(
            ErrorContext(user_id=str(owner_id), debug_info={"reason": reason}),
        )
        logger.warning("Orders pack creation rejected", extra=error.log_extra())
        raise error

    try:
        orders_pack = await orders_packs.save(draft)
        await users.add_orders_pack(owner_id, orders_pack.id)
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    logger.info(
        "Orders pack opened",
        extra={"orders_pack_id": orders_pack.id, "user_id": owner_id},
    )
    return orders_pack

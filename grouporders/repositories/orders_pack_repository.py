"""OrdersPack persistence: lookup, creation and the pack's order reference list."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from grouporders.core.domain_types import OrderId, OrdersPackId
from grouporders.core.drafts import OrdersPackDraft
from grouporders.models.orders_pack import OrdersPack
from grouporders.models.references import orders_pack_orders
from grouporders.repositories.reference_lists import (
    append_reference, remove_reference,
)


class SqlOrdersPackRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, orders_pack_id: OrdersPackId) -> OrdersPack | None:
        """Load the pack with its orders resolved (selectin)."""
        result = await self.db.execute(
            select(OrdersPack)
            .where(OrdersPack.id == orders_pack_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def save(self, draft: OrdersPackDraft) -> OrdersPack:
        orders_pack = OrdersPack(
            name=draft.name,
            owner_id=draft.owner_id,
            expiration_date=draft.expiration_date,
        )
        self.db.add(orders_pack)
        await self.db.flush()
        return orders_pack

    async def add_order(
        self, orders_pack_id: OrdersPackId, order_id: OrderId,
    ) -> None:
        await append_reference(
            self.db, orders_pack_orders,
            orders_pack_orders.c.orders_pack_id, orders_pack_id,
            orders_pack_orders.c.order_id, order_id,
        )

    async def delete_order(
        self, orders_pack_id: OrdersPackId, order_id: OrderId,
    ) -> None:
        await remove_reference(
            self.db, orders_pack_orders,
            orders_pack_orders.c.orders_pack_id, orders_pack_id,
            orders_pack_orders.c.order_id, order_id,
        )

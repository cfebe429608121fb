"""Order persistence: create, edit in place, delete."""

from decimal import Decimal

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from grouporders.core.domain_types import OrderId, PaymentMethod
from grouporders.core.drafts import OrderDraft
from grouporders.models.order import Order


class SqlOrderRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, order_id: OrderId) -> Order | None:
        result = await self.db.execute(
            select(Order)
            .where(Order.id == order_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def save(self, draft: OrderDraft) -> Order:
        order = Order(
            description=draft.description,
            price=draft.price,
            payed=draft.payed,
            payment_method=draft.payment_method.value,
            user_id=draft.user_id,
        )
        self.db.add(order)
        await self.db.flush()
        return order

    async def edit_order_information(
        self,
        order: Order,
        description: str,
        payment_method: PaymentMethod,
        payed: bool,
        price: Decimal,
    ) -> Order:
        order.description = description
        order.payment_method = PaymentMethod(payment_method).value
        order.payed = payed
        order.price = price
        await self.db.flush()
        return order

    async def delete(self, order_id: OrderId) -> None:
        await self.db.execute(delete(Order).where(Order.id == order_id))

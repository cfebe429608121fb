"""User persistence: lookup, creation and the user's order / pack reference lists."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from grouporders.core.domain_types import UserId, OrderId, OrdersPackId
from grouporders.core.drafts import UserDraft
from grouporders.infrastructure.passwords import hash_password
from grouporders.models.user import User
from grouporders.models.references import user_orders, user_orders_packs
from grouporders.repositories.reference_lists import (
    append_reference, remove_reference,
)


class SqlUserRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, user_id: UserId) -> User | None:
        result = await self.db.execute(
            select(User)
            .where(User.id == user_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def find_by_email(self, email: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.email == email),
        )
        return result.scalar_one_or_none()

    async def save(self, draft: UserDraft) -> User:
        user = User(
            name=draft.name,
            email=draft.email,
            password=hash_password(draft.password),
        )
        self.db.add(user)
        await self.db.flush()
        return user

    async def add_order(self, user_id: UserId, order_id: OrderId) -> None:
        await append_reference(
            self.db, user_orders,
            user_orders.c.user_id, user_id,
            user_orders.c.order_id, order_id,
        )

    async def delete_order(self, user_id: UserId, order_id: OrderId) -> None:
        await remove_reference(
            self.db, user_orders,
            user_orders.c.user_id, user_id,
            user_orders.c.order_id, order_id,
        )

    async def add_orders_pack(
        self, user_id: UserId, orders_pack_id: OrdersPackId,
    ) -> None:
        await append_reference(
            self.db, user_orders_packs,
            user_orders_packs.c.user_id, user_id,
            user_orders_packs.c.orders_pack_id, orders_pack_id,
        )

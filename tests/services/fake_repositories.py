"""In-memory repositories satisfying core/repository_protocols.py.

Every method awaits asyncio.sleep(0) so concurrent workflows interleave at
each persistence call, the way they would against a real database.
"""

import asyncio
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal


@dataclass
class FakeUser:
    name: str
    email: str
    password: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    orders: list = field(default_factory=list)
    orders_packs: list = field(default_factory=list)


@dataclass
class FakeOrder:
    description: str
    price: Decimal
    user_id: uuid.UUID
    payed: bool
    payment_method: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class FakeOrdersPack:
    name: str
    owner_id: uuid.UUID
    expiration_date: datetime
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    orders: list = field(default_factory=list)


class FakeStore:
    """Shared tables plus a call log for ordering assertions."""

    def __init__(self):
        self.users: dict[uuid.UUID, FakeUser] = {}
        self.orders: dict[uuid.UUID, FakeOrder] = {}
        self.packs: dict[uuid.UUID, FakeOrdersPack] = {}
        self.calls: list[str] = []
        self.commits = 0
        self.rollbacks = 0


class FakeUnitOfWork:
    def __init__(self, store: FakeStore):
        self.store = store

    async def commit(self):
        await asyncio.sleep(0)
        self.store.commits += 1

    async def rollback(self):
        self.store.rollbacks += 1


class FakeUserRepository:
    def __init__(self, store: FakeStore):
        self.store = store

    async def find_by_id(self, user_id):
        await asyncio.sleep(0)
        return self.store.users.get(user_id)

    async def find_by_email(self, email):
        await asyncio.sleep(0)
        return next((u for u in self.store.users.values() if u.email == email), None)

    async def save(self, draft):
        await asyncio.sleep(0)
        user = FakeUser(name=draft.name, email=draft.email, password=draft.password)
        self.store.users[user.id] = user
        return user

    async def add_order(self, user_id, order_id):
        await asyncio.sleep(0)
        self.store.calls.append("users.add_order")
        self.store.users[user_id].orders.append(self.store.orders[order_id])

    async def delete_order(self, user_id, order_id):
        await asyncio.sleep(0)
        self.store.calls.append("users.delete_order")
        user = self.store.users[user_id]
        user.orders = [o for o in user.orders if o.id != order_id]

    async def add_orders_pack(self, user_id, orders_pack_id):
        await asyncio.sleep(0)
        self.store.users[user_id].orders_packs.append(self.store.packs[orders_pack_id])


class FakeOrderRepository:
    def __init__(self, store: FakeStore):
        self.store = store

    async def find_by_id(self, order_id):
        await asyncio.sleep(0)
        return self.store.orders.get(order_id)

    async def save(self, draft):
        await asyncio.sleep(0)
        self.store.calls.append("orders.save")
        order = FakeOrder(
            description=draft.description,
            price=draft.price,
            user_id=draft.user_id,
            payed=draft.payed,
            payment_method=draft.payment_method.value,
        )
        self.store.orders[order.id] = order
        return order

    async def edit_order_information(
        self, order, description, payment_method, payed, price,
    ):
        await asyncio.sleep(0)
        self.store.calls.append("orders.edit_order_information")
        order.description = description
        order.payment_method = payment_method.value
        order.payed = payed
        order.price = price
        return order

    async def delete(self, order_id):
        await asyncio.sleep(0)
        self.store.calls.append("orders.delete")
        self.store.orders.pop(order_id, None)


class FakeOrdersPackRepository:
    def __init__(self, store: FakeStore):
        self.store = store

    async def find_by_id(self, orders_pack_id):
        await asyncio.sleep(0)
        return self.store.packs.get(orders_pack_id)

    async def save(self, draft):
        await asyncio.sleep(0)
        pack = FakeOrdersPack(
            name=draft.name, owner_id=draft.owner_id,
            expiration_date=draft.expiration_date,
        )
        self.store.packs[pack.id] = pack
        return pack

    async def add_order(self, orders_pack_id, order_id):
        await asyncio.sleep(0)
        self.store.calls.append("orders_packs.add_order")
        self.store.packs[orders_pack_id].orders.append(self.store.orders[order_id])

    async def delete_order(self, orders_pack_id, order_id):
        await asyncio.sleep(0)
        self.store.calls.append("orders_packs.delete_order")
        pack = self.store.packs[orders_pack_id]
        pack.orders = [o for o in pack.orders if o.id != order_id]

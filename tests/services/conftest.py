"""Service test fixtures: async DB, FastAPI test client and seeded entities.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session factory
    - db_manager patched so the readiness probe sees the test engine
    - Seeds are committed through the real repositories
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from sqlalchemy import select
from sqlalchemy.pool import StaticPool
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from grouporders.core.domain_types import PaymentMethod
from grouporders.core.drafts import UserDraft, OrdersPackDraft
from grouporders.db.base import Base
from grouporders.infrastructure.database import get_db, DatabaseSessionManager
from grouporders.models import Order, orders_pack_orders, user_orders
from grouporders.repositories import (
    SqlUserRepository, SqlOrderRepository, SqlOrdersPackRepository,
)
from grouporders.services.order_workflow import OrderWorkflow
import grouporders.infrastructure.database as db_module
from grouporders.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


# ─── Seeds ───────────────────────────────────────────────────────

async def _seed_user(db, name, email):
    user = await SqlUserRepository(db).save(
        UserDraft(name=name, email=email, password="correct-horse"),
    )
    await db.commit()
    return user


async def _seed_pack(db, owner_id, expiration_date):
    orders_pack = await SqlOrdersPackRepository(db).save(
        OrdersPackDraft(
            name="Friday lunch", owner_id=owner_id,
            expiration_date=expiration_date,
        ),
    )
    await SqlUserRepository(db).add_orders_pack(owner_id, orders_pack.id)
    await db.commit()
    return orders_pack


@pytest.fixture
async def seed_user(test_db):
    return await _seed_user(test_db, "Ana", "ana@example.com")


@pytest.fixture
async def other_user(test_db):
    return await _seed_user(test_db, "Bruno", "bruno@example.com")


@pytest.fixture
async def open_pack(test_db, seed_user):
    """Pack expiring two hours from now."""
    return await _seed_pack(
        test_db, seed_user.id,
        datetime.now(timezone.utc) + timedelta(hours=2),
    )


@pytest.fixture
async def other_pack(test_db, other_user):
    """Second open pack, owned by other_user, with no orders."""
    return await _seed_pack(
        test_db, other_user.id,
        datetime.now(timezone.utc) + timedelta(hours=2),
    )


@pytest.fixture
async def expired_pack(test_db, seed_user):
    """Pack whose expiration passed an hour ago."""
    return await _seed_pack(
        test_db, seed_user.id,
        datetime.now(timezone.utc) - timedelta(hours=1),
    )


@pytest.fixture
def workflow(test_db):
    return OrderWorkflow(
        test_db,
        users=SqlUserRepository(test_db),
        orders=SqlOrderRepository(test_db),
        orders_packs=SqlOrdersPackRepository(test_db),
    )


@pytest.fixture
async def seed_order(workflow, open_pack, seed_user):
    """Order placed by seed_user in open_pack through the workflow."""
    return await workflow.create_order(
        orders_pack_id=open_pack.id,
        user_id=seed_user.id,
        description="Milanesa napolitana",
        price=Decimal("12.50"),
        payment_method=PaymentMethod.CARD,
        payed=False,
    )


# ─── Reference list probes ───────────────────────────────────────

@pytest.fixture
def references(test_db):
    """Read reference lists and order rows straight from the tables."""

    class _Probe:
        async def pack_orders(self, orders_pack_id):
            result = await test_db.execute(
                select(orders_pack_orders.c.order_id)
                .where(orders_pack_orders.c.orders_pack_id == orders_pack_id)
                .order_by(orders_pack_orders.c.position),
            )
            return list(result.scalars().all())

        async def user_orders(self, user_id):
            result = await test_db.execute(
                select(user_orders.c.order_id)
                .where(user_orders.c.user_id == user_id)
                .order_by(user_orders.c.position),
            )
            return list(result.scalars().all())

        async def order_exists(self, order_id):
            result = await test_db.execute(
                select(Order.id).where(Order.id == order_id),
            )
            return result.scalar_one_or_none() is not None

    return _Probe()

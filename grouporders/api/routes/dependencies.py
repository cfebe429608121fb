"""Request-scoped wiring: repositories and the order workflow over one AsyncSession."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from grouporders.infrastructure.database import get_db
from grouporders.repositories import (
    SqlUserRepository, SqlOrderRepository, SqlOrdersPackRepository,
)
from grouporders.services.order_workflow import OrderWorkflow


def get_order_workflow(db: AsyncSession = Depends(get_db)) -> OrderWorkflow:
    return OrderWorkflow(
        db,
        users=SqlUserRepository(db),
        orders=SqlOrderRepository(db),
        orders_packs=SqlOrdersPackRepository(db),
    )

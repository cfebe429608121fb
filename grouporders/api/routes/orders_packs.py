"""Orders Pack Routes: open a pack and read it with its orders."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from grouporders.core.errors import ResourceNotFoundError
from grouporders.infrastructure.database import get_db
from grouporders.repositories import SqlUserRepository, SqlOrdersPackRepository
from grouporders.schemas.orders_pack import OrdersPackCreate, OrdersPackResponse
from grouporders.services.orders_pack_service import open_orders_pack

router = APIRouter(prefix="/api/v1/orders-packs", tags=["orders-packs"])


@router.post(
    "", response_model=OrdersPackResponse, status_code=status.HTTP_201_CREATED,
)
async def create_orders_pack(
    body: OrdersPackCreate, db: AsyncSession = Depends(get_db),
):
    orders_pack = await open_orders_pack(
        db,
        SqlUserRepository(db),
        SqlOrdersPackRepository(db),
        name=body.name,
        owner_id=body.owner_id,
        expiration_date=body.expiration_date,
    )
    return OrdersPackResponse(
        id=orders_pack.id,
        name=orders_pack.name,
        owner_id=orders_pack.owner_id,
        expiration_date=orders_pack.expiration_date,
        orders=[],
        created_at=orders_pack.created_at,
    )


@router.get("/{orders_pack_id}", response_model=OrdersPackResponse)
async def get_orders_pack(
    orders_pack_id: UUID, db: AsyncSession = Depends(get_db),
):
    orders_pack = await SqlOrdersPackRepository(db).find_by_id(orders_pack_id)
    if orders_pack is None:
        raise ResourceNotFoundError("OrdersPack", str(orders_pack_id))
    return OrdersPackResponse.model_validate(orders_pack)

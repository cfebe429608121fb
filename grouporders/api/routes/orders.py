"""Order Routes: createOrder, editOrder, deleteOrder and a read endpoint.

Invariants:
    - createOrder answers 200 with {"order": ...}
    - editOrder and deleteOrder answer 200 with an empty body
    - Rejections surface as GENERIC_ERROR / GENERIC_UPDATE_ERROR / GENERIC_DELETE_ERROR (400)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from grouporders.api.routes.dependencies import get_order_workflow
from grouporders.core.errors import ResourceNotFoundError
from grouporders.infrastructure.database import get_db
from grouporders.repositories import SqlOrderRepository
from grouporders.schemas.order import (
    OrderCreate, OrderEdit, OrderDelete, OrderResponse, OrderEnvelope,
)
from grouporders.services.order_workflow import OrderWorkflow

router = APIRouter(prefix="/api/v1/orders", tags=["orders"])


@router.post("", response_model=OrderEnvelope)
async def create_order(
    body: OrderCreate, workflow: OrderWorkflow = Depends(get_order_workflow),
):
    """Place an Order in a pack on behalf of body.user_id."""
    order = await workflow.create_order(
        orders_pack_id=body.orders_pack_id,
        user_id=body.user_id,
        description=body.description,
        price=body.price,
        payment_method=body.payment_method,
        payed=body.payed,
    )
    return OrderEnvelope(order=OrderResponse.model_validate(order))


@router.put("")
async def edit_order(
    body: OrderEdit, workflow: OrderWorkflow = Depends(get_order_workflow),
):
    await workflow.edit_order(
        order_id=body.order_id,
        orders_pack_id=body.orders_pack_id,
        user_id=body.user_id,
        description=body.description,
        price=body.price,
        payment_method=body.payment_method,
        payed=body.payed,
    )
    return Response(status_code=status.HTTP_200_OK)


@router.delete("")
async def delete_order(
    body: OrderDelete, workflow: OrderWorkflow = Depends(get_order_workflow),
):
    await workflow.delete_order(
        order_id=body.order_id,
        orders_pack_id=body.orders_pack_id,
        user_id=body.user_id,
    )
    return Response(status_code=status.HTTP_200_OK)


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: UUID, db: AsyncSession = Depends(get_db)):
    order = await SqlOrderRepository(db).find_by_id(order_id)
    if order is None:
        raise ResourceNotFoundError("Order", str(order_id))
    return OrderResponse.model_validate(order)

"""Order Schemas: createOrder / editOrder / deleteOrder bodies and the Order response.

Invariants:
    - price >= 0, description non-empty after strip
    - paymentMethod is CARD or CASH
    - payed defaults to False on create
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from grouporders.core.domain_types import PaymentMethod


class _OrderFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    description: str = Field(min_length=1, max_length=2000)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    payment_method: PaymentMethod = Field(alias="paymentMethod")
    user_id: UUID

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("description cannot be empty or whitespace")
        return v


class OrderCreate(_OrderFields):
    orders_pack_id: UUID = Field(alias="ordersPack_id")
    payment_method: PaymentMethod = Field(PaymentMethod.CASH, alias="paymentMethod")
    payed: bool = False


class OrderEdit(_OrderFields):
    order_id: UUID
    orders_pack_id: UUID = Field(alias="ordersPack_id")
    payed: bool


class OrderDelete(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    order_id: UUID
    orders_pack_id: UUID = Field(alias="ordersPack_id")
    user_id: UUID


class OrderResponse(BaseModel):
    """Persisted Order as returned to clients."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    description: str
    price: Decimal
    payed: bool
    payment_method: PaymentMethod = Field(alias="paymentMethod")
    user_id: UUID
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class OrderEnvelope(BaseModel):
    order: OrderResponse

"""Orders Pack Schemas."""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from grouporders.schemas.order import OrderResponse


class OrdersPackCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1, max_length=200)
    owner_id: UUID
    expiration_date: datetime = Field(alias="expirationDate")

    @field_validator("expiration_date")
    @classmethod
    def require_timezone(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            raise ValueError("expirationDate must include a timezone offset")
        return v.astimezone(timezone.utc)


class OrdersPackResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    name: str
    owner_id: UUID
    expiration_date: datetime = Field(alias="expirationDate")
    orders: list[OrderResponse] = []
    created_at: datetime = Field(alias="createdAt")

"""Domain Types: identity aliases and closed enumerations shared across layers.

Invariants:
    - UserId, OrderId, OrdersPackId wrap UUIDs; ids are compared by value
    - PaymentMethod is closed: CARD or CASH
    - All valid states encoded as Enums, no raw string matching
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
OrderId = NewType("OrderId", UUID)
OrdersPackId = NewType("OrdersPackId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class PaymentMethod(str, Enum):
    """How the owner of an Order pays for it."""
    CARD = "CARD"
    CASH = "CASH"


class ErrorCode(str, Enum):
    """Outward-facing error codes. One coarse code per order operation."""
    GENERIC_ERROR = "GENERIC_ERROR"
    GENERIC_UPDATE_ERROR = "GENERIC_UPDATE_ERROR"
    GENERIC_DELETE_ERROR = "GENERIC_DELETE_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    EMAIL_TAKEN = "EMAIL_TAKEN"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class RejectionReason(str, Enum):
    """Internal cause of an eligibility failure. Logged, never returned to callers."""
    USER_NOT_FOUND = "user_not_found"
    ORDERS_PACK_NOT_FOUND = "orders_pack_not_found"
    ORDERS_PACK_EXPIRED = "orders_pack_expired"
    ALREADY_ORDERED = "already_ordered"
    ORDER_NOT_FOUND = "order_not_found"
    NOT_ORDER_OWNER = "not_order_owner"
    ORDER_NOT_IN_PACK = "order_not_in_pack"

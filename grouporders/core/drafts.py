"""Entity Drafts: immutable construction values for new records.

Invariants:
    - Drafts are frozen; repositories turn them into persisted rows
    - OrderDraft.price is non-negative and description is non-empty
    - payed defaults to False, payment_method defaults to CASH
    - Reference lists of a new user or pack always start empty
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from grouporders.core.domain_types import UserId, PaymentMethod


@dataclass(frozen=True)
class OrderDraft:
    """Everything needed to persist a new Order."""
    description: str
    price: Decimal
    user_id: UserId
    payed: bool = False
    payment_method: PaymentMethod = PaymentMethod.CASH

    def __post_init__(self):
        if not self.description or not self.description.strip():
            raise ValueError("description cannot be empty")
        if self.price < 0:
            raise ValueError("price cannot be negative")
        # normalize once, frozen dataclass needs object.__setattr__
        object.__setattr__(self, "price", Decimal(str(self.price)))
        object.__setattr__(self, "payment_method", PaymentMethod(self.payment_method))


@dataclass(frozen=True)
class UserDraft:
    """New user. `password` is the raw credential; the repository hashes it."""
    name: str
    email: str
    password: str

    def __repr__(self) -> str:
        return f"UserDraft(name={self.name!r}, email={self.email!r})"


@dataclass(frozen=True)
class OrdersPackDraft:
    name: str
    owner_id: UserId
    expiration_date: datetime

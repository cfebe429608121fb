"""Error Hierarchy: typed, categorized exceptions for every user-visible failure.

Invariants:
    - Every error has a code (ErrorCode), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces {message, code, httpStatus} and nothing else
    - ErrorContext.debug_info carries the internal cause; it never reaches the response body
    - Eligibility failures collapse to one coarse error per operation
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from grouporders.core.domain_types import ErrorCode


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Observability context attached to an error. Logged, not serialized."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    order_id: str | None = None
    orders_pack_id: str | None = None
    debug_info: dict[str, Any] | None = None


class GroupOrdersError(Exception):
    """Base exception for all group-orders errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the public error payload."""
        return {
            "message": self.message,
            "code": self.code.value,
            "httpStatus": self.http_status,
        }

    def log_extra(self) -> dict:
        """Fields for structured logging (includes the internal cause)."""
        extra = {
            "error_code": self.code.value,
            "user_id": self.context.user_id,
            "order_id": self.context.order_id,
            "orders_pack_id": self.context.orders_pack_id,
        }
        if self.context.debug_info:
            extra["rejection_reason"] = self.context.debug_info.get("reason")
        return extra


# ─── Domain Errors (400-level) ──────────────────────────────────

class OrderPlacementError(GroupOrdersError):
    """Order could not be placed (missing user/pack, expired pack, duplicate order)."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "there was an error placing your order.",
            ErrorCode.GENERIC_ERROR, ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class OrderUpdateError(GroupOrdersError):
    """Order could not be edited."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "there was an error updating the requested resource",
            ErrorCode.GENERIC_UPDATE_ERROR, ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class OrderDeleteError(GroupOrdersError):
    """Order could not be deleted."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "there was an error deleting the requested resource",
            ErrorCode.GENERIC_DELETE_ERROR, ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class OrdersPackCreationError(GroupOrdersError):
    """Orders pack could not be opened (unknown owner or past expiration)."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "there was an error creating the orders pack.",
            ErrorCode.GENERIC_ERROR, ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class ResourceNotFoundError(GroupOrdersError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            ErrorCode.RESOURCE_NOT_FOUND, ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )


class EmailAlreadyRegisteredError(GroupOrdersError):
    """A user with this email already exists."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "a user with this email already exists",
            ErrorCode.EMAIL_TAKEN, ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(GroupOrdersError):
    """Database operation failed. The driver message stays in debug_info."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            ErrorCode.DATABASE_ERROR, ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation

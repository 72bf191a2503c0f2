"""Error Hierarchy: typed, categorized exceptions for every inventory failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - All three inventory errors are recoverable (WARNING): the manager reports and continues
    - to_report() produces the manager's error report envelope

Design Decisions:
    - Single hierarchy with StockroomError base: the manager matches one base type
    - Errors travel inside Failure values; raising is left to Result.unwrap()
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from stockroom.core.domain_types import ItemId, Quantity, ReportStatus


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Where an error happened: which repository, which item."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    repository: str | None = None
    item_id: ItemId | None = None
    debug_info: dict[str, Any] | None = None


class StockroomError(Exception):
    """Base exception for all inventory errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    @property
    def recoverable(self) -> bool:
        return self.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)

    def to_report(self) -> dict:
        """Convert to the manager's error report shape."""
        return {
            "status": ReportStatus.ERROR.value,
            "error_code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "recoverable": self.recoverable,
            "repository": self.context.repository,
            "item_id": self.context.item_id,
            "timestamp": self.context.timestamp.isoformat(),
        }


# ─── Inventory Errors ───────────────────────────────────────────

class DuplicateKeyError(StockroomError):
    """An item with the same id is already stored."""
    def __init__(self, item_id: ItemId, context: ErrorContext | None = None):
        super().__init__(
            f"Item with ID {item_id} already exists.",
            "DUPLICATE_KEY", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context,
        )
        self.item_id = item_id


class NotFoundError(StockroomError):
    """No item is stored under the requested id."""
    def __init__(self, item_id: ItemId, context: ErrorContext | None = None):
        super().__init__(
            f"Item with ID {item_id} not found.",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context,
        )
        self.item_id = item_id


class InvalidQuantityError(StockroomError):
    """Requested quantity is below the zero floor."""
    def __init__(self, quantity: Quantity, context: ErrorContext | None = None):
        super().__init__(
            "Quantity cannot be negative.",
            "INVALID_QUANTITY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.quantity = quantity

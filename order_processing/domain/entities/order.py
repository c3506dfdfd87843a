"""
Order entity for the order processing pipeline.
Domain model representing one purchase request and its lifecycle status.
"""
from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from order_processing.domain.exceptions import (
    ImmutableOrderFieldError,
    InvalidOrderStateError,
)

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class OrderStatus(str, Enum):
    """Lifecycle state of an order."""

    NEW = "new"
    PENDING_VALIDATION = "pending_validation"
    PROCESSED = "processed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.PROCESSED, OrderStatus.CANCELLED)


class OrderEvent(str, Enum):
    """Inputs that move an order from one status to the next."""

    SUBMIT = "submit"
    APPROVE = "approve"
    REJECT = "reject"


_TRANSITIONS: dict[tuple[OrderStatus, OrderEvent], OrderStatus] = {
    (OrderStatus.NEW, OrderEvent.SUBMIT): OrderStatus.PENDING_VALIDATION,
    (OrderStatus.PENDING_VALIDATION, OrderEvent.APPROVE): OrderStatus.PROCESSED,
    (OrderStatus.PENDING_VALIDATION, OrderEvent.REJECT): OrderStatus.CANCELLED,
}


def _to_decimal(value: Any) -> Decimal:
    """Coerce *value* to a finite Decimal.

    Raises:
        TypeError: If *value* is not an int, float, str or Decimal
        ValueError: If *value* is not a number or is NaN or infinite
    """
    if isinstance(value, bool):
        raise TypeError("total_amount must be a number, not bool")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        # via str() so 0.1 becomes Decimal("0.1")
        result = Decimal(str(value))
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value)
        except InvalidOperation:
            raise ValueError(f"total_amount is not a number: {value!r}") from None
    else:
        raise TypeError(f"total_amount must be a number, got {type(value).__name__}")
    if not result.is_finite():
        raise ValueError(f"total_amount must be finite, got {value!r}")
    return result


# ---------------------------------------------------------------------------
# Domain entity
# ---------------------------------------------------------------------------


@dataclass
class Order:
    """A single purchase request.

    ``id`` is fixed once the order is built. ``total_amount`` may be negative;
    rejecting such orders is the validator's job, not the constructor's.
    Every order starts as ``NEW``; later statuses are reached via :func:`advance`.
    """

    id: int
    customer_name: str
    total_amount: Decimal
    status: OrderStatus = field(default=OrderStatus.NEW, init=False)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        self.total_amount = _to_decimal(self.total_amount)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise ImmutableOrderFieldError(field_name="id")
        super().__setattr__(name, value)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def advance(self, event: OrderEvent) -> "Order":
        """Apply *event* to this order; see :func:`advance`."""
        return advance(self, event)

    def to_dict(self) -> dict:
        """Return a dictionary representation of the order."""
        return {
            "id": self.id,
            "customer_name": self.customer_name,
            "total_amount": str(self.total_amount),
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
        }

    def __str__(self) -> str:  # pragma: no cover - string repr is for humans
        return (
            f"Order<{self.id}> customer={self.customer_name} "
            f"amount={self.total_amount} status={self.status.value}"
        )

    # Hash by immutable primary key so the entity can participate in set() operations
    def __hash__(self) -> int:
        return hash(self.id)


def advance(order: Order, event: OrderEvent) -> Order:
    """Move *order* to the status that *event* leads to.

    The order is mutated in place and returned.

    Raises:
        InvalidOrderStateError: If *event* is not allowed from the current status
    """
    try:
        target = _TRANSITIONS[(order.status, event)]
    except KeyError:
        raise InvalidOrderStateError(
            current_state=order.status.value,
            event=event.value,
            order_id=order.id,
        ) from None
    order.status = target
    return order

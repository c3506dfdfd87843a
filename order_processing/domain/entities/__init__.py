"""Domain entities."""

from order_processing.domain.entities.order import (
    Order,
    OrderEvent,
    OrderStatus,
    advance,
)

__all__ = ["Order", "OrderEvent", "OrderStatus", "advance"]

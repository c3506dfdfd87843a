"""
Exception classes related to order operations.

This module defines exceptions raised when an order is driven through an
illegal lifecycle transition or when a protected field is modified.
"""

from typing import Any

from order_processing.domain.exceptions.base_exceptions import BaseApplicationError


class OrderError(BaseApplicationError):
    """Base class for order-related exceptions."""

    def __init__(self, message: str = "Order operation failed", *args: Any, **kwargs: Any) -> None:
        super().__init__(message, *args, **kwargs)


class InvalidOrderStateError(OrderError):
    """Raised when an operation is attempted on an order in an invalid state."""

    def __init__(
        self,
        message: str = "Invalid order state for the requested operation",
        current_state: str | None = None,
        event: str | None = None,
        order_id: int | None = None,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        if current_state and event:
            message = f"{message}: cannot apply '{event}' to an order in state '{current_state}'"
        if order_id is not None:
            message = f"{message} (order {order_id})"
        super().__init__(message, *args, **kwargs)
        self.current_state = current_state
        self.event = event
        self.order_id = order_id


class ImmutableOrderFieldError(OrderError):
    """Raised when a field that is fixed at construction is reassigned."""

    def __init__(
        self,
        message: str = "Order field cannot be modified",
        field_name: str | None = None,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        if field_name:
            message = f"Order field '{field_name}' cannot be modified after construction"
        super().__init__(message, *args, **kwargs)
        self.field_name = field_name

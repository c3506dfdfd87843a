"""
Order validator interface.

Defines the contract for deciding whether an order may be processed.
"""

from abc import ABC, abstractmethod

from order_processing.domain.entities.order import Order


class IOrderValidator(ABC):
    """Abstract base class for order validation strategies."""

    @abstractmethod
    def is_valid(self, order: Order) -> bool:
        """
        Decide whether an order can be processed.

        Implementations must not modify the order.

        Args:
            order: The order to inspect

        Returns:
            True if the order is valid, False otherwise
        """
        raise NotImplementedError

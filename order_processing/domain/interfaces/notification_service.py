"""
Notification service interface.

Defines the contract for announcing order outcomes to customers.
"""

from abc import ABC, abstractmethod

from order_processing.domain.entities.order import Order


class INotificationService(ABC):
    """Abstract base class for customer notification channels."""

    @abstractmethod
    def send_order_confirmation(self, order: Order) -> None:
        """
        Tell the customer that their order has been processed.

        Args:
            order: The order that was processed
        """
        raise NotImplementedError

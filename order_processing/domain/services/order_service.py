"""
Order Service

This module provides the coordinator that takes a single order through
validation, persistence and customer notification.
"""

from rich.console import Console

from order_processing.core.utils.logging import get_logger
from order_processing.domain.entities.order import Order, OrderEvent, OrderStatus
from order_processing.domain.exceptions import InvalidOrderStateError
from order_processing.domain.interfaces.notification_service import INotificationService
from order_processing.domain.interfaces.order_validator import IOrderValidator
from order_processing.domain.repositories.order_repository import IOrderRepository

logger = get_logger(__name__)


class OrderService:
    """
    Service for processing orders.

    The service owns no storage or delivery logic of its own; it only decides
    the order of calls to the validator, repository and notification service
    it was built with, and advances the order's status accordingly.
    """

    def __init__(
        self,
        validator: IOrderValidator,
        repository: IOrderRepository,
        notification_service: INotificationService,
        console: Console | None = None,
    ):
        """
        Initialize the order service.

        Args:
            validator: Policy deciding whether an order can be processed
            repository: Repository for order data
            notification_service: Channel used to confirm processed orders
            console: Console that receives human-readable progress notices
        """
        self.validator = validator
        self.repository = repository
        self.notification_service = notification_service
        self.console = console or Console()

    def process_order(self, order: Order) -> None:
        """
        Process a single order end to end.

        An order that fails validation is cancelled and nothing else happens;
        this is reported through the order status, not by raising. Errors from
        the repository or notification service propagate unchanged and leave
        the order in ``PENDING_VALIDATION``.

        Args:
            order: A freshly created order in ``NEW`` status

        Raises:
            InvalidOrderStateError: If the order has already been processed
        """
        if order.status is not OrderStatus.NEW:
            raise InvalidOrderStateError(
                "Order has already been submitted for processing",
                current_state=order.status.value,
                event=OrderEvent.SUBMIT.value,
                order_id=order.id,
            )

        self.console.print(f"\nProcessing order #{order.id}")
        logger.debug("Processing order %s", order.id)
        order.advance(OrderEvent.SUBMIT)

        if not self.validator.is_valid(order):
            order.advance(OrderEvent.REJECT)
            self.console.print(f"❌ Order #{order.id} is invalid", style="bold red")
            logger.debug("Order %s rejected by validation (amount=%s)", order.id, order.total_amount)
            return

        self.repository.save(order)
        self.notification_service.send_order_confirmation(order)
        order.advance(OrderEvent.APPROVE)

        self.console.print(f"✅ Order #{order.id} processed successfully", style="bold green")
        logger.debug("Order %s processed", order.id)

    def get_order(self, order_id: int) -> Order | None:
        """Look up a previously saved order; None if it was never saved."""
        return self.repository.get_by_id(order_id)

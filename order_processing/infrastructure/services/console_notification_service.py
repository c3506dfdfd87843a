"""
Console notification service.

Stands in for an e-mail transport by writing the confirmation to a console.
Delivery always succeeds.
"""

from rich.console import Console

from order_processing.core.utils.logging import get_logger
from order_processing.domain.entities.order import Order
from order_processing.domain.interfaces.notification_service import INotificationService

logger = get_logger(__name__)


class ConsoleNotificationService(INotificationService):
    """Writes order confirmations to a rich console instead of sending e-mail."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def send_order_confirmation(self, order: Order) -> None:
        self.console.print(f"Email sent to customer {order.customer_name}")
        logger.debug("Confirmation for order %s sent to %s", order.id, order.customer_name)

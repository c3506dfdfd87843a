"""
Order Processing demo entry point.

Wires the default services through the DI container, pushes one valid and one
invalid order through the order service and prints the outcome.

Usage: python -m order_processing
"""

from rich.table import Table

from order_processing.core.config import get_settings
from order_processing.core.utils.logging import get_logger
from order_processing.domain.entities.order import Order
from order_processing.domain.services.order_service import OrderService
from order_processing.infrastructure.di.container import DIContainer, get_container

logger = get_logger(__name__)


def build_demo_orders() -> list[Order]:
    """The two hard-coded orders: one that passes validation and one that does not."""
    return [
        Order(id=1, customer_name="Oleksandra", total_amount=1500),
        Order(id=2, customer_name="Ivan", total_amount=-200),
    ]


def render_summary(orders: list[Order], order_service: OrderService, currency: str) -> Table:
    """Build a table of each order's final status and whether it was stored."""
    table = Table(title="Order summary")
    table.add_column("ID", justify="right")
    table.add_column("Customer")
    table.add_column(f"Amount ({currency})", justify="right")
    table.add_column("Status")
    table.add_column("Stored")
    for order in orders:
        stored = order_service.get_order(order.id) is not None
        table.add_row(
            str(order.id),
            order.customer_name,
            str(order.total_amount),
            order.status.value,
            "yes" if stored else "no",
        )
    return table


def run_demo(container: DIContainer | None = None, pause: bool | None = None) -> list[Order]:
    """
    Process the demo orders and print a summary.

    Args:
        container: Container to resolve services from; the global one by default
        pause: Wait for Enter before returning; defaults to ``PAUSE_ON_EXIT``

    Returns:
        The processed orders
    """
    settings = get_settings()
    container = container or get_container()
    if pause is None:
        pause = settings.PAUSE_ON_EXIT

    order_service = container.get(OrderService)
    orders = build_demo_orders()
    logger.debug("Running %s demo with %d orders", settings.PROJECT_NAME, len(orders))

    for order in orders:
        order_service.process_order(order)

    container.console.print()
    container.console.print(render_summary(orders, order_service, settings.CURRENCY))

    if pause:
        try:
            container.console.input("Press Enter to exit...")
        except EOFError:
            pass

    return orders


def main() -> int:
    """Console script entry point."""
    run_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

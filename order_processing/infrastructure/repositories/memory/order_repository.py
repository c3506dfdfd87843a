"""
In-Memory Order Repository Module.

This module provides an in-memory implementation of the order repository
interface. Orders live for the lifetime of the process; there is no deletion
path. The mapping is not guarded by a lock, so an instance shared between
threads needs external synchronisation.
"""

from order_processing.core.utils.logging import get_logger
from order_processing.domain.entities.order import Order
from order_processing.domain.repositories.order_repository import IOrderRepository

logger = get_logger(__name__)


class InMemoryOrderRepository(IOrderRepository):
    """In-memory implementation of the order repository, keyed by order ID."""

    def __init__(self) -> None:
        self._orders: dict[int, Order] = {}

    def save(self, order: Order) -> Order:
        """
        Store an order, overwriting any previous order with the same ID.

        Args:
            order: The order to store

        Returns:
            The stored order
        """
        self._orders[order.id] = order
        logger.info("Order %s saved to the database", order.id)
        return order

    def get_by_id(self, order_id: int) -> Order | None:
        return self._orders.get(order_id)

    def list_all(self) -> list[Order]:
        return list(self._orders.values())

    def count(self) -> int:
        return len(self._orders)

    def __contains__(self, order_id: object) -> bool:
        return order_id in self._orders

    def __len__(self) -> int:
        return len(self._orders)

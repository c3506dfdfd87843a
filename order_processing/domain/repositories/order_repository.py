"""
Interface for the Order Repository.
"""

from abc import ABC, abstractmethod

from order_processing.domain.entities.order import Order


class IOrderRepository(ABC):
    """Abstract base class defining the order repository interface."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """
        Save an order, replacing any order already stored under the same ID.

        Args:
            order: Order entity to save

        Returns:
            Saved order entity
        """
        pass

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Retrieve an order by its ID, or None if it was never saved."""
        pass

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every stored order in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored orders."""
        raise NotImplementedError

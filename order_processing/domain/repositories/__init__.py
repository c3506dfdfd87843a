"""Repository interfaces for the domain layer."""

from order_processing.domain.repositories.order_repository import IOrderRepository

__all__ = ["IOrderRepository"]

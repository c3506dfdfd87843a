"""In-memory repository implementations."""

from order_processing.infrastructure.repositories.memory.order_repository import (
    InMemoryOrderRepository,
)

__all__ = ["InMemoryOrderRepository"]

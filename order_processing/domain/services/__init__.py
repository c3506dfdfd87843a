"""Domain services."""

from order_processing.domain.services.order_service import OrderService
from order_processing.domain.services.order_validator import PositiveAmountValidator

__all__ = ["OrderService", "PositiveAmountValidator"]

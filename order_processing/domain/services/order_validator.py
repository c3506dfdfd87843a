"""
Order validation policies.
"""

from order_processing.domain.entities.order import Order
from order_processing.domain.interfaces.order_validator import IOrderValidator


class PositiveAmountValidator(IOrderValidator):
    """Accepts an order only when its total amount is strictly above zero."""

    def is_valid(self, order: Order) -> bool:
        return order.total_amount > 0

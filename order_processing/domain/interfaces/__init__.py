"""
Domain interfaces.

Abstract contracts for the capabilities the order service depends on.
"""

from order_processing.domain.interfaces.notification_service import INotificationService
from order_processing.domain.interfaces.order_validator import IOrderValidator

__all__ = ["INotificationService", "IOrderValidator"]

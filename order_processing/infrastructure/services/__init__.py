"""Concrete service implementations."""

from order_processing.infrastructure.services.console_notification_service import (
    ConsoleNotificationService,
)

__all__ = ["ConsoleNotificationService"]

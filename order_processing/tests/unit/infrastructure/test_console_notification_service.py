"""
Tests for the console notification service.
"""

from unittest.mock import patch

from order_processing.domain.entities.order import OrderStatus
from order_processing.domain.interfaces.notification_service import INotificationService

NOTIFIER_LOGGER_PATH = "order_processing.infrastructure.services.console_notification_service.logger"


def test_implements_interface(notification_service) -> None:
    assert isinstance(notification_service, INotificationService)


def test_confirmation_names_customer(notification_service, make_order, console_output) -> None:
    result = notification_service.send_order_confirmation(make_order(customer_name="Oleksandra"))

    assert result is None
    assert console_output().strip() == "Email sent to customer Oleksandra"


def test_confirmation_leaves_order_untouched(notification_service, make_order) -> None:
    order = make_order()
    notification_service.send_order_confirmation(order)
    assert order.status is OrderStatus.NEW


def test_confirmation_is_printed_once(notification_service, make_order, console_output) -> None:
    with patch(NOTIFIER_LOGGER_PATH) as mock_logger:
        notification_service.send_order_confirmation(make_order(customer_name="Ivan"))

    mock_logger.info.assert_not_called()
    mock_logger.debug.assert_called_once()
    assert console_output().count("Email sent to customer Ivan") == 1

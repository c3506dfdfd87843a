"""
Shared fixtures for the order processing test-suite.
"""

import io
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from order_processing.domain.entities.order import Order, OrderEvent, OrderStatus
from order_processing.domain.interfaces.notification_service import INotificationService
from order_processing.domain.interfaces.order_validator import IOrderValidator
from order_processing.domain.repositories.order_repository import IOrderRepository
from order_processing.domain.services.order_service import OrderService
from order_processing.domain.services.order_validator import PositiveAmountValidator
from order_processing.infrastructure.di.container import reset_container
from order_processing.infrastructure.repositories.memory.order_repository import (
    InMemoryOrderRepository,
)
from order_processing.infrastructure.services.console_notification_service import (
    ConsoleNotificationService,
)


@pytest.fixture
def console():
    """Console that records output in memory instead of writing to a terminal."""
    return Console(file=io.StringIO(), force_terminal=False, width=120)


@pytest.fixture
def console_output(console):
    """Callable returning everything written to the test console so far."""
    return lambda: console.file.getvalue()


@pytest.fixture
def make_order():
    """Factory fixture for orders with sensible defaults."""

    def _make(order_id: int = 1, customer_name: str = "Oleksandra", total_amount=1500) -> Order:
        return Order(id=order_id, customer_name=customer_name, total_amount=total_amount)

    return _make


_PATH_TO_STATUS = {
    OrderStatus.NEW: (),
    OrderStatus.PENDING_VALIDATION: (OrderEvent.SUBMIT,),
    OrderStatus.PROCESSED: (OrderEvent.SUBMIT, OrderEvent.APPROVE),
    OrderStatus.CANCELLED: (OrderEvent.SUBMIT, OrderEvent.REJECT),
}


@pytest.fixture
def order_in_status(make_order):
    """Factory fixture for an order driven to *status* through legal transitions."""

    def _make(status: OrderStatus, **kwargs) -> Order:
        order = make_order(**kwargs)
        for event in _PATH_TO_STATUS[status]:
            order.advance(event)
        return order

    return _make


@pytest.fixture
def mock_validator():
    validator = MagicMock(spec=IOrderValidator)
    validator.is_valid.return_value = True
    return validator


@pytest.fixture
def mock_repository():
    repository = MagicMock(spec=IOrderRepository)
    repository.save.side_effect = lambda order: order
    repository.get_by_id.return_value = None
    return repository


@pytest.fixture
def mock_notification_service():
    return MagicMock(spec=INotificationService)


@pytest.fixture
def repository():
    return InMemoryOrderRepository()


@pytest.fixture
def notification_service(console):
    return ConsoleNotificationService(console=console)


@pytest.fixture
def order_service(repository, notification_service, console):
    """Order service wired with the real default implementations."""
    return OrderService(
        validator=PositiveAmountValidator(),
        repository=repository,
        notification_service=notification_service,
        console=console,
    )


@pytest.fixture(autouse=True)
def _reset_global_container():
    """Keep the global DI container from leaking between tests."""
    reset_container()
    yield
    reset_container()

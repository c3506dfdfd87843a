"""
Tests for the dependency injection container.
"""

from unittest.mock import MagicMock

import pytest

from order_processing.domain.interfaces.notification_service import INotificationService
from order_processing.domain.interfaces.order_validator import IOrderValidator
from order_processing.domain.repositories.order_repository import IOrderRepository
from order_processing.domain.services.order_service import OrderService
from order_processing.domain.services.order_validator import PositiveAmountValidator
from order_processing.infrastructure.di.container import (
    DIContainer,
    get_container,
    get_service,
    reset_container,
)
from order_processing.infrastructure.repositories.memory.order_repository import (
    InMemoryOrderRepository,
)
from order_processing.infrastructure.services.console_notification_service import (
    ConsoleNotificationService,
)


@pytest.fixture
def container(console):
    container = DIContainer(console=console)
    container.register_services()
    return container


class TestDIContainer:
    def test_default_registrations(self, container) -> None:
        assert isinstance(container.get(IOrderValidator), PositiveAmountValidator)
        assert isinstance(container.get(IOrderRepository), InMemoryOrderRepository)
        assert isinstance(container.get(INotificationService), ConsoleNotificationService)

    def test_order_service_is_wired_with_registered_capabilities(self, container, console) -> None:
        service = container.get(OrderService)

        assert service.validator is container.get(IOrderValidator)
        assert service.repository is container.get(IOrderRepository)
        assert service.notification_service is container.get(INotificationService)
        assert service.console is console

    def test_resolved_services_are_cached(self, container) -> None:
        assert container.get(OrderService) is container.get(OrderService)
        assert container.get(IOrderRepository) is container.get(IOrderRepository)

    def test_registered_instance_overrides_default(self, console) -> None:
        container = DIContainer(console=console)
        container.register_services()
        fake_validator = MagicMock(spec=IOrderValidator)
        container.register(IOrderValidator, fake_validator)

        assert container.get(OrderService).validator is fake_validator

    def test_unregistered_interface_raises_key_error(self) -> None:
        with pytest.raises(KeyError, match="IOrderValidator"):
            DIContainer().get(IOrderValidator)


class TestGlobalContainer:
    def test_get_container_is_singleton(self) -> None:
        assert get_container() is get_container()

    def test_reset_container_creates_new_instance(self) -> None:
        first = get_container()
        reset_container()
        assert get_container() is not first

    def test_get_service_resolves_from_global_container(self) -> None:
        assert get_service(OrderService) is get_container().get(OrderService)

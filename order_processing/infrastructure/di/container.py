"""
Dependency Injection Container.

This module implements a small dependency injection container. The order
service only ever sees the validator, repository and notification
interfaces; the container decides which implementations back them.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from rich.console import Console

from order_processing.core.utils.logging import get_logger

logger = get_logger(__name__)

# Global container instance
_container = None

# Generic type variable for interfaces
T = TypeVar("T")


class DIContainer:
    """
    Dependency Injection Container for managing application services.

    Instances, singleton types and factories can be registered against an
    interface type. Singletons and factory results are created on first
    request and cached, so every consumer shares one instance.
    """

    def __init__(self, console: Console | None = None):
        """
        Initialize the DI container.

        Args:
            console: Console shared by every service that writes user-facing output
        """
        self._services: dict[type, Any] = {}
        self._singletons: dict[type, type] = {}
        self._factories: dict[type, Callable] = {}
        self.console = console or Console()
        logger.debug("Initializing DI container")

    def register(self, interface: type[T], implementation: T) -> None:
        """
        Register an implementation instance for an interface.

        Args:
            interface: The interface type to register
            implementation: The implementation instance
        """
        self._services[interface] = implementation
        logger.debug(f"Registered {interface.__name__} in DI container.")

    def register_singleton(self, interface: type[T], implementation_type: type[T]) -> None:
        """
        Register a type that will be instantiated once when first requested.

        Args:
            interface: The interface type to register
            implementation_type: The implementation type
        """
        self._singletons[interface] = implementation_type

    def register_factory(self, interface: type[T], factory: Callable[[], T]) -> None:
        """
        Register a factory function for creating service instances.

        Args:
            interface: The interface type
            factory: Factory function that creates instances of the interface
        """
        self._factories[interface] = factory

    def get(self, interface: type[T]) -> T:
        """
        Resolve an implementation for the specified interface.

        Args:
            interface: The interface type to resolve

        Returns:
            An instance implementing the interface

        Raises:
            KeyError: If no implementation is registered for the interface
        """
        # First check for direct instance registrations
        if interface in self._services:
            return self._services[interface]

        # Then check for registered singletons
        if interface in self._singletons:
            instance = self._singletons[interface]()
            self._services[interface] = instance
            return instance

        # Then check for registered factories
        if interface in self._factories:
            instance = self._factories[interface]()
            self._services[interface] = instance
            return instance

        raise KeyError(f"No implementation registered for {interface.__name__}")

    def register_services(self) -> None:
        """Register the default implementation of every order processing capability."""
        from order_processing.domain.interfaces.notification_service import (
            INotificationService,
        )
        from order_processing.domain.interfaces.order_validator import IOrderValidator
        from order_processing.domain.repositories.order_repository import IOrderRepository
        from order_processing.domain.services.order_service import OrderService
        from order_processing.domain.services.order_validator import PositiveAmountValidator
        from order_processing.infrastructure.repositories.memory.order_repository import (
            InMemoryOrderRepository,
        )
        from order_processing.infrastructure.services.console_notification_service import (
            ConsoleNotificationService,
        )

        self.register_singleton(IOrderValidator, PositiveAmountValidator)
        self.register_singleton(IOrderRepository, InMemoryOrderRepository)
        self.register_factory(
            INotificationService,
            lambda: ConsoleNotificationService(console=self.console),
        )
        self.register_factory(
            OrderService,
            lambda: OrderService(
                validator=self.get(IOrderValidator),
                repository=self.get(IOrderRepository),
                notification_service=self.get(INotificationService),
                console=self.console,
            ),
        )
        logger.debug("DI container initialized with default service registrations.")


def get_container() -> DIContainer:
    """
    Get the global DI container instance.

    This function follows the Singleton pattern, ensuring only one
    container exists throughout the application lifecycle.

    Returns:
        The global DI container instance
    """
    global _container

    if _container is None:
        _container = DIContainer()
        _container.register_services()

    return _container


def reset_container() -> None:
    """
    Reset the global DI container instance.

    This function is useful for testing when we need to reset
    the container between tests.
    """
    global _container
    _container = None


def get_service(interface_type: type[T]) -> T:
    """
    Get a service instance by its interface type.

    Args:
        interface_type: The interface type to resolve

    Returns:
        An instance implementing the interface
    """
    return get_container().get(interface_type)

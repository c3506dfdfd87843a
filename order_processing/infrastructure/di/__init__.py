"""Dependency injection wiring."""

from order_processing.infrastructure.di.container import (
    DIContainer,
    get_container,
    get_service,
    reset_container,
)

__all__ = ["DIContainer", "get_container", "get_service", "reset_container"]

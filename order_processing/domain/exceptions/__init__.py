"""
Exception classes for the application domain.

This module exports common exceptions used throughout the application.
"""

from order_processing.domain.exceptions.base_exceptions import BaseApplicationError
from order_processing.domain.exceptions.order_exceptions import (
    ImmutableOrderFieldError,
    InvalidOrderStateError,
    OrderError,
)

__all__ = [
    "BaseApplicationError",
    "ImmutableOrderFieldError",
    "InvalidOrderStateError",
    "OrderError",
]

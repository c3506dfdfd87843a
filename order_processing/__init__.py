"""
Order Processing.

Validates, stores and confirms orders through injectable capabilities.
"""

__version__ = "0.1.0"

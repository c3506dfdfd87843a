"""Concrete repository implementations."""

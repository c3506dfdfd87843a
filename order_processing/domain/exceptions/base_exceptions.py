"""
Root of the order processing exception hierarchy.

Every error raised deliberately by the domain layer derives from
:class:`BaseApplicationError`, so callers of the coordinator can catch the
package's own failures separately from errors raised by a collaborator
(a storage backend or a notification transport).
"""


class BaseApplicationError(Exception):
    """Order processing error carrying a human-readable ``message``."""

    default_message = "Order processing failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

"""Exception hierarchy shared by every solid-principles package."""

from __future__ import annotations


class SolidError(Exception):
    """Root exception for the entire solid-principles toolkit."""


class AbstractInstantiationError(SolidError, TypeError):
    """Raised when a capability-only abstraction is constructed directly.

    Also raised for a subclass that leaves one of its capabilities
    unimplemented. Signals a programming defect; not meant to be caught.
    """

    def __init__(self, abstraction: str, missing: list[str] | None = None) -> None:
        self.abstraction = abstraction
        self.missing = sorted(missing or [])
        message = f"{abstraction} is abstract and cannot be instantiated"
        if self.missing:
            message += f" (unimplemented: {', '.join(self.missing)})"
        super().__init__(message)


class InvalidArgumentError(SolidError, ValueError):
    """Raised when a constructor receives arguments it cannot accept.

    Usage: composite specifications raise this when given fewer than
    two children.
    """

"""Capability-only abstractions guarded against direct instantiation."""

from __future__ import annotations

from abc import ABC
from typing import Any

from ..primitives.exceptions import AbstractInstantiationError


class Capability(ABC):
    """Base class for interfaces that only declare capabilities.

    Subclasses declare their operations with ``@abstractmethod``.
    Constructing the abstraction itself, or a subclass that still has
    unimplemented operations, raises :class:`AbstractInstantiationError`
    before ``__init__`` runs.

    Usage::

        class Printer(Capability):
            @abstractmethod
            def print(self, document: Document) -> str: ...

        Printer()  # AbstractInstantiationError: Printer is abstract ...
    """

    def __new__(cls, *args: Any, **kwargs: Any) -> Any:  # noqa: ARG004
        missing = getattr(cls, "__abstractmethods__", frozenset())
        if missing:
            raise AbstractInstantiationError(cls.__name__, list(missing))
        return super().__new__(cls)

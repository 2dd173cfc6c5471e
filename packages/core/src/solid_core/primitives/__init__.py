"""Primitives: the exception hierarchy."""

from __future__ import annotations

from .exceptions import AbstractInstantiationError, InvalidArgumentError, SolidError

__all__: list[str] = [
    "AbstractInstantiationError",
    "InvalidArgumentError",
    "SolidError",
]

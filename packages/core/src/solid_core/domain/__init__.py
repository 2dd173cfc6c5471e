"""Domain primitives: value objects, capabilities, specification protocol."""

from __future__ import annotations

from .capability import Capability
from .specification import ISpecification
from .value_object import ValueObject

__all__: list[str] = [
    "Capability",
    "ISpecification",
    "ValueObject",
]

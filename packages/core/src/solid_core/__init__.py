"""solid-core: Foundation package for the solid-principles toolkit.

Exceptions, immutable value objects, capability abstractions and the
specification / filter ports. Only depends on pydantic.
"""

from __future__ import annotations

# ── Domain ───────────────────────────────────────────────────────
from .domain import Capability, ISpecification, ValueObject

# ── Ports ────────────────────────────────────────────────────────
from .ports import IFilter

# ── Primitives ───────────────────────────────────────────────────
from .primitives import AbstractInstantiationError, InvalidArgumentError, SolidError

__all__: list[str] = [
    # Domain
    "Capability",
    "ISpecification",
    "ValueObject",
    # Ports
    "IFilter",
    # Primitives
    "AbstractInstantiationError",
    "InvalidArgumentError",
    "SolidError",
]

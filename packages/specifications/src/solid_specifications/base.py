"""Specification base class and the logical composites (AND, OR, NOT)."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from solid_core.domain.specification import ISpecification
from solid_core.primitives.exceptions import InvalidArgumentError

T = TypeVar("T", contravariant=True)

MIN_COMPOSITE_CHILDREN = 2


class BaseSpecification(Generic[T], ISpecification[T]):
    """Base class for specifications with logic operator support."""

    def __and__(self, other: ISpecification[T]) -> AndSpecification[T]:
        return AndSpecification(self, other)

    def __or__(self, other: ISpecification[T]) -> OrSpecification[T]:
        return OrSpecification(self, other)

    def __invert__(self) -> NotSpecification[T]:
        return NotSpecification(self)


class CompositeSpecification(BaseSpecification[T]):
    """
    Holds an ordered tuple of two or more child specifications.

    Raises:
        InvalidArgumentError: If fewer than two children are given, or a
            child does not implement :class:`ISpecification`.
    """

    op = ""

    def __init__(self, *specifications: ISpecification[T]) -> None:
        if len(specifications) < MIN_COMPOSITE_CHILDREN:
            raise InvalidArgumentError(
                f"{type(self).__name__} requires at least "
                f"{MIN_COMPOSITE_CHILDREN} specifications, got {len(specifications)}"
            )
        for spec in specifications:
            _ensure_specification(spec)
        self.specifications: tuple[ISpecification[T], ...] = specifications

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": self.op,
            "conditions": [spec.to_dict() for spec in self.specifications],
        }

    def __repr__(self) -> str:
        children = ", ".join(repr(spec) for spec in self.specifications)
        return f"{type(self).__name__}({children})"


class AndSpecification(CompositeSpecification[T]):
    """Logical AND composite specification."""

    op = "and"

    def is_satisfied_by(self, candidate: T) -> bool:
        return all(spec.is_satisfied_by(candidate) for spec in self.specifications)


class OrSpecification(CompositeSpecification[T]):
    """Logical OR composite specification."""

    op = "or"

    def is_satisfied_by(self, candidate: T) -> bool:
        return any(spec.is_satisfied_by(candidate) for spec in self.specifications)


class NotSpecification(BaseSpecification[T]):
    """Logical NOT composite specification."""

    def __init__(self, specification: ISpecification[T]) -> None:
        self.specification = _ensure_specification(specification)

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.specification.is_satisfied_by(candidate)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "not",
            "conditions": [self.specification.to_dict()],
        }

    def __repr__(self) -> str:
        return f"NotSpecification({self.specification!r})"


def _ensure_specification(spec: Any) -> Any:
    if not isinstance(spec, ISpecification):
        raise InvalidArgumentError(
            f"Expected a specification, got {type(spec).__name__}"
        )
    return spec

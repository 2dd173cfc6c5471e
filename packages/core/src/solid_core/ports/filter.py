"""IFilter: collection filtering protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..domain.specification import ISpecification

T = TypeVar("T")


@runtime_checkable
class IFilter(Protocol[T]):
    """
    Filters a collection with any specification.

    Implementations must not know which attributes the specification
    tests, must return a new list in input order, and must never mutate
    the input.
    """

    def filter(
        self, items: Iterable[T], specification: ISpecification[T]
    ) -> list[T]: ...

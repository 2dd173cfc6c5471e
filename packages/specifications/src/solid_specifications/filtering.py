"""
Generic collection filtering driven by specifications.

The filter knows nothing about item attributes: adding a new criterion
means writing a new specification, never changing the filter::

    products = [apple, tree, house]
    green = ColourSpecification(Colour.GREEN)
    large = SizeSpecification(Size.LARGE)
    SpecificationFilter().filter(products, green & large)  # [tree]
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from solid_core.ports.filter import IFilter

if TYPE_CHECKING:
    from collections.abc import Iterable

    from solid_core.domain.specification import ISpecification

T = TypeVar("T")

logger = logging.getLogger("solid.specifications.filtering")


class SpecificationFilter(Generic[T], IFilter[T]):
    """Eager, order-preserving implementation of :class:`IFilter`."""

    def filter(self, items: Iterable[T], specification: ISpecification[T]) -> list[T]:
        """
        Return a new list holding the items that satisfy *specification*.

        Matching items keep their relative input order. The input is only
        iterated once and never mutated, so generators are accepted.
        """
        total = 0
        matched: list[T] = []
        for item in items:
            total += 1
            if specification.is_satisfied_by(item):
                matched.append(item)
        logger.debug(
            "Filtered %d of %d items with %r", len(matched), total, specification
        )
        return matched


def filter_items(items: Iterable[T], specification: ISpecification[T]) -> list[T]:
    """Shortcut for ``SpecificationFilter().filter(items, specification)``."""
    return SpecificationFilter[T]().filter(items, specification)

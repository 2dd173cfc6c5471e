#!/usr/bin/env python
"""Open/closed principle: product filtering.

Open for extension, closed for modification. ``ProductFilter`` needs a
new method (and a new combination method for every pair) each time a
criterion appears; ``SpecificationFilter`` never changes, new criteria
arrive as new specifications.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from solid_core.domain.value_object import ValueObject
from solid_specifications import (
    AndSpecification,
    AttributeSpecification,
    OrSpecification,
    SpecificationFilter,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

# ─── Domain ───────────────────────────────────────────────────────


class Colour(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Size(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Product(ValueObject):
    """A named product with a colour and a size."""

    name: str
    colour: Colour
    size: Size


# ─── Old approach: modify the filter for every criterion ──────────


class ProductFilter:
    def filter_by_colour(
        self, products: Iterable[Product], colour: Colour
    ) -> list[Product]:
        return [p for p in products if p.colour == colour]

    def filter_by_size(self, products: Iterable[Product], size: Size) -> list[Product]:
        return [p for p in products if p.size == size]


# ─── New approach: specifications ─────────────────────────────────


class ColourSpecification(AttributeSpecification[Product]):
    """Satisfied by items whose ``colour`` equals the given colour."""

    def __init__(self, colour: Colour) -> None:
        super().__init__("colour", colour)


class SizeSpecification(AttributeSpecification[Product]):
    """Satisfied by items whose ``size`` equals the given size."""

    def __init__(self, size: Size) -> None:
        super().__init__("size", size)


def demo_products() -> list[Product]:
    return [
        Product(name="Apple", colour=Colour.GREEN, size=Size.SMALL),
        Product(name="Tree", colour=Colour.GREEN, size=Size.LARGE),
        Product(name="House", colour=Colour.BLUE, size=Size.LARGE),
    ]


# ─── Demo ─────────────────────────────────────────────────────────


def main() -> None:
    products = demo_products()

    pf = ProductFilter()
    print("Green products (old approach):")
    for p in pf.filter_by_colour(products, Colour.GREEN):
        print(f"* {p.name} is green")

    print("Large products (old approach):")
    for p in pf.filter_by_size(products, Size.LARGE):
        print(f"* {p.name} is large")

    bf = SpecificationFilter[Product]()
    print("Green products (new approach):")
    for p in bf.filter(products, ColourSpecification(Colour.GREEN)):
        print(f"* {p.name} is green")

    print("Large products (new approach):")
    for p in bf.filter(products, SizeSpecification(Size.LARGE)):
        print(f"* {p.name} is large")

    print("Large AND green products (new approach):")
    and_spec = AndSpecification(
        ColourSpecification(Colour.GREEN),
        SizeSpecification(Size.LARGE),
    )
    for p in bf.filter(products, and_spec):
        print(f"* {p.name} is large and green")

    print("Small OR blue products (new approach):")
    or_spec = OrSpecification(
        ColourSpecification(Colour.BLUE),
        SizeSpecification(Size.SMALL),
    )
    for p in bf.filter(products, or_spec):
        print(f"* {p.name} is small or blue")


if __name__ == "__main__":
    main()

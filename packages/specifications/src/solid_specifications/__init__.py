from .attribute import AttributeSpecification
from .base import (
    AndSpecification,
    BaseSpecification,
    CompositeSpecification,
    NotSpecification,
    OrSpecification,
)
from .filtering import SpecificationFilter, filter_items

__all__ = [
    "AttributeSpecification",
    "BaseSpecification",
    "CompositeSpecification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "SpecificationFilter",
    "filter_items",
]

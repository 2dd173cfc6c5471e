"""Atomic specification: one attribute compared for equality."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from solid_core.primitives.exceptions import InvalidArgumentError

from .base import BaseSpecification

T = TypeVar("T", contravariant=True)

_MISSING: Any = object()


def resolve(candidate: Any, path: str) -> Any:
    """
    Follow a dot-separated *path* through attributes or mapping keys.

    Returns ``_MISSING`` as soon as a segment cannot be read, including
    when an intermediate value is ``None`` (``content.colour`` on a box
    without content).
    """
    value = candidate
    for part in path.split("."):
        if value is None:
            return _MISSING
        if isinstance(value, Mapping):
            value = value.get(part, _MISSING)
        else:
            value = getattr(value, part, _MISSING)
        if value is _MISSING:
            return _MISSING
    return value


class AttributeSpecification(BaseSpecification[T]):
    """
    Satisfied by items whose *attr* equals *value*.

    The comparison is plain ``==``, so an item whose attribute holds an
    unrelated type simply does not match. An item that lacks the
    attribute never matches either, even when *value* is ``None``.

    Raises:
        InvalidArgumentError: If *attr* is not a non-empty dotted path.
    """

    def __init__(self, attr: str, value: Any) -> None:
        if not isinstance(attr, str) or not all(attr.split(".")):
            raise InvalidArgumentError(
                f"Attribute path must be a non-empty dotted name, got {attr!r}"
            )
        self.attr = attr
        self.value = value

    def is_satisfied_by(self, candidate: T) -> bool:
        actual = resolve(candidate, self.attr)
        if actual is _MISSING:
            return False
        return bool(actual == self.value)

    def to_dict(self) -> dict[str, Any]:
        return {"op": "=", "attr": self.attr, "val": self.value}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.attr!r} = {self.value!r})"

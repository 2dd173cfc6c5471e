"""Specification pattern primitives."""

from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T", contravariant=True)


@runtime_checkable
class ISpecification(Protocol, Generic[T]):
    """
    Protocol for the Specification pattern.
    Used to encapsulate a business rule that an item either satisfies or not.
    """

    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Check whether the candidate satisfies the specification.
        Must be a pure function of the candidate and the specification.
        """
        ...

    def to_dict(self) -> dict[str, Any]:
        """
        Return a dictionary representation of the specification.
        Useful for logging criteria or shipping them across process boundaries.
        """
        ...

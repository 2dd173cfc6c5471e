import pytest

from solid_core import (
    AbstractInstantiationError,
    InvalidArgumentError,
    SolidError,
)

# --- Exception Tests ---


def test_solid_error() -> None:
    """Verifies SolidError can be raised and caught."""
    with pytest.raises(SolidError) as exc:
        raise SolidError("test error")
    assert str(exc.value) == "test error"


def test_abstract_instantiation_error_hierarchy() -> None:
    err = AbstractInstantiationError("Printer", ["print"])

    assert isinstance(err, SolidError)
    assert isinstance(err, TypeError)
    assert str(err) == (
        "Printer is abstract and cannot be instantiated (unimplemented: print)"
    )


def test_abstract_instantiation_error_without_missing_methods() -> None:
    err = AbstractInstantiationError("RelationshipBrowser")

    assert err.missing == []
    assert str(err) == "RelationshipBrowser is abstract and cannot be instantiated"


def test_invalid_argument_error_hierarchy() -> None:
    with pytest.raises(ValueError, match="at least 2"):
        raise InvalidArgumentError("needs at least 2 children")

    assert issubclass(InvalidArgumentError, SolidError)

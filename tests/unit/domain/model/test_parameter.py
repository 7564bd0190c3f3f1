"""Tests for domain/model/parameter.py."""

import pytest

from phpcompat.domain.model.parameter import ParameterDescriptor
from phpcompat.domain.model.token import Token
from tests.factories import make_location


class TestParameterDescriptorCreation:
    """Tests for valid ParameterDescriptor creation."""

    def test_minimal_valid(self) -> None:
        param = ParameterDescriptor(name="$x", location=make_location())

        assert param.name == "$x"
        assert param.is_variadic is False
        assert param.default is None
        assert param.has_default is False
        assert param.type_hint == ""
        assert param.nullable_type is False

    def test_with_default(self) -> None:
        param = ParameterDescriptor(name="$x", location=make_location(), default=(Token.null(),))

        assert param.has_default is True

    def test_empty_default_is_still_a_default(self) -> None:
        param = ParameterDescriptor(name="$x", location=make_location(), default=())

        assert param.has_default is True

    def test_nullable_type(self) -> None:
        param = ParameterDescriptor(
            name="$x", location=make_location(), type_hint="int", nullable_type=True
        )

        assert param.type_hint == "int"
        assert param.nullable_type is True

    def test_is_frozen(self) -> None:
        param = ParameterDescriptor(name="$x", location=make_location())
        with pytest.raises(AttributeError):
            param.name = "$y"  # type: ignore[misc]


class TestParameterDescriptorFailFirst:
    """Tests for FAIL-FIRST validation in ParameterDescriptor."""

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="parameter name must not be empty"):
            ParameterDescriptor(name="", location=make_location())

    def test_none_location_raises(self) -> None:
        with pytest.raises(TypeError, match="location must not be None"):
            ParameterDescriptor(name="$x", location=None)  # type: ignore[arg-type]

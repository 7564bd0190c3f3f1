"""Tests for domain/exceptions.py."""

import pytest

from phpcompat.domain.exceptions import (
    InvalidTestVersionError,
    InvalidVersionError,
    PhpCompatError,
)


class TestExceptionHierarchy:
    """All library errors share one root and a semantic builtin base."""

    @pytest.mark.parametrize(
        "error",
        [InvalidVersionError("x"), InvalidTestVersionError("x", "bad")],
    )
    def test_catchable_as_root_and_value_error(self, error: Exception) -> None:
        assert isinstance(error, PhpCompatError)
        assert isinstance(error, ValueError)


class TestInvalidVersionError:
    """Tests for InvalidVersionError."""

    def test_message(self) -> None:
        error = InvalidVersionError("8")

        assert error.value == "8"
        assert str(error) == "invalid PHP version '8', expected MAJOR.MINOR"


class TestInvalidTestVersionError:
    """Tests for InvalidTestVersionError."""

    def test_message(self) -> None:
        error = InvalidTestVersionError("8.1-7.4", "8.1 is higher than 7.4")

        assert error.value == "8.1-7.4"
        assert error.reason == "8.1 is higher than 7.4"
        assert str(error) == "invalid testVersion '8.1-7.4': 8.1 is higher than 7.4"

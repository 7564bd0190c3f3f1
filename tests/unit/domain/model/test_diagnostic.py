"""Tests for domain/model/diagnostic.py."""

import pytest

from phpcompat.domain.model.diagnostic import Diagnostic
from phpcompat.domain.model.enums import Severity
from tests.factories import make_location

SNIFF = "PHPCompatibility.FunctionDeclarations.RemovedOptionalBeforeRequiredParam"


def _diagnostic(**overrides: object) -> Diagnostic:
    fields: dict[str, object] = {
        "sniff_code": f"{SNIFF}.Deprecated80",
        "code": "Deprecated80",
        "message": "Declaring an optional parameter ...",
        "severity": Severity.WARNING,
        "location": make_location(line=4, column=9),
        "data": ("$a", "$b"),
    }
    fields.update(overrides)
    return Diagnostic(**fields)  # type: ignore[arg-type]


class TestDiagnostic:
    """Tests for Diagnostic."""

    def test_str(self) -> None:
        text = str(_diagnostic())

        assert text.startswith("/test/file.php:4:9: [WARNING]")
        assert text.endswith(f"({SNIFF}.Deprecated80)")

    @pytest.mark.parametrize(
        "code",
        [
            "Deprecated80",
            f"{SNIFF}.Deprecated80",
            SNIFF,
            "PHPCompatibility.FunctionDeclarations",
            "PHPCompatibility",
        ],
    )
    def test_matches(self, code: str) -> None:
        assert _diagnostic().matches(code) is True

    @pytest.mark.parametrize(
        "code",
        ["Deprecated81", "PHPCompat", f"{SNIFF}.Deprecated8", "Generic"],
    )
    def test_does_not_match(self, code: str) -> None:
        assert _diagnostic().matches(code) is False


class TestDiagnosticFailFirst:
    """Tests for FAIL-FIRST validation in Diagnostic."""

    def test_empty_code_raises(self) -> None:
        with pytest.raises(ValueError, match="code must not be empty"):
            _diagnostic(code="")

    def test_mismatched_code_raises(self) -> None:
        with pytest.raises(ValueError, match="must end with .Deprecated81"):
            _diagnostic(code="Deprecated81")

    def test_empty_message_raises(self) -> None:
        with pytest.raises(ValueError, match="message must not be empty"):
            _diagnostic(message="")

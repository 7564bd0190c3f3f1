"""Rendered diagnostic entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from phpcompat.domain.model.enums import Severity
    from phpcompat.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """User-facing finding recorded by a diagnostic sink.

    Attributes:
        sniff_code: Full dotted code, e.g.
            "PHPCompatibility.FunctionDeclarations.RemovedOptionalBeforeRequiredParam.Deprecated80"
        code: Short code within the sniff, e.g. "Deprecated80"
        message: Message with data substituted
        severity: ERROR/WARNING
        location: Where the finding is anchored
        data: Values substituted into the message template
    """

    sniff_code: str
    code: str
    message: str
    severity: Severity
    location: Location
    data: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.code:
            raise ValueError("code must not be empty")
        if not self.sniff_code.endswith(f".{self.code}"):
            raise ValueError(f"sniff_code {self.sniff_code!r} must end with .{self.code}")
        if not self.message:
            raise ValueError("message must not be empty")

    def matches(self, code: str) -> bool:
        """Code selects this diagnostic.

        Accepts the short code, the full code, or any dotted prefix
        of the full code ("PHPCompatibility.FunctionDeclarations").
        """
        if code == self.code or code == self.sniff_code:
            return True
        return self.sniff_code.startswith(f"{code}.")

    def __str__(self) -> str:
        """Format diagnostic for display."""
        return f"{self.location}: [{self.severity.name}] {self.message} ({self.sniff_code})"

"""Base sniff class.

Provides the shared reporting plumbing of SniffProtocol.
Concrete sniffs inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, ClassVar

from phpcompat.domain.model.diagnostic import Diagnostic
from phpcompat.domain.model.enums import Severity

if TYPE_CHECKING:
    from phpcompat.domain.model.location import Location
    from phpcompat.domain.model.signature import FunctionSignature
    from phpcompat.domain.ports.diagnostic_sink import DiagnosticSinkProtocol
    from phpcompat.domain.ports.version_gate import VersionGateProtocol

STANDARD = "PHPCompatibility"


class BaseSniff(ABC):
    """Base class for sniffs implementing SniffProtocol.

    Concrete sniffs must:
    1. Set `category`, `name` and `messages` class attributes
    2. Implement `process()`

    `messages` maps each short code to a str.format template
    receiving the diagnostic data positionally.
    """

    category: ClassVar[str]
    name: ClassVar[str]
    messages: ClassVar[Mapping[str, str]]

    @property
    def sniff_code(self) -> str:
        """Dotted Standard.Category.Sniff prefix."""
        return f"{STANDARD}.{self.category}.{self.name}"

    @property
    def codes(self) -> frozenset[str]:
        """Short codes this sniff can emit."""
        return frozenset(self.messages)

    @abstractmethod
    def process(
        self,
        signature: FunctionSignature,
        gate: VersionGateProtocol,
        sink: DiagnosticSinkProtocol,
    ) -> int:
        """Inspect a signature and report findings to the sink."""

    def render(self, code: str, location: Location, data: tuple[str, ...]) -> Diagnostic:
        """Build the warning diagnostic for one of this sniff's codes.

        Raises:
            KeyError: If code is not one of this sniff's codes
        """
        template = self.messages[code]
        return Diagnostic(
            sniff_code=f"{self.sniff_code}.{code}",
            code=code,
            message=template.format(*data),
            severity=Severity.WARNING,
            location=location,
            data=data,
        )

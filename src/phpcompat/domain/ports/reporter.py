"""Reporter protocol for output formatting.

Users extend phpcompat by implementing this Protocol.
NOT rich-specific - users can adapt to any output format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from phpcompat.domain.model.scan_result import ScanResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    phpcompat provides PlainTextReporter, JSONReporter and ConsoleReporter.
    """

    def report(self, result: ScanResult) -> None:
        """Report scan results.

        Implementation decides output format and destination.

        Args:
            result: Complete scan result with diagnostics and stats
        """
        ...

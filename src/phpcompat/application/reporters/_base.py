"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from phpcompat.domain.model.scan_result import ScanResult


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: ScanResult) -> None:
                print(f"Diagnostics: {result.diagnostic_count}")
    """

    @abstractmethod
    def report(self, result: ScanResult) -> None:
        """Report scan results.

        Args:
            result: Complete scan result with diagnostics and stats
        """

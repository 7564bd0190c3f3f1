"""Scan statistics and result aggregate."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from phpcompat.domain.model.diagnostic import Diagnostic
from phpcompat.domain.model.enums import Severity


@dataclass(frozen=True, slots=True)
class ScanStats:
    """Statistics from a compatibility scan.

    Attributes:
        signatures_scanned: Number of function signatures processed
        parameters_scanned: Number of parameters across those signatures
        sniffs_run: Number of sniffs executed per signature
        diagnostics_suppressed: Findings dropped by excluded_codes
        scan_time_ms: Total scan time in milliseconds
    """

    signatures_scanned: int
    parameters_scanned: int
    sniffs_run: int
    diagnostics_suppressed: int
    scan_time_ms: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.signatures_scanned < 0:
            raise ValueError(f"signatures_scanned must be >= 0, got {self.signatures_scanned}")
        if self.parameters_scanned < 0:
            raise ValueError(f"parameters_scanned must be >= 0, got {self.parameters_scanned}")
        if self.sniffs_run < 0:
            raise ValueError(f"sniffs_run must be >= 0, got {self.sniffs_run}")
        if self.diagnostics_suppressed < 0:
            raise ValueError(
                f"diagnostics_suppressed must be >= 0, got {self.diagnostics_suppressed}"
            )
        if self.scan_time_ms < 0:
            raise ValueError(f"scan_time_ms must be >= 0, got {self.scan_time_ms}")

    @classmethod
    def empty(cls) -> ScanStats:
        """Create empty scan stats."""
        return cls(
            signatures_scanned=0,
            parameters_scanned=0,
            sniffs_run=0,
            diagnostics_suppressed=0,
            scan_time_ms=0.0,
        )


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Result of a compatibility scan.

    Immutable aggregate consumed by ReporterProtocol.report().

    Attributes:
        diagnostics: All findings, ordered by location then code
        stats: Scan statistics
    """

    diagnostics: tuple[Diagnostic, ...]
    stats: ScanStats

    @property
    def passed(self) -> bool:
        """Scan found nothing."""
        return len(self.diagnostics) == 0

    @property
    def diagnostic_count(self) -> int:
        """Number of diagnostics."""
        return len(self.diagnostics)

    @property
    def error_count(self) -> int:
        """Number of ERROR severity diagnostics."""
        return sum(1 for d in self.diagnostics if d.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        """Number of WARNING severity diagnostics."""
        return sum(1 for d in self.diagnostics if d.severity == Severity.WARNING)

    def by_code(self) -> dict[str, int]:
        """Count diagnostics per full sniff code."""
        return dict(Counter(d.sniff_code for d in self.diagnostics))

    def by_file(self) -> dict[str, tuple[Diagnostic, ...]]:
        """Group diagnostics per file, preserving order."""
        grouped: dict[str, list[Diagnostic]] = {}
        for diagnostic in self.diagnostics:
            grouped.setdefault(str(diagnostic.location.file), []).append(diagnostic)
        return {file: tuple(items) for file, items in grouped.items()}

    @classmethod
    def empty(cls) -> ScanResult:
        """Create empty scan result (passed, no diagnostics)."""
        return cls(diagnostics=(), stats=ScanStats.empty())

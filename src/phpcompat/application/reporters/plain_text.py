"""Plain text reporter using print().

Stdlib-only reporter, laid out like the PHP_CodeSniffer full report.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from phpcompat.application.reporters._base import BaseReporter
from phpcompat.domain.model.enums import Severity

if TYPE_CHECKING:
    from phpcompat.domain.model.diagnostic import Diagnostic
    from phpcompat.domain.model.scan_result import ScanResult

_WIDTH = 80


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    One block per file, one line per diagnostic.
    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None, *, show_codes: bool = True) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            show_codes: Append the full sniff code to each message
        """
        self._output = output if output is not None else sys.stdout
        self._show_codes = show_codes

    def report(self, result: ScanResult) -> None:
        """Report scan results as plain text.

        Args:
            result: Complete scan result
        """
        for file, diagnostics in result.by_file().items():
            self._report_file(file, diagnostics)

        self._report_footer(result)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_file(self, file: str, diagnostics: tuple[Diagnostic, ...]) -> None:
        """Print one file block."""
        warnings = sum(1 for d in diagnostics if d.severity == Severity.WARNING)
        errors = len(diagnostics) - warnings
        self._write()
        self._write(f"FILE: {file}")
        self._write("-" * _WIDTH)
        self._write(f"FOUND {errors} ERROR(S) AND {warnings} WARNING(S)")
        self._write("-" * _WIDTH)
        for diagnostic in diagnostics:
            severity = diagnostic.severity.name
            line = f"{diagnostic.location.line:>5} | {severity:<7} | {diagnostic.message}"
            if self._show_codes:
                line += f" ({diagnostic.sniff_code})"
            self._write(line)
        self._write("-" * _WIDTH)

    def _report_footer(self, result: ScanResult) -> None:
        """Print totals."""
        self._write()
        self._write(
            f"Signatures: {result.stats.signatures_scanned}, "
            f"Warnings: {result.warning_count}, "
            f"Errors: {result.error_count}, "
            f"Suppressed: {result.stats.diagnostics_suppressed}"
        )
        self._write(f"Result: {'PASSED' if result.passed else 'FAILED'}")

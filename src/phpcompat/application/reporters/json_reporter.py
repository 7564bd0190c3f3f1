"""JSON reporter for machine-readable output.

Stdlib-only reporter. Schema follows the PHP_CodeSniffer JSON report:
totals, then messages per file.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from phpcompat.application.reporters._base import BaseReporter
from phpcompat.domain.model.enums import Severity

if TYPE_CHECKING:
    from phpcompat.domain.model.diagnostic import Diagnostic
    from phpcompat.domain.model.scan_result import ScanResult


class JSONReporter(BaseReporter):
    """JSON reporter for CI/CD integration and downstream tooling."""

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: ScanResult) -> None:
        """Report scan results as JSON.

        Args:
            result: Complete scan result
        """
        json.dump(self._result_to_dict(result), self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: ScanResult) -> dict[str, object]:
        """Convert ScanResult to JSON-serializable dict."""
        files: dict[str, object] = {}
        for file, diagnostics in result.by_file().items():
            files[file] = {
                "errors": sum(1 for d in diagnostics if d.severity == Severity.ERROR),
                "warnings": sum(1 for d in diagnostics if d.severity == Severity.WARNING),
                "messages": [self._diagnostic_to_dict(d) for d in diagnostics],
            }

        return {
            "passed": result.passed,
            "totals": {
                "errors": result.error_count,
                "warnings": result.warning_count,
                "suppressed": result.stats.diagnostics_suppressed,
            },
            "files": files,
            "stats": {
                "signatures_scanned": result.stats.signatures_scanned,
                "parameters_scanned": result.stats.parameters_scanned,
                "sniffs_run": result.stats.sniffs_run,
                "scan_time_ms": result.stats.scan_time_ms,
            },
        }

    def _diagnostic_to_dict(self, diagnostic: Diagnostic) -> dict[str, object]:
        """Convert Diagnostic to JSON-serializable dict."""
        return {
            "message": diagnostic.message,
            "source": diagnostic.sniff_code,
            "code": diagnostic.code,
            "severity": diagnostic.severity.name,
            "line": diagnostic.location.line,
            "column": diagnostic.location.column,
            "data": list(diagnostic.data),
        }

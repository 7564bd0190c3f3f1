"""Main facade for compatibility scanning.

CompatibilityScanner is the primary entry point for running sniffs.
Composition-based: accepts sniffs, version gate and reporter.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Self

from phpcompat.application.sinks import CollectingSink
from phpcompat.application.sniffs import default_sniffs, sniffs_from_config
from phpcompat.application.version_gate import ConfiguredVersionGate
from phpcompat.domain.model.configuration import ScanConfig
from phpcompat.domain.model.scan_result import ScanResult, ScanStats

if TYPE_CHECKING:
    from phpcompat.domain.model.signature import FunctionSignature
    from phpcompat.domain.ports.reporter import ReporterProtocol
    from phpcompat.domain.ports.sniff import SniffProtocol
    from phpcompat.domain.ports.version_gate import VersionGateProtocol

logger = logging.getLogger(__name__)


class CompatibilityScanner:
    """Main facade for compatibility scanning.

    Runs every sniff against every signature and collects the findings
    into a ScanResult. Signatures are independent, so with
    config.max_workers > 1 they are spread over a thread pool; the result
    is the same as a sequential scan.

    Factory methods:
    - with_defaults(): all registered sniffs, unconstrained gate
    - from_config(): sniffs and gate derived from ScanConfig

    Example:
        scanner = CompatibilityScanner.from_config(ScanConfig.from_test_version("7.4-"))
        result = scanner.scan(signatures)
        if not result.passed:
            print(f"Warnings: {result.warning_count}")
    """

    def __init__(
        self,
        sniffs: Sequence[SniffProtocol],
        gate: VersionGateProtocol,
        *,
        config: ScanConfig | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize scanner with dependencies.

        Args:
            sniffs: Sniffs to run
            gate: Target version predicate shared by all sniffs
            config: Scan configuration (default: ScanConfig())
            reporter: Optional reporter for output
        """
        if gate is None:
            raise TypeError("gate must not be None")
        self._sniffs = tuple(sniffs)
        self._gate = gate
        self._config = config or ScanConfig()
        self._reporter = reporter

    @classmethod
    def with_defaults(cls, *, reporter: ReporterProtocol | None = None) -> Self:
        """Create scanner with all sniffs and no version constraint."""
        return cls(default_sniffs(), ConfiguredVersionGate(), reporter=reporter)

    @classmethod
    def from_config(
        cls,
        config: ScanConfig,
        *,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create scanner with sniffs and gate based on config.

        Args:
            config: Scan configuration
            reporter: Optional reporter

        Returns:
            CompatibilityScanner honouring test_version and excluded_codes
        """
        return cls(
            sniffs_from_config(config),
            ConfiguredVersionGate.from_config(config),
            config=config,
            reporter=reporter,
        )

    @property
    def sniffs(self) -> tuple[SniffProtocol, ...]:
        """Sniffs run by this scanner."""
        return self._sniffs

    def scan(self, signatures: Iterable[FunctionSignature]) -> ScanResult:
        """Run all sniffs over signatures.

        Reports result if reporter is configured.

        Args:
            signatures: Parsed function signatures

        Returns:
            ScanResult with diagnostics and stats
        """
        start_time = time.perf_counter()
        signatures = tuple(signatures)
        sink = CollectingSink(self._config.excluded_codes)

        if self._config.max_workers > 1 and len(signatures) > 1:
            with ThreadPoolExecutor(max_workers=self._config.max_workers) as pool:
                # list() re-raises the first sniff error in the caller
                list(pool.map(lambda signature: self._process(signature, sink), signatures))
        else:
            for signature in signatures:
                self._process(signature, sink)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        result = ScanResult(
            diagnostics=sink.diagnostics,
            stats=ScanStats(
                signatures_scanned=len(signatures),
                parameters_scanned=sum(len(s.parameters) for s in signatures),
                sniffs_run=len(self._sniffs),
                diagnostics_suppressed=sink.suppressed_count,
                scan_time_ms=elapsed_ms,
            ),
        )
        logger.info(
            "Scanned %d signature(s): %d diagnostic(s), %d suppressed",
            result.stats.signatures_scanned,
            result.diagnostic_count,
            result.stats.diagnostics_suppressed,
        )

        if self._reporter is not None:
            self._reporter.report(result)

        return result

    def _process(self, signature: FunctionSignature, sink: CollectingSink) -> int:
        """Run every sniff on one signature.

        Returns:
            Number of findings handed to the sink
        """
        found = 0
        for sniff in self._sniffs:
            try:
                found += sniff.process(signature, self._gate, sink)
            except Exception:
                logger.error(
                    "Sniff %s failed on %s at %s",
                    sniff.sniff_code,
                    signature.name,
                    signature.location,
                )
                raise
        logger.debug("%s at %s: %d finding(s)", signature.name, signature.location, found)
        return found

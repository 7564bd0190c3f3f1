"""Sniff protocol for compatibility checks.

Users extend phpcompat by implementing this Protocol.
Sniffs inspect one function signature at a time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from phpcompat.domain.model.signature import FunctionSignature
    from phpcompat.domain.ports.diagnostic_sink import DiagnosticSinkProtocol
    from phpcompat.domain.ports.version_gate import VersionGateProtocol


class SniffProtocol(Protocol):
    """Contract for sniffs.

    Sniffs are stateless: the same instance may process signatures
    from several threads.

    Example:
        class NoClosuresSniff:
            sniff_code = "MyStandard.Functions.NoClosures"
            codes = frozenset({"Found"})

            def process(self, signature, gate, sink) -> int:
                if signature.name != "{closure}":
                    return 0
                sink.add_warning(...)
                return 1
    """

    sniff_code: str
    """Dotted Standard.Category.Sniff prefix of every code it emits."""

    codes: frozenset[str]
    """Short codes this sniff can emit."""

    def process(
        self,
        signature: FunctionSignature,
        gate: VersionGateProtocol,
        sink: DiagnosticSinkProtocol,
    ) -> int:
        """Inspect a signature and report findings to the sink.

        Args:
            signature: Parsed function signature
            gate: Target version predicate
            sink: Receiver of findings

        Returns:
            Number of findings handed to the sink
        """
        ...

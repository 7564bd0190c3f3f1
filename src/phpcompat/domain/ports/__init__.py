"""Domain ports (protocols)."""

from phpcompat.domain.ports.diagnostic_sink import DiagnosticSinkProtocol
from phpcompat.domain.ports.reporter import ReporterProtocol
from phpcompat.domain.ports.sniff import SniffProtocol
from phpcompat.domain.ports.version_gate import VersionGateProtocol

__all__ = [
    "DiagnosticSinkProtocol",
    "ReporterProtocol",
    "SniffProtocol",
    "VersionGateProtocol",
]

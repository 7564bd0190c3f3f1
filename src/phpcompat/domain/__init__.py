"""phpcompat domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, pathlib, re, collections.abc
"""

from phpcompat.domain.exceptions import (
    InvalidTestVersionError,
    InvalidVersionError,
    PhpCompatError,
)
from phpcompat.domain.model import (
    Diagnostic,
    FunctionSignature,
    Location,
    ParameterDescriptor,
    ParameterOrderViolation,
    PhpVersion,
    ScanConfig,
    ScanResult,
    ScanStats,
    Severity,
    Tier,
    Token,
    TokenKind,
    VersionRange,
)
from phpcompat.domain.ports import (
    DiagnosticSinkProtocol,
    ReporterProtocol,
    SniffProtocol,
    VersionGateProtocol,
)

__all__ = [
    # Exceptions
    "PhpCompatError",
    "InvalidVersionError",
    "InvalidTestVersionError",
    # Enums
    "Severity",
    "Tier",
    "TokenKind",
    # Value objects
    "Location",
    "Token",
    "PhpVersion",
    "VersionRange",
    "ParameterDescriptor",
    "FunctionSignature",
    "ParameterOrderViolation",
    "Diagnostic",
    # Configuration and results
    "ScanConfig",
    "ScanStats",
    "ScanResult",
    # Ports
    "VersionGateProtocol",
    "DiagnosticSinkProtocol",
    "SniffProtocol",
    "ReporterProtocol",
]

"""Domain model entities."""

from phpcompat.domain.model.configuration import ScanConfig
from phpcompat.domain.model.diagnostic import Diagnostic
from phpcompat.domain.model.enums import Severity, Tier
from phpcompat.domain.model.location import Location
from phpcompat.domain.model.parameter import ParameterDescriptor
from phpcompat.domain.model.php_version import PhpVersion, VersionRange
from phpcompat.domain.model.scan_result import ScanResult, ScanStats
from phpcompat.domain.model.signature import FunctionSignature
from phpcompat.domain.model.token import Token, TokenKind
from phpcompat.domain.model.violation import ParameterOrderViolation

__all__ = [
    "Diagnostic",
    "FunctionSignature",
    "Location",
    "ParameterDescriptor",
    "ParameterOrderViolation",
    "PhpVersion",
    "ScanConfig",
    "ScanResult",
    "ScanStats",
    "Severity",
    "Tier",
    "Token",
    "TokenKind",
    "VersionRange",
]

"""Domain enumerations."""

from enum import Enum, auto

from phpcompat.domain.model.php_version import PhpVersion


class Severity(Enum):
    """Diagnostic severity, as in PHP_CodeSniffer."""

    ERROR = auto()
    WARNING = auto()


class Tier(Enum):
    """Version threshold at which a parameter-order violation is reported.

    Value is (error code, PHP version the deprecation applies from).
    """

    TIER_80 = ("Deprecated80", PhpVersion(8, 0))
    TIER_81 = ("Deprecated81", PhpVersion(8, 1))

    @property
    def code(self) -> str:
        """Stable machine-readable code used for filtering."""
        return self.value[0]

    @property
    def version(self) -> PhpVersion:
        """PHP version from which this tier is reported."""
        return self.value[1]

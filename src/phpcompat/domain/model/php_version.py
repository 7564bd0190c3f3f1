"""PHP version value objects."""

from __future__ import annotations

import re
from dataclasses import dataclass

from phpcompat.domain.exceptions import InvalidTestVersionError, InvalidVersionError

_VERSION_RE = re.compile(r"^(\d+)\.(\d+)$")
_RANGE_RE = re.compile(r"^(\d+\.\d+)?\s*-\s*(\d+\.\d+)?$")


@dataclass(frozen=True, slots=True, order=True)
class PhpVersion:
    """MAJOR.MINOR PHP version, ordered numerically.

    Attributes:
        major: Major version (>= 0)
        minor: Minor version (>= 0)
    """

    major: int
    minor: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.major < 0:
            raise ValueError(f"major must be >= 0, got {self.major}")
        if self.minor < 0:
            raise ValueError(f"minor must be >= 0, got {self.minor}")

    @classmethod
    def parse(cls, value: str) -> PhpVersion:
        """Parse "8.1" style version string.

        Raises:
            InvalidVersionError: If value is not MAJOR.MINOR
        """
        match = _VERSION_RE.match(value.strip())
        if match is None:
            raise InvalidVersionError(value)
        return cls(int(match.group(1)), int(match.group(2)))

    def __str__(self) -> str:
        """Format as MAJOR.MINOR."""
        return f"{self.major}.{self.minor}"


@dataclass(frozen=True, slots=True)
class VersionRange:
    """PHP versions a scanned codebase declares it supports.

    None on either side means the range is open in that direction.

    Attributes:
        low: Lowest supported version, None if unbounded
        high: Highest supported version, None if unbounded
    """

    low: PhpVersion | None = None
    high: PhpVersion | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.low is not None and self.high is not None and self.low > self.high:
            raise ValueError(f"low ({self.low}) must be <= high ({self.high})")

    @classmethod
    def parse(cls, value: str) -> VersionRange:
        """Parse a testVersion setting.

        Accepted forms: "8.0", "7.4-8.1", "7.0-", "-7.4".

        Raises:
            InvalidTestVersionError: If value is malformed or inverted
        """
        text = value.strip()
        if _VERSION_RE.match(text):
            version = PhpVersion.parse(text)
            return cls(low=version, high=version)

        match = _RANGE_RE.match(text)
        if match is None:
            raise InvalidTestVersionError(value, "expected X.Y, X.Y-, -X.Y or X.Y-X.Y")

        low_text, high_text = match.groups()
        if low_text is None and high_text is None:
            raise InvalidTestVersionError(value, "at least one bound is required")

        low = PhpVersion.parse(low_text) if low_text else None
        high = PhpVersion.parse(high_text) if high_text else None
        if low is not None and high is not None and low > high:
            raise InvalidTestVersionError(value, f"{low} is higher than {high}")
        return cls(low=low, high=high)

    def reaches(self, version: PhpVersion) -> bool:
        """Range includes version or anything above it."""
        return self.high is None or self.high >= version

    def __str__(self) -> str:
        """Format in testVersion syntax."""
        if self.low is not None and self.low == self.high:
            return str(self.low)
        low = str(self.low) if self.low is not None else ""
        high = str(self.high) if self.high is not None else ""
        return f"{low}-{high}"

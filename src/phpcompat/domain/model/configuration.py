"""Scan configuration.

User-provided configuration that scopes which findings are produced.
None = feature disabled / unconstrained, value = feature enabled with that config.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from phpcompat.domain.model.php_version import VersionRange


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Scan configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        test_version: PHP versions the scanned code must run on.
            None = no constraint, every version-gated check runs.
        excluded_codes: Codes to drop (short "Deprecated81", full dotted
            code, or a dotted prefix of it). Empty = report everything.
        max_workers: Worker threads for scanning signatures. 1 = sequential.
    """

    test_version: VersionRange | None = None
    excluded_codes: frozenset[str] = field(default_factory=frozenset)
    max_workers: int = 1

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if not isinstance(self.excluded_codes, frozenset):
            raise TypeError(
                f"excluded_codes must be frozenset, got {type(self.excluded_codes).__name__}"
            )
        if any(not code for code in self.excluded_codes):
            raise ValueError("excluded_codes must not contain empty codes")

    @classmethod
    def from_test_version(
        cls,
        test_version: str,
        *,
        excluded_codes: frozenset[str] = frozenset(),
        max_workers: int = 1,
    ) -> ScanConfig:
        """Create config from a testVersion string such as "7.4-".

        Raises:
            InvalidTestVersionError: If test_version is malformed
        """
        return cls(
            test_version=VersionRange.parse(test_version),
            excluded_codes=excluded_codes,
            max_workers=max_workers,
        )

    def has_test_version(self) -> bool:
        """Check if a testVersion constraint is configured."""
        return self.test_version is not None

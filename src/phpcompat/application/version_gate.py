"""testVersion-based version gate.

A version-gated check runs when the PHP versions the scanned codebase
declares it supports reach the check's threshold version.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from phpcompat.domain.model.configuration import ScanConfig
    from phpcompat.domain.model.php_version import PhpVersion, VersionRange


class ConfiguredVersionGate:
    """Version gate backed by a testVersion range.

    No range configured means every check runs.
    Immutable after construction, safe to share between threads.
    """

    def __init__(self, test_version: VersionRange | None = None) -> None:
        """Initialize gate.

        Args:
            test_version: Declared supported versions, None if unconstrained
        """
        self._test_version = test_version

    @classmethod
    def from_config(cls, config: ScanConfig) -> Self:
        """Create gate from config.test_version."""
        return cls(config.test_version)

    @property
    def test_version(self) -> VersionRange | None:
        """Configured range, None if unconstrained."""
        return self._test_version

    def should_run_on_or_above(self, version: PhpVersion) -> bool:
        """Check if the codebase needs to run on version or higher.

        Args:
            version: Threshold version

        Returns:
            True if unconstrained or the range reaches version
        """
        if self._test_version is None:
            return True
        return self._test_version.reaches(version)

    def __repr__(self) -> str:
        """Show configured range."""
        return f"ConfiguredVersionGate({self._test_version})"

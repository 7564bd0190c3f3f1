"""Version gate protocol.

Answers whether the scanned codebase must run on a given PHP version.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from phpcompat.domain.model.php_version import PhpVersion


class VersionGateProtocol(Protocol):
    """Contract for version gates.

    Implementations must be side-effect free and safe to call
    from several threads at once.
    """

    def should_run_on_or_above(self, version: PhpVersion) -> bool:
        """Check if the codebase needs to run on version or higher.

        Args:
            version: Threshold version

        Returns:
            True if checks targeting version should run
        """
        ...

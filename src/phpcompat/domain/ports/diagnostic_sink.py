"""Diagnostic sink protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from phpcompat.domain.model.diagnostic import Diagnostic


class DiagnosticSinkProtocol(Protocol):
    """Contract for diagnostic sinks.

    Sniffs hand every rendered finding to the sink. The sink decides
    whether to keep, filter or forward it.
    """

    def add_warning(self, diagnostic: Diagnostic) -> bool:
        """Record a warning.

        Args:
            diagnostic: Rendered finding

        Returns:
            True if recorded, False if suppressed
        """
        ...

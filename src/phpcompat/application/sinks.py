"""In-memory diagnostic sink."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from phpcompat.domain.model.diagnostic import Diagnostic

logger = logging.getLogger(__name__)


def _sort_key(diagnostic: Diagnostic) -> tuple[object, ...]:
    """Order by location, then code, then data."""
    return (diagnostic.location, diagnostic.sniff_code, diagnostic.data)


class CollectingSink:
    """Diagnostic sink that keeps findings in memory.

    Thread-safe: sniffs running on worker threads may share one sink.
    Findings matching excluded_codes are counted, not kept.
    """

    def __init__(self, excluded_codes: frozenset[str] = frozenset()) -> None:
        """Initialize sink.

        Args:
            excluded_codes: Short codes, full codes or dotted prefixes to drop
        """
        self._excluded_codes = excluded_codes
        self._diagnostics: list[Diagnostic] = []
        self._suppressed = 0
        self._lock = threading.Lock()

    def add_warning(self, diagnostic: Diagnostic) -> bool:
        """Record a warning unless its code is excluded.

        Args:
            diagnostic: Rendered finding

        Returns:
            True if recorded, False if suppressed
        """
        if any(diagnostic.matches(code) for code in self._excluded_codes):
            logger.debug("Suppressed %s at %s", diagnostic.sniff_code, diagnostic.location)
            with self._lock:
                self._suppressed += 1
            return False

        with self._lock:
            self._diagnostics.append(diagnostic)
        return True

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Recorded findings ordered by location, then code."""
        with self._lock:
            return tuple(sorted(self._diagnostics, key=_sort_key))

    @property
    def suppressed_count(self) -> int:
        """Number of findings dropped by excluded_codes."""
        with self._lock:
            return self._suppressed

    def __len__(self) -> int:
        """Number of recorded findings."""
        with self._lock:
            return len(self._diagnostics)

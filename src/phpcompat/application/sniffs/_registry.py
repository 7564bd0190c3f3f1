"""Sniff registry.

Central registry of all sniffs with factory functions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from phpcompat.application.sniffs._base import BaseSniff
from phpcompat.application.sniffs.removed_optional_before_required_param import (
    RemovedOptionalBeforeRequiredParamSniff,
)

if TYPE_CHECKING:
    from phpcompat.domain.model.configuration import ScanConfig
    from phpcompat.domain.ports.sniff import SniffProtocol


# Order matters: sniffs run in this order
_ALL_SNIFFS: tuple[type[BaseSniff], ...] = (RemovedOptionalBeforeRequiredParamSniff,)


def default_sniffs() -> tuple[SniffProtocol, ...]:
    """Instantiate every registered sniff.

    Returns:
        Tuple of sniff instances
    """
    return tuple(sniff_cls() for sniff_cls in _ALL_SNIFFS)


def _fully_excluded(sniff: SniffProtocol, excluded: frozenset[str]) -> bool:
    """Every code of sniff is covered by an exclusion."""
    prefixes = {sniff.sniff_code}
    parts = sniff.sniff_code.split(".")
    prefixes.update(".".join(parts[:i]) for i in range(1, len(parts)))
    if prefixes & excluded:
        return True
    return all(
        code in excluded or f"{sniff.sniff_code}.{code}" in excluded for code in sniff.codes
    )


def sniffs_from_config(config: ScanConfig) -> tuple[SniffProtocol, ...]:
    """Instantiate sniffs not entirely disabled by config.excluded_codes.

    Partially excluded sniffs are kept; the sink drops their excluded codes.

    Args:
        config: Scan configuration

    Returns:
        Tuple of enabled sniffs
    """
    return tuple(
        sniff for sniff in default_sniffs() if not _fully_excluded(sniff, config.excluded_codes)
    )

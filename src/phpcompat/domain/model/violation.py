"""Parameter-order violation value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from phpcompat.domain.model.enums import Tier
    from phpcompat.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class ParameterOrderViolation:
    """Optional parameter declared before a required one.

    Attributes:
        offending_parameter: Name of the optional parameter
        required_parameter: Name of the nearest required parameter after it
        tier: Version threshold the violation belongs to
        anchor: Location of the optional parameter
    """

    offending_parameter: str
    required_parameter: str
    tier: Tier
    anchor: Location

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.offending_parameter:
            raise ValueError("offending_parameter must not be empty")
        if not self.required_parameter:
            raise ValueError("required_parameter must not be empty")

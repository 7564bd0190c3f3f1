"""Function signature aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from phpcompat.domain.model.location import Location
    from phpcompat.domain.model.parameter import ParameterDescriptor


@dataclass(frozen=True, slots=True)
class FunctionSignature:
    """Declared signature of a function, method, closure or arrow function.

    Attributes:
        name: Function name ("{closure}" for anonymous functions)
        location: Position of the function keyword
        parameters: Parameters in declaration order
    """

    name: str
    location: Location
    parameters: tuple[ParameterDescriptor, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("signature name must not be empty")
        if not isinstance(self.parameters, tuple):
            raise TypeError(f"parameters must be tuple, got {type(self.parameters).__name__}")

    @property
    def file(self) -> Path:
        """File the signature was declared in."""
        return self.location.file

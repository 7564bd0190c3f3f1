"""Function parameter descriptor value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from phpcompat.domain.model.location import Location
    from phpcompat.domain.model.token import Token


@dataclass(frozen=True, slots=True)
class ParameterDescriptor:
    """One declared parameter of a PHP function/method signature.

    Attributes:
        name: Parameter name including the sigil, e.g. "$foo"
        location: Position of the parameter variable token
        is_variadic: ...$rest parameter
        default: Tokens of the default value, None if required
        type_hint: Declared type as written, "" if untyped
        nullable_type: Type is explicitly marked nullable (?Type)
    """

    name: str
    location: Location
    is_variadic: bool = False
    default: tuple[Token, ...] | None = None
    type_hint: str = ""
    nullable_type: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("parameter name must not be empty")
        if self.location is None:
            raise TypeError("location must not be None")

    @property
    def has_default(self) -> bool:
        """Parameter is optional (declares a default value)."""
        return self.default is not None

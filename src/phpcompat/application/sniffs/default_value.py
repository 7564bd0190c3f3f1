"""Default-value classification.

Keeps token-format knowledge out of the sniffs: they only ask
whether a default value is null, and whether it is nothing but null.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from phpcompat.domain.model.token import Token


@dataclass(frozen=True, slots=True)
class DefaultValueClass:
    """Classification of a default-value token span.

    Attributes:
        contains_null: The null literal appears somewhere in the span
        only_null_and_trivia: Every token is null, whitespace or a comment
    """

    contains_null: bool
    only_null_and_trivia: bool

    @property
    def is_bare_null(self) -> bool:
        """Default value is exactly null, ignoring trivia."""
        return self.contains_null and self.only_null_and_trivia


def classify_default_value(tokens: Iterable[Token] | None) -> DefaultValueClass:
    """Classify the tokens of a default value.

    An empty or missing span contains no null; it vacuously contains
    nothing else either, so it is never a bare null.

    Args:
        tokens: Default-value tokens in source order

    Returns:
        DefaultValueClass for the span
    """
    contains_null = False
    only_null_and_trivia = True

    for token in tokens or ():
        if token.is_null:
            contains_null = True
        elif not token.is_trivia:
            only_null_and_trivia = False

    return DefaultValueClass(
        contains_null=contains_null,
        only_null_and_trivia=only_null_and_trivia,
    )

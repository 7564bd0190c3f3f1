"""Tokens of a default-value expression."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """Token classification relevant to default-value inspection.

    Only the distinctions the sniffs need are kept: the null literal,
    insignificant trivia, and everything else.
    """

    NULL = auto()  # null, NULL, Null
    WHITESPACE = auto()
    COMMENT = auto()  # // ..., # ..., /* ... */
    DOC_COMMENT = auto()  # /** ... */
    ANNOTATION = auto()  # // phpcs:ignore ...
    OTHER = auto()  # operators, literals, identifiers


TRIVIA_KINDS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.WHITESPACE,
        TokenKind.COMMENT,
        TokenKind.DOC_COMMENT,
        TokenKind.ANNOTATION,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """Single token of a parameter default value.

    Attributes:
        kind: Token classification
        content: Raw source text of the token
    """

    kind: TokenKind
    content: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.kind, TokenKind):
            raise TypeError(f"kind must be TokenKind, got {type(self.kind).__name__}")

    @property
    def is_trivia(self) -> bool:
        """Whitespace, comments and annotations carry no meaning."""
        return self.kind in TRIVIA_KINDS

    @property
    def is_null(self) -> bool:
        """Token is the null literal."""
        return self.kind is TokenKind.NULL

    @classmethod
    def null(cls, content: str = "null") -> Token:
        """Create a null literal token."""
        return cls(TokenKind.NULL, content)

    @classmethod
    def whitespace(cls, content: str = " ") -> Token:
        """Create a whitespace token."""
        return cls(TokenKind.WHITESPACE, content)

    @classmethod
    def comment(cls, content: str) -> Token:
        """Create a comment token."""
        return cls(TokenKind.COMMENT, content)

    @classmethod
    def other(cls, content: str) -> Token:
        """Create a token that is neither null nor trivia."""
        return cls(TokenKind.OTHER, content)

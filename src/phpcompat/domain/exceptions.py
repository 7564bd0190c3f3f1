"""Domain exceptions: all public errors of phpcompat.

All exceptions visible to users are defined in domain.
Application code raises these, never defines its own public exceptions.
"""


class PhpCompatError(Exception):
    """Base for all phpcompat error exceptions.

    Allows: except PhpCompatError to catch all library errors.
    """


class InvalidVersionError(PhpCompatError, ValueError):
    """PHP version string is not in MAJOR.MINOR form.

    Inherits ValueError for semantic correctness.

    Attributes:
        value: The rejected version string.
    """

    def __init__(self, value: str) -> None:
        """Initialize with the rejected value."""
        self.value = value
        super().__init__(f"invalid PHP version {value!r}, expected MAJOR.MINOR")


class InvalidTestVersionError(PhpCompatError, ValueError):
    """testVersion setting cannot be interpreted as a version range.

    Attributes:
        value: The rejected testVersion string.
        reason: Why it was rejected.
    """

    def __init__(self, value: str, reason: str) -> None:
        """Initialize with value and reason."""
        self.value = value
        self.reason = reason
        super().__init__(f"invalid testVersion {value!r}: {reason}")

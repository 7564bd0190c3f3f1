"""Source code location value object."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True, order=True)
class Location:
    """Position of a token in a scanned PHP file.

    Ordering is file, then line, then column, which is the order
    diagnostics are listed in reports.

    Attributes:
        file: Path to source file
        line: Line number (1-based, must be > 0)
        column: Column number (1-based, must be > 0)
    """

    file: Path
    line: int
    column: int = 1

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file is None:
            raise TypeError("file must not be None")
        if not isinstance(self.file, Path):
            object.__setattr__(self, "file", Path(self.file))
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column <= 0:
            raise ValueError(f"column must be > 0, got {self.column}")

    def __str__(self) -> str:
        """Format as file:line:column."""
        return f"{self.file}:{self.line}:{self.column}"

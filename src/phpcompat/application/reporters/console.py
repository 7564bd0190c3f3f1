"""Console reporter: ScanResult -> rich formatted output."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.table import Table

from phpcompat.application.reporters._base import BaseReporter
from phpcompat.domain.model.enums import Severity

if TYPE_CHECKING:
    from phpcompat.domain.model.diagnostic import Diagnostic
    from phpcompat.domain.model.scan_result import ScanResult

_SEVERITY_STYLE = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        width: Console width in characters.
        force_terminal: Emit colors even when output is not a TTY.
        show_codes: Add a column with the full sniff code.
        show_stats: Print scan statistics after the tables.
    """

    width: int = 120
    force_terminal: bool = False
    show_codes: bool = True
    show_stats: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter(BaseReporter):
    """Console reporter: one rich table per file."""

    def __init__(self, output: TextIO | None = None, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()
        self._console = Console(
            file=output if output is not None else sys.stdout,
            force_terminal=self._config.force_terminal,
            width=self._config.width,
        )

    def report(self, result: ScanResult) -> None:
        """Render scan result.

        Args:
            result: Complete scan result
        """
        console = self._console
        console.print()
        console.rule("[bold]PHP COMPATIBILITY[/bold]")

        for file, diagnostics in result.by_file().items():
            console.print(self._file_table(file, diagnostics))

        if self._config.show_stats:
            self._render_stats(result)

        status = "[green]PASSED[/green]" if result.passed else "[red]FAILED[/red]"
        console.print(f"[bold]Result:[/bold] {status}")

    def _file_table(self, file: str, diagnostics: tuple[Diagnostic, ...]) -> Table:
        """Build the table for one file."""
        table = Table(title=file, title_justify="left", expand=True)
        table.add_column("Line", justify="right", no_wrap=True)
        table.add_column("Severity", no_wrap=True)
        table.add_column("Message", ratio=1)
        if self._config.show_codes:
            table.add_column("Code", style="dim")

        for diagnostic in diagnostics:
            style = _SEVERITY_STYLE[diagnostic.severity]
            row = [
                f"{diagnostic.location.line}:{diagnostic.location.column}",
                f"[{style}]{diagnostic.severity.name}[/{style}]",
                diagnostic.message,
            ]
            if self._config.show_codes:
                row.append(diagnostic.code)
            table.add_row(*row)

        return table

    def _render_stats(self, result: ScanResult) -> None:
        """Render summary line."""
        stats = result.stats
        self._console.print(
            f"[bold]Signatures:[/bold] {stats.signatures_scanned}  "
            f"[bold]Parameters:[/bold] {stats.parameters_scanned}  "
            f"[bold]Warnings:[/bold] {result.warning_count}  "
            f"[bold]Errors:[/bold] {result.error_count}  "
            f"[bold]Suppressed:[/bold] {stats.diagnostics_suppressed}  "
            f"[dim]({stats.scan_time_ms:.1f} ms)[/dim]"
        )

"""Tests for reporters/console.py."""

import io

import pytest

from phpcompat.application.reporters.console import ConsoleConfig, ConsoleReporter
from phpcompat.domain.model.scan_result import ScanResult
from tests.factories import make_scan_result


def _render(result: ScanResult, config: ConsoleConfig | None = None) -> str:
    output = io.StringIO()
    ConsoleReporter(output, config).report(result)
    return output.getvalue()


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_passed(self) -> None:
        text = _render(ScanResult.empty())

        assert "PHP COMPATIBILITY" in text
        assert "PASSED" in text

    def test_tables_per_file(self) -> None:
        text = _render(make_scan_result())

        assert "src/a.php" in text
        assert "src/b.php" in text
        assert "12:14" in text
        assert "Deprecated80" in text
        assert "FAILED" in text

    def test_no_color_without_terminal(self) -> None:
        text = _render(make_scan_result())

        assert "\x1b[" not in text

    def test_stats_line(self) -> None:
        text = _render(make_scan_result())

        assert "Signatures: 5" in text
        assert "Suppressed: 2" in text

    def test_hide_codes_and_stats(self) -> None:
        text = _render(make_scan_result(), ConsoleConfig(show_codes=False, show_stats=False))

        assert "Deprecated80" not in text
        assert "Signatures:" not in text


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_defaults(self) -> None:
        config = ConsoleConfig()

        assert config.width == 120
        assert config.force_terminal is False

    def test_narrow_width_raises(self) -> None:
        with pytest.raises(ValueError, match="width must be >= 40"):
            ConsoleConfig(width=20)

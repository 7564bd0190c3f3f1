"""Tests for application/sinks.py."""

import threading
from pathlib import Path

from phpcompat.application.sinks import CollectingSink
from phpcompat.domain.model.diagnostic import Diagnostic
from phpcompat.domain.model.enums import Severity
from phpcompat.domain.model.location import Location
from tests.factories import make_location

SNIFF = "PHPCompatibility.FunctionDeclarations.RemovedOptionalBeforeRequiredParam"


def _diagnostic(code: str = "Deprecated80", line: int = 1, column: int = 1) -> Diagnostic:
    return Diagnostic(
        sniff_code=f"{SNIFF}.{code}",
        code=code,
        message="message",
        severity=Severity.WARNING,
        location=make_location(line=line, column=column),
    )


class TestCollectingSink:
    """Tests for CollectingSink."""

    def test_records_warning(self) -> None:
        sink = CollectingSink()

        assert sink.add_warning(_diagnostic()) is True
        assert len(sink) == 1
        assert sink.suppressed_count == 0

    def test_orders_by_location(self) -> None:
        sink = CollectingSink()
        sink.add_warning(_diagnostic(line=5))
        sink.add_warning(_diagnostic(line=2, column=9))
        sink.add_warning(_diagnostic(line=2, column=3))

        locations = [(d.location.line, d.location.column) for d in sink.diagnostics]

        assert locations == [(2, 3), (2, 9), (5, 1)]

    def test_orders_str_and_path_files(self) -> None:
        """Locations built from str and Path sort together."""
        sink = CollectingSink()
        sink.add_warning(
            Diagnostic(
                sniff_code=f"{SNIFF}.Deprecated80",
                code="Deprecated80",
                message="message",
                severity=Severity.WARNING,
                location=Location(file="b.php", line=1),  # type: ignore[arg-type]
            )
        )
        sink.add_warning(
            Diagnostic(
                sniff_code=f"{SNIFF}.Deprecated80",
                code="Deprecated80",
                message="message",
                severity=Severity.WARNING,
                location=Location(file=Path("a.php"), line=1),
            )
        )

        assert [d.location.file for d in sink.diagnostics] == [Path("a.php"), Path("b.php")]

    def test_suppresses_short_code(self) -> None:
        sink = CollectingSink(frozenset({"Deprecated81"}))

        assert sink.add_warning(_diagnostic("Deprecated81")) is False
        assert sink.add_warning(_diagnostic("Deprecated80")) is True
        assert [d.code for d in sink.diagnostics] == ["Deprecated80"]
        assert sink.suppressed_count == 1

    def test_suppresses_full_code(self) -> None:
        sink = CollectingSink(frozenset({f"{SNIFF}.Deprecated80"}))

        assert sink.add_warning(_diagnostic("Deprecated80")) is False

    def test_suppresses_sniff_prefix(self) -> None:
        sink = CollectingSink(frozenset({SNIFF}))

        sink.add_warning(_diagnostic("Deprecated80"))
        sink.add_warning(_diagnostic("Deprecated81"))

        assert sink.diagnostics == ()
        assert sink.suppressed_count == 2

    def test_partial_segment_is_not_a_prefix(self) -> None:
        """A dotted prefix must end on a segment boundary."""
        sink = CollectingSink(frozenset({"PHPCompatibility.Function"}))

        assert sink.add_warning(_diagnostic()) is True

    def test_concurrent_adds(self) -> None:
        sink = CollectingSink()

        def worker(offset: int) -> None:
            for i in range(100):
                sink.add_warning(_diagnostic(line=offset * 100 + i + 1))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(sink) == 800

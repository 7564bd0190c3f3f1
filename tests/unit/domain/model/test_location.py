"""Tests for domain/model/location.py."""

from pathlib import Path

import pytest

from phpcompat.domain.model.location import Location


class TestLocation:
    """Tests for Location."""

    def test_str(self) -> None:
        assert str(Location(file=Path("src/a.php"), line=3, column=14)) == "src/a.php:3:14"

    def test_default_column(self) -> None:
        assert Location(file=Path("a.php"), line=1).column == 1

    def test_ordering(self) -> None:
        """Locations order by file, line, column."""
        a = Location(file=Path("a.php"), line=2, column=5)
        b = Location(file=Path("a.php"), line=10, column=1)
        c = Location(file=Path("b.php"), line=1, column=1)

        assert sorted([c, b, a]) == [a, b, c]

    def test_is_frozen(self) -> None:
        loc = Location(file=Path("a.php"), line=1)
        with pytest.raises(AttributeError):
            loc.line = 2  # type: ignore[misc]


class TestLocationFailFirst:
    """Tests for FAIL-FIRST validation in Location."""

    def test_none_file_raises(self) -> None:
        with pytest.raises(TypeError, match="file must not be None"):
            Location(file=None, line=1)  # type: ignore[arg-type]

    def test_zero_line_raises(self) -> None:
        with pytest.raises(ValueError, match="line must be > 0"):
            Location(file=Path("a.php"), line=0)

    def test_zero_column_raises(self) -> None:
        with pytest.raises(ValueError, match="column must be > 0"):
            Location(file=Path("a.php"), line=1, column=0)


class TestLocationFileCoercion:
    """Tests for str paths passed as Location.file."""

    def test_str_file_becomes_path(self) -> None:
        loc = Location(file="src/a.php", line=1)  # type: ignore[arg-type]

        assert loc.file == Path("src/a.php")

    def test_str_and_path_files_compare(self) -> None:
        a = Location(file="a.php", line=1)  # type: ignore[arg-type]
        b = Location(file=Path("b.php"), line=1)

        assert a == Location(file=Path("a.php"), line=1)
        assert sorted([b, a]) == [a, b]

"""Tests for domain/model/enums.py."""

from phpcompat.domain.model.enums import Severity, Tier
from phpcompat.domain.model.php_version import PhpVersion


class TestTier:
    """Tests for Tier."""

    def test_codes(self) -> None:
        assert Tier.TIER_80.code == "Deprecated80"
        assert Tier.TIER_81.code == "Deprecated81"

    def test_versions(self) -> None:
        assert Tier.TIER_80.version == PhpVersion(8, 0)
        assert Tier.TIER_81.version == PhpVersion(8, 1)

    def test_codes_are_unique(self) -> None:
        assert len({tier.code for tier in Tier}) == len(Tier)


class TestSeverity:
    """Tests for Severity."""

    def test_members(self) -> None:
        assert {s.name for s in Severity} == {"ERROR", "WARNING"}

"""
Tests for the tactic catalog.
"""

import pytest

from attack_taxonomy.catalog.tactics import Domain, Tactic, parse_tactic, tactics_for_domain
from attack_taxonomy.errors import InvalidIdentifierError, InvalidTacticError


class TestTacticCatalog:
    """Tests for the Tactic members."""

    def test_member_count(self) -> None:
        """Test the catalog holds the Enterprise and Mobile tactics."""
        assert len(Tactic) == 28
        assert len(tactics_for_domain(Domain.ENTERPRISE)) == 14
        assert len(tactics_for_domain(Domain.MOBILE)) == 14

    def test_canonical_string(self) -> None:
        """Test str() gives the canonical identifier."""
        assert str(Tactic.TA0006) == "TA0006"
        assert Tactic.TA0006.value == "TA0006"
        assert Tactic.TA0006 == "TA0006"

    def test_metadata(self) -> None:
        """Test label, shortname and domain."""
        assert Tactic.TA0007.label == "Discovery"
        assert Tactic.TA0011.shortname == "command-and-control"
        assert Tactic.TA0031.label == "Credential Access"
        assert Tactic.TA0031.domain == Domain.MOBILE

    @pytest.mark.parametrize("tactic", list(Tactic))
    def test_round_trip(self, tactic: Tactic) -> None:
        """Test every tactic parses back from its canonical form."""
        assert parse_tactic(str(tactic)) is tactic


class TestParseTactic:
    """Tests for tactic parsing."""

    def test_discovery(self) -> None:
        """Test canonical and lowercase forms resolve to the same member."""
        assert parse_tactic("TA0007") is Tactic.TA0007
        assert parse_tactic("ta0007") is Tactic.TA0007

    def test_case_insensitive(self) -> None:
        """Test both casings yield the same value."""
        assert Tactic.parse("TA0001") is Tactic.parse("ta0001")
        assert Tactic.parse("Ta0043") is Tactic.TA0043

    def test_command_and_control_alias(self) -> None:
        """Test the command_and_control alias."""
        assert parse_tactic("command_and_control") is parse_tactic("TA0011")

    def test_shortnames_are_not_parse_aliases(self) -> None:
        """Test other tactic names are not accepted by parse."""
        with pytest.raises(InvalidTacticError):
            parse_tactic("credential_access")
        with pytest.raises(InvalidTacticError):
            parse_tactic("command-and-control")

    @pytest.mark.parametrize(
        "text",
        ["TA9999", "TA0099", "", "TA1", "TA0001x", " TA0001", "TA0012", "T1003", "discovery"],
    )
    def test_invalid(self, text: str) -> None:
        """Test unknown identifiers are rejected."""
        with pytest.raises(InvalidTacticError):
            parse_tactic(text)

    @pytest.mark.parametrize("value", [None, 7, b"TA0001"])
    def test_non_string(self, value: object) -> None:
        """Test non-string input is rejected."""
        with pytest.raises(InvalidTacticError):
            parse_tactic(value)

    def test_error_message(self) -> None:
        """Test the error names the kind and the rejected text."""
        with pytest.raises(InvalidTacticError) as exc_info:
            parse_tactic("TA9999")
        assert str(exc_info.value) == "invalid tactic identifier: 'TA9999'"
        assert exc_info.value.text == "TA9999"
        assert isinstance(exc_info.value, InvalidIdentifierError)
        assert isinstance(exc_info.value, ValueError)


class TestFromShortname:
    """Tests for kill-chain phase name resolution."""

    def test_hyphen_and_underscore(self) -> None:
        """Test both spellings of a phase name."""
        assert Tactic.from_shortname("credential-access") is Tactic.TA0006
        assert Tactic.from_shortname("credential_access") is Tactic.TA0006
        assert Tactic.from_shortname("Lateral_Movement") is Tactic.TA0008

    def test_domain(self) -> None:
        """Test the same phase name resolves per domain."""
        assert Tactic.from_shortname("impact") is Tactic.TA0040
        assert Tactic.from_shortname("impact", Domain.MOBILE) is Tactic.TA0034

    def test_mobile_only_phase(self) -> None:
        """Test mobile-only phases are not in the enterprise domain."""
        assert Tactic.from_shortname("network-effects", Domain.MOBILE) is Tactic.TA0038
        with pytest.raises(InvalidTacticError):
            Tactic.from_shortname("network-effects")

    def test_unknown(self) -> None:
        """Test unknown phase names raise."""
        with pytest.raises(InvalidTacticError):
            Tactic.from_shortname("world-domination")

    @pytest.mark.parametrize("value", [None, 7, b"impact"])
    def test_non_string(self, value: object) -> None:
        """Test non-string input is rejected like in parse."""
        with pytest.raises(InvalidTacticError):
            Tactic.from_shortname(value)

"""
Tactic Catalog

The closed set of ATT&CK tactics (Enterprise and Mobile matrices) and the
parser that turns identifier strings into `Tactic` members.
"""

from enum import Enum
from typing import Any

from attack_taxonomy.errors import InvalidTacticError


class Domain(str, Enum):
    """ATT&CK matrices that tactics are published under."""

    ENTERPRISE = "enterprise-attack"
    MOBILE = "mobile-attack"


class Tactic(str, Enum):
    """
    An ATT&CK tactic identifier.

    Members are named and valued by the canonical identifier ("TA0006") and
    carry the published label, the STIX kill-chain phase name and the matrix
    they belong to.
    """

    label: str
    shortname: str
    domain: Domain

    def __new__(cls, tactic_id: str, label: str, shortname: str, domain: Domain) -> "Tactic":
        obj = str.__new__(cls, tactic_id)
        obj._value_ = tactic_id
        obj.label = label
        obj.shortname = shortname
        obj.domain = domain
        return obj

    # Enterprise
    TA0001 = ("TA0001", "Initial Access", "initial-access", Domain.ENTERPRISE)
    TA0002 = ("TA0002", "Execution", "execution", Domain.ENTERPRISE)
    TA0003 = ("TA0003", "Persistence", "persistence", Domain.ENTERPRISE)
    TA0004 = ("TA0004", "Privilege Escalation", "privilege-escalation", Domain.ENTERPRISE)
    TA0005 = ("TA0005", "Defense Evasion", "defense-evasion", Domain.ENTERPRISE)
    TA0006 = ("TA0006", "Credential Access", "credential-access", Domain.ENTERPRISE)
    TA0007 = ("TA0007", "Discovery", "discovery", Domain.ENTERPRISE)
    TA0008 = ("TA0008", "Lateral Movement", "lateral-movement", Domain.ENTERPRISE)
    TA0009 = ("TA0009", "Collection", "collection", Domain.ENTERPRISE)
    TA0010 = ("TA0010", "Exfiltration", "exfiltration", Domain.ENTERPRISE)
    TA0011 = ("TA0011", "Command and Control", "command-and-control", Domain.ENTERPRISE)
    TA0040 = ("TA0040", "Impact", "impact", Domain.ENTERPRISE)
    TA0042 = ("TA0042", "Resource Development", "resource-development", Domain.ENTERPRISE)
    TA0043 = ("TA0043", "Reconnaissance", "reconnaissance", Domain.ENTERPRISE)

    # Mobile
    TA0027 = ("TA0027", "Initial Access", "initial-access", Domain.MOBILE)
    TA0028 = ("TA0028", "Persistence", "persistence", Domain.MOBILE)
    TA0029 = ("TA0029", "Privilege Escalation", "privilege-escalation", Domain.MOBILE)
    TA0030 = ("TA0030", "Defense Evasion", "defense-evasion", Domain.MOBILE)
    TA0031 = ("TA0031", "Credential Access", "credential-access", Domain.MOBILE)
    TA0032 = ("TA0032", "Discovery", "discovery", Domain.MOBILE)
    TA0033 = ("TA0033", "Lateral Movement", "lateral-movement", Domain.MOBILE)
    TA0034 = ("TA0034", "Impact", "impact", Domain.MOBILE)
    TA0035 = ("TA0035", "Collection", "collection", Domain.MOBILE)
    TA0036 = ("TA0036", "Exfiltration", "exfiltration", Domain.MOBILE)
    TA0037 = ("TA0037", "Command and Control", "command-and-control", Domain.MOBILE)
    TA0038 = ("TA0038", "Network Effects", "network-effects", Domain.MOBILE)
    TA0039 = ("TA0039", "Remote Service Effects", "remote-service-effects", Domain.MOBILE)
    TA0041 = ("TA0041", "Execution", "execution", Domain.MOBILE)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: Any) -> "Tactic":
        """
        Parse a tactic identifier.

        Accepts the canonical form ("TA0043"), its lowercase spelling
        ("ta0043") and the "command_and_control" alias.

        Raises:
            InvalidTacticError: If the text matches no tactic
        """
        if not isinstance(text, str):
            raise InvalidTacticError(text)
        try:
            return _LOOKUP[text.lower()]
        except KeyError:
            raise InvalidTacticError(text) from None

    @classmethod
    def from_shortname(cls, name: Any, domain: Domain = Domain.ENTERPRISE) -> "Tactic":
        """
        Resolve a kill-chain phase name such as "credential-access".

        Underscore spellings used in Sigma tags ("credential_access") are
        accepted as well.

        Raises:
            InvalidTacticError: If no tactic of the domain has that name
        """
        if not isinstance(name, str):
            raise InvalidTacticError(name)
        key = (domain, name.lower().replace("_", "-"))
        try:
            return _SHORTNAMES[key]
        except KeyError:
            raise InvalidTacticError(name) from None


_LOOKUP: dict[str, Tactic] = {t.value.lower(): t for t in Tactic}
# Only alias ever accepted by the parser; see DESIGN.md
_LOOKUP["command_and_control"] = Tactic.TA0011

_SHORTNAMES: dict[tuple[Domain, str], Tactic] = {(t.domain, t.shortname): t for t in Tactic}


def parse_tactic(text: Any) -> Tactic:
    """Parse a tactic identifier. See `Tactic.parse`."""
    return Tactic.parse(text)


def tactics_for_domain(domain: Domain) -> tuple[Tactic, ...]:
    """Get the tactics of one matrix, in declaration order."""
    return tuple(t for t in Tactic if t.domain == domain)

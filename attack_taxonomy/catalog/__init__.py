"""ATT&CK tactic and technique catalogs."""

from attack_taxonomy.catalog.tactics import (
    Domain,
    Tactic,
    parse_tactic,
    tactics_for_domain,
)
from attack_taxonomy.catalog.techniques import (
    ATTACK_VERSION,
    Technique,
    parent_of,
    parse_technique,
    subtechniques_of,
)

__all__ = [
    # Tactics
    "Domain",
    "Tactic",
    "parse_tactic",
    "tactics_for_domain",
    # Techniques
    "ATTACK_VERSION",
    "Technique",
    "parse_technique",
    "parent_of",
    "subtechniques_of",
]

"""
ATT&CK Taxonomy

Typed MITRE ATT&CK tactic and technique identifiers with strict parsing
of identifiers found in rule metadata, configuration and threat intel.
"""

__version__ = "0.1.0"

from attack_taxonomy.catalog import (
    Domain,
    Tactic,
    Technique,
    parse_tactic,
    parse_technique,
)
from attack_taxonomy.errors import (
    InvalidIdentifierError,
    InvalidTacticError,
    InvalidTechniqueError,
    TableLoadError,
)
from attack_taxonomy.mapping import MitreInfo

__all__ = [
    "__version__",
    # Catalogs
    "Domain",
    "Tactic",
    "Technique",
    "parse_tactic",
    "parse_technique",
    # Rule metadata
    "MitreInfo",
    # Errors
    "InvalidIdentifierError",
    "InvalidTacticError",
    "InvalidTechniqueError",
    "TableLoadError",
]

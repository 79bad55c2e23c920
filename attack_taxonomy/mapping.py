"""
Rule ATT&CK Mapping

The tactics and techniques a detection rule covers, with validation of
identifiers coming from rule files and extraction from Sigma-style tags.
"""

from collections.abc import Iterable
from typing import Annotated, Any

import structlog
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from attack_taxonomy.catalog.tactics import Tactic
from attack_taxonomy.catalog.techniques import Technique
from attack_taxonomy.config import get_settings
from attack_taxonomy.errors import InvalidTacticError, InvalidTechniqueError

logger = structlog.get_logger(__name__)

TAG_NAMESPACE = "attack"


def _coerce_tactic(value: Any) -> Tactic:
    if isinstance(value, Tactic):
        return value
    return Tactic.parse(value)


def _coerce_technique(value: Any) -> Technique:
    if isinstance(value, Technique):
        return value
    # Data written with the member name as tag, e.g. "T1003_006"
    if isinstance(value, str) and "_" in value and get_settings().accept_legacy_tags:
        value = value.replace("_", ".")
    return Technique.parse(value)


TacticField = Annotated[Tactic, BeforeValidator(_coerce_tactic)]
TechniqueField = Annotated[Technique, BeforeValidator(_coerce_technique)]


def _unique(items: Iterable[Any]) -> list[Any]:
    return list(dict.fromkeys(items))


def tactic_from_tag(name: str) -> Tactic | None:
    """Resolve the name part of an ``attack.*`` tag to a tactic, if it is one."""
    try:
        return Tactic.parse(name)
    except InvalidTacticError:
        pass
    try:
        return Tactic.from_shortname(name)
    except InvalidTacticError:
        return None


class MitreInfo(BaseModel):
    """
    ATT&CK coverage of a rule.

    Serializes identifiers in their canonical form ("TA0011", "T1003.006").
    """

    model_config = ConfigDict(frozen=True)

    tactics: list[TacticField] = Field(default_factory=list)
    techniques: list[TechniqueField] = Field(default_factory=list)

    @classmethod
    def from_tags(cls, tags: Iterable[str]) -> "MitreInfo":
        """
        Extract tactics and techniques from Sigma rule tags.

        Only tags in the ``attack`` namespace are considered. Tactics may be
        given by ID ("attack.ta0011") or kill-chain name
        ("attack.command_and_control"); techniques by ID ("attack.t1059.001").
        Other tags (groups, software, unknown IDs) are skipped.

        Args:
            tags: Rule tags, e.g. ["attack.execution", "attack.t1059.001"]

        Returns:
            MitreInfo with duplicates removed, in tag order
        """
        tactics: list[Tactic] = []
        techniques: list[Technique] = []

        for tag in tags:
            namespace, _, name = tag.strip().partition(".")
            if namespace.lower() != TAG_NAMESPACE or not name:
                continue

            tactic = tactic_from_tag(name)
            if tactic is not None:
                tactics.append(tactic)
                continue

            try:
                techniques.append(Technique.parse(name))
            except InvalidTechniqueError:
                logger.debug("Skipping unrecognized ATT&CK tag", tag=tag)

        return cls(tactics=_unique(tactics), techniques=_unique(techniques))

    def to_tags(self) -> list[str]:
        """Render as Sigma tags ("attack.credential_access", "attack.t1003.006")."""
        tags = [f"{TAG_NAMESPACE}.{t.shortname.replace('-', '_')}" for t in self.tactics]
        tags.extend(f"{TAG_NAMESPACE}.{t.value.lower()}" for t in self.techniques)
        return tags

    def merge(self, other: "MitreInfo") -> "MitreInfo":
        """Combine the coverage of two rules."""
        return MitreInfo(
            tactics=_unique([*self.tactics, *other.tactics]),
            techniques=_unique([*self.techniques, *other.techniques]),
        )

    @property
    def is_empty(self) -> bool:
        return not self.tactics and not self.techniques

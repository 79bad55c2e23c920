"""
Technique Catalog

The closed set of ATT&CK techniques and sub-techniques, generated from the
technique table, and the parser for technique identifier strings.
"""

from enum import Enum
from typing import Any

from attack_taxonomy.catalog.table import load_table
from attack_taxonomy.config import get_settings
from attack_taxonomy.errors import InvalidTechniqueError

# Members referenced by attack_taxonomy.catalog.constants; any table must provide them
NAMED_TECHNIQUE_IDS = (
    "T1003",
    "T1003.001",
    "T1003.006",
    "T1007",
    "T1041",
    "T1053.005",
    "T1055",
    "T1055.012",
    "T1059",
    "T1059.001",
    "T1059.003",
    "T1059.004",
    "T1071",
    "T1071.001",
    "T1078",
    "T1105",
    "T1110",
    "T1190",
    "T1486",
    "T1547.001",
    "T1566.001",
)

_TABLE = load_table(get_settings().techniques_file, required=NAMED_TECHNIQUE_IDS)


class Technique(str, Enum):
    """
    An ATT&CK technique or sub-technique identifier.

    Member names use an underscore separator (``Technique.T1003_006``) since
    dots are not valid in Python names; the value, ``str()`` and serialized
    form are always the canonical dotted identifier ("T1003.006").

    Each sub-technique is its own member. The parent relationship is derived
    from the identifier and exposed through ``parent`` and ``subtechniques``.
    """

    _ignore_ = ["_record"]

    label: str

    def __new__(cls, technique_id: str, label: str) -> "Technique":
        obj = str.__new__(cls, technique_id)
        obj._value_ = technique_id
        obj.label = label
        return obj

    for _record in _TABLE.techniques:
        vars()[_record.member_name] = (_record.id, _record.name)

    def __str__(self) -> str:
        return self.value

    @property
    def base(self) -> int:
        """Technique number, e.g. 1003 for T1003.006."""
        return int(self.value[1:5])

    @property
    def sub(self) -> int | None:
        """Sub-technique number, e.g. 6 for T1003.006."""
        return int(self.value[6:]) if self.is_subtechnique else None

    @property
    def is_subtechnique(self) -> bool:
        return "." in self.value

    @property
    def parent(self) -> "Technique | None":
        """The base technique of a sub-technique."""
        if not self.is_subtechnique:
            return None
        return type(self)(self.value[:5])

    @property
    def subtechniques(self) -> "tuple[Technique, ...]":
        """Sub-techniques of a base technique, ordered by number."""
        return _CHILDREN.get(self, ())

    @property
    def full_label(self) -> str:
        """Label qualified with the parent's, e.g. "OS Credential Dumping: DCSync"."""
        parent = self.parent
        return f"{parent.label}: {self.label}" if parent else self.label

    @classmethod
    def parse(cls, text: Any) -> "Technique":
        """
        Parse a technique identifier.

        Accepts "T1003.006" / "t1003.006" for sub-techniques and
        "T1003" / "t1003" for techniques.

        Raises:
            InvalidTechniqueError: If the text matches no technique
        """
        if not isinstance(text, str):
            raise InvalidTechniqueError(text)
        try:
            return _LOOKUP[text.lower()]
        except KeyError:
            raise InvalidTechniqueError(text) from None


_LOOKUP: dict[str, Technique] = {t.value.lower(): t for t in Technique}

_CHILDREN: dict[Technique, tuple[Technique, ...]] = {}
for _technique in Technique:
    if _technique.is_subtechnique:
        _CHILDREN[_technique.parent] = _CHILDREN.get(_technique.parent, ()) + (_technique,)
del _technique

ATTACK_VERSION = _TABLE.attack_version


def parse_technique(text: Any) -> Technique:
    """Parse a technique identifier. See `Technique.parse`."""
    return Technique.parse(text)


def parent_of(technique: Technique) -> Technique | None:
    """Get the base technique of a sub-technique (None for base techniques)."""
    return technique.parent


def subtechniques_of(technique: Technique) -> tuple[Technique, ...]:
    """Get the sub-techniques of a base technique."""
    return technique.subtechniques

"""
Technique Table

Pydantic models for the JSON technique table the technique catalog is
built from, plus loading from the packaged copy or an override file.
"""

import json
from collections.abc import Iterable
from importlib import resources
from pathlib import Path
from typing import Annotated

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from attack_taxonomy.errors import TableLoadError

logger = structlog.get_logger(__name__)

TECHNIQUE_ID_PATTERN = r"^T\d{4}(\.\d{3})?$"
PACKAGED_TABLE = "data/enterprise-attack.json"


class TechniqueRecord(BaseModel):
    """One technique or sub-technique row."""

    model_config = ConfigDict(frozen=True)

    id: Annotated[str, Field(pattern=TECHNIQUE_ID_PATTERN)]
    name: str

    @property
    def is_subtechnique(self) -> bool:
        return "." in self.id

    @property
    def parent_id(self) -> str | None:
        return self.id.split(".")[0] if self.is_subtechnique else None

    @property
    def member_name(self) -> str:
        """Enum member name, e.g. "T1003_006"."""
        return self.id.replace(".", "_")

    @property
    def sort_key(self) -> tuple[int, int]:
        base, _, sub = self.id[1:].partition(".")
        return int(base), int(sub or 0)


class TechniqueTable(BaseModel):
    """A full technique table for one ATT&CK domain."""

    domain: str = "enterprise-attack"
    attack_version: str | None = None
    techniques: list[TechniqueRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_consistency(self) -> "TechniqueTable":
        """Reject duplicate IDs and sub-techniques without a parent row."""
        seen: set[str] = set()
        for record in self.techniques:
            if record.id in seen:
                raise ValueError(f"duplicate technique id {record.id}")
            seen.add(record.id)

        orphans = [
            r.id for r in self.techniques if r.is_subtechnique and r.parent_id not in seen
        ]
        if orphans:
            raise ValueError(f"sub-techniques without parent: {', '.join(orphans)}")
        return self

    def sorted(self) -> "TechniqueTable":
        """Copy of the table ordered by technique and sub-technique number."""
        return self.model_copy(
            update={"techniques": sorted(self.techniques, key=lambda r: r.sort_key)}
        )


def load_table(path: Path | None = None, required: Iterable[str] = ()) -> TechniqueTable:
    """
    Load a technique table.

    Args:
        path: Table file to read; the packaged Enterprise table if omitted
        required: Technique IDs the table must contain

    Returns:
        The validated table, sorted by technique number

    Raises:
        TableLoadError: If the file is missing, not a valid table, or lacks
            a required ID
    """
    try:
        if path is None:
            raw = resources.files("attack_taxonomy.catalog").joinpath(PACKAGED_TABLE).read_text(
                encoding="utf-8"
            )
        else:
            raw = Path(path).read_text(encoding="utf-8")
        table = TechniqueTable.model_validate(json.loads(raw))
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        raise TableLoadError(f"cannot load technique table {path or PACKAGED_TABLE}: {e}") from e

    present = {r.id for r in table.techniques}
    missing = [technique_id for technique_id in required if technique_id not in present]
    if missing:
        raise TableLoadError(
            f"technique table {path or PACKAGED_TABLE} is missing required IDs: {', '.join(missing)}"
        )

    if path is not None:
        logger.info(
            "Loaded technique table override",
            source=str(path),
            domain=table.domain,
            version=table.attack_version,
            techniques=len(table.techniques),
        )
    return table.sorted()

"""
Technique Table Generator

Builds the technique table from a MITRE ATT&CK STIX 2.1 bundle already on
disk (e.g. enterprise-attack.json from the mitre/cti repository).
"""

import json
import re
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from attack_taxonomy.catalog.table import (
    TECHNIQUE_ID_PATTERN,
    TechniqueRecord,
    TechniqueTable,
)
from attack_taxonomy.errors import TableLoadError

logger = structlog.get_logger(__name__)

ATTACK_SOURCE_NAME = "mitre-attack"

_ID_RE = re.compile(TECHNIQUE_ID_PATTERN)


def load_bundle(path: Path) -> dict[str, Any]:
    """Read a STIX bundle from disk."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise TableLoadError(f"cannot read STIX bundle {path}: {e}") from e

    if not isinstance(data, dict) or data.get("type") != "bundle":
        raise TableLoadError(f"{path} is not a STIX bundle")
    return data


def _external_id(obj: dict[str, Any]) -> str | None:
    return next(
        (
            ref.get("external_id")
            for ref in obj.get("external_references", [])
            if ref.get("source_name") == ATTACK_SOURCE_NAME
        ),
        None,
    )


def _parse_attack_pattern(obj: dict[str, Any]) -> TechniqueRecord | None:
    """Convert one attack-pattern object, or None if it should not be modeled."""
    # Skip revoked/deprecated
    if obj.get("revoked") or obj.get("x_mitre_deprecated"):
        return None

    technique_id = _external_id(obj)
    if not technique_id or not _ID_RE.match(technique_id):
        return None

    return TechniqueRecord(id=technique_id, name=(obj.get("name") or "").strip())


def _attack_version(bundle: dict[str, Any]) -> str | None:
    for obj in bundle.get("objects", []):
        if obj.get("type") == "x-mitre-collection":
            return obj.get("x_mitre_version")
    return None


def build_table(bundle: dict[str, Any], domain: str = "enterprise-attack") -> TechniqueTable:
    """
    Build a technique table from a STIX bundle.

    Args:
        bundle: Parsed STIX bundle
        domain: ATT&CK domain the bundle describes

    Returns:
        Table of all current techniques and sub-techniques, sorted

    Raises:
        TableLoadError: If the resulting table is inconsistent
    """
    records: dict[str, TechniqueRecord] = {}
    skipped = 0

    for obj in bundle.get("objects", []):
        if obj.get("type") != "attack-pattern":
            continue
        record = _parse_attack_pattern(obj)
        if record is None:
            skipped += 1
            continue
        records[record.id] = record

    try:
        table = TechniqueTable(
            domain=domain,
            attack_version=_attack_version(bundle),
            techniques=list(records.values()),
        ).sorted()
    except ValidationError as e:
        raise TableLoadError(f"bundle produced an invalid technique table: {e}") from e

    logger.info(
        "Built technique table",
        domain=domain,
        version=table.attack_version,
        techniques=len(table.techniques),
        skipped=skipped,
    )
    return table


def write_table(table: TechniqueTable, path: Path) -> None:
    """Write a technique table as JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(table.model_dump(mode="json"), indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    logger.debug("Wrote technique table", path=str(path))

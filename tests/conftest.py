"""
Pytest configuration and shared fixtures.
"""

from collections.abc import Iterator
from typing import Any

import pytest

from attack_taxonomy.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Re-read settings from the environment for each test."""
    reset_settings()
    yield
    reset_settings()


def _attack_pattern(technique_id: str, name: str, **extra: Any) -> dict[str, Any]:
    return {
        "type": "attack-pattern",
        "id": f"attack-pattern--{technique_id.lower().replace('.', '-')}",
        "name": name,
        "external_references": [
            {
                "source_name": "mitre-attack",
                "external_id": technique_id,
                "url": f"https://attack.mitre.org/techniques/{technique_id.replace('.', '/')}",
            }
        ],
        "x_mitre_is_subtechnique": "." in technique_id,
        **extra,
    }


@pytest.fixture
def stix_bundle() -> dict[str, Any]:
    """Small enterprise-attack style STIX bundle."""
    return {
        "type": "bundle",
        "id": "bundle--test",
        "objects": [
            {
                "type": "x-mitre-collection",
                "name": "Enterprise ATT&CK",
                "x_mitre_version": "15.1",
            },
            {
                "type": "x-mitre-tactic",
                "name": "Credential Access",
                "x_mitre_shortname": "credential-access",
                "external_references": [
                    {"source_name": "mitre-attack", "external_id": "TA0006"}
                ],
            },
            _attack_pattern("T1003.006", "DCSync"),
            _attack_pattern("T1003", "OS Credential Dumping"),
            _attack_pattern("T1003.001", "LSASS Memory"),
            _attack_pattern("T1059", "Command and Scripting Interpreter"),
            _attack_pattern("T1059.001", "PowerShell"),
            _attack_pattern("T1064", "Scripting", x_mitre_deprecated=True),
            _attack_pattern("T1086", "PowerShell", revoked=True),
            {
                "type": "attack-pattern",
                "name": "CAPEC only",
                "external_references": [{"source_name": "capec", "external_id": "CAPEC-1"}],
            },
            {"type": "intrusion-set", "name": "APT28"},
        ],
    }


@pytest.fixture
def c2_rule_tags() -> list[str]:
    """Tags of a Sigma rule detecting C2 traffic."""
    return [
        "attack.command_and_control",
        "attack.t1041",
        "attack.g0016",
        "attack.s0002",
        "cve.2021-44228",
    ]

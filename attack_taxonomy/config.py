"""Taxonomy Configuration."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class TaxonomySettings(BaseSettings):
    """Settings for the ATT&CK taxonomy catalogs."""

    model_config = SettingsConfigDict(env_prefix="ATTACK_TAXONOMY_")

    # Alternative technique table (e.g. one built with `attack-taxonomy generate`)
    techniques_file: Path | None = None

    # Accept "T1003_006" style tags when deserializing models
    accept_legacy_tags: bool = True


@lru_cache(maxsize=1)
def get_settings() -> TaxonomySettings:
    """Get the process-wide settings instance."""
    return TaxonomySettings()


def reset_settings() -> None:
    """Drop the cached settings (useful for testing)."""
    get_settings.cache_clear()

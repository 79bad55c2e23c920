"""ATT&CK Taxonomy CLI."""

from attack_taxonomy.cli.main import app

__all__ = ["app"]

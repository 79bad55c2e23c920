"""Exceptions raised by the taxonomy catalogs."""

from typing import Any


class InvalidIdentifierError(ValueError):
    """Raised when a string does not name a modeled identifier."""

    kind = "identifier"

    def __init__(self, text: Any) -> None:
        self.text = text
        super().__init__(f"invalid {self.kind} identifier: {text!r}")


class InvalidTacticError(InvalidIdentifierError):
    """Raised when a string is not a known tactic identifier."""

    kind = "tactic"


class InvalidTechniqueError(InvalidIdentifierError):
    """Raised when a string is not a known technique identifier."""

    kind = "technique"


class TableLoadError(Exception):
    """Raised when a technique table or STIX bundle cannot be loaded."""

    pass

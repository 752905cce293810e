"""Exception types raised by the exclusion domain.

Parsing raises :class:`ExclusionSyntaxError`; expansion raises
:class:`MalformedBlockError` or :class:`MalformedDateError`.  All derive
from :class:`ExclusionError` so the service layer can map them to a
failed ServiceResult in one place.
"""

from __future__ import annotations


class ExclusionError(ValueError):
    """Base class for every exclusion rule failure."""


class ExclusionSyntaxError(ExclusionError):
    """A rule line matches none of the recognized grammars."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"Unrecognized exclusion syntax: '{line}'.")


class MalformedBlockError(ExclusionError):
    """A time block could not be decoded into an interval."""

    def __init__(self, block: str) -> None:
        self.block = block
        super().__init__(f"Malformed time block '{block}'.")


class MalformedDateError(ExclusionError):
    """A ``day on`` / ``day off`` date could not be decoded."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Malformed date '{text}'.")

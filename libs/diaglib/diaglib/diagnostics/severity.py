"""Diagnostic severity levels."""

from __future__ import annotations

from enum import Enum


class Severity(Enum):
    """Severity level of a diagnostic. Closed set: errors and warnings only."""

    ERROR = "E"
    WARNING = "W"

    def __str__(self) -> str:
        return _SEVERITY_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> Severity | None:
        """Look up a severity by its textual name, ignoring case."""
        for member in cls:
            if str(member).lower() == name.lower():
                return member
        return None


_SEVERITY_NAMES: dict[Severity, str] = {
    Severity.ERROR: "Error",
    Severity.WARNING: "Warning",
}

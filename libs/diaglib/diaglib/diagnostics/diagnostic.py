"""Diagnostic representation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from diaglib.diagnostics.location import Source
from diaglib.diagnostics.severity import Severity


@dataclass(frozen=True)
class Description:
    """What a diagnostic says."""

    summary: str  # single line
    detail: str = ""
    address: str = ""


@runtime_checkable
class Diagnostic(Protocol):
    """Anything exposing a severity, a description and a source is a diagnostic."""

    @property
    def severity(self) -> Severity: ...

    @property
    def description(self) -> Description: ...

    @property
    def source(self) -> Source: ...


@dataclass(frozen=True)
class SimpleDiagnostic:
    """A diagnostic built directly from its three parts."""

    severity: Severity
    description: Description
    source: Source = field(default_factory=Source)


@dataclass(frozen=True)
class NativeError:
    """A foreign exception carried as an error diagnostic.

    The original exception stays available as ``err`` so that it can be
    recovered through ``DiagnosticsError.wrapped_errors()``.
    """

    err: BaseException

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def description(self) -> Description:
        return Description(summary=str(self.err))

    @property
    def source(self) -> Source:
        return Source()


def sourceless(severity: Severity, summary: str, detail: str = "") -> SimpleDiagnostic:
    """Build a diagnostic that is not tied to any source location."""
    return SimpleDiagnostic(severity, Description(summary=summary, detail=detail))


def simple_warning(message: str) -> SimpleDiagnostic:
    return sourceless(Severity.WARNING, message)

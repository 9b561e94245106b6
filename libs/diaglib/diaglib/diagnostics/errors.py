"""Exception types that carry a diagnostics collection through error-only APIs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from diaglib.diagnostics.diagnostic import NativeError
from diaglib.diagnostics.severity import Severity

if TYPE_CHECKING:
    from diaglib.diagnostics.collection import Diagnostics


class _DiagnosticsWrapper(Exception):
    """Shared rendering for the two diagnostics-carrying exception types."""

    empty_message = "no errors"

    def __init__(self, diagnostics: Diagnostics) -> None:
        super().__init__(diagnostics)
        self.diagnostics = diagnostics

    def _header(self) -> str:
        return f"{len(self.diagnostics)} problems:"

    def __str__(self) -> str:
        diags = self.diagnostics
        if len(diags) == 0:
            # Not constructed for empty collections; kept for completeness.
            return self.empty_message
        if len(diags) == 1:
            return _describe(diags[0])

        lines = [self._header()]
        for diag in diags:
            lines.append(f"\n- {_describe(diag)}")
        return "\n".join(lines)


class DiagnosticsError(_DiagnosticsWrapper):
    """
    Fatal view of a diagnostics collection, as returned by ``Diagnostics.err()``.

    ``wrapped_errors()`` exposes the original exceptions behind any
    opaquely-wrapped diagnostics, so chain-walking callers can reach them.
    """

    def wrapped_errors(self) -> list[BaseException]:
        return [diag.err for diag in self.diagnostics if isinstance(diag, NativeError)]


class NonFatalError(_DiagnosticsWrapper):
    """
    Diagnostics that should not halt processing.

    Returned by ``Diagnostics.err_with_warnings()`` for warnings-only
    collections and always by ``Diagnostics.non_fatal_err()``. Catch or
    ``isinstance``-check this type to tell it apart from ``DiagnosticsError``.
    """

    empty_message = "no errors or warnings"

    def _header(self) -> str:
        if any(diag.severity == Severity.ERROR for diag in self.diagnostics):
            return super()._header()
        return f"{len(self.diagnostics)} warnings:"


def _describe(diag) -> str:
    desc = diag.description
    if not desc.detail:
        return desc.summary
    return f"{desc.summary}: {desc.detail}"

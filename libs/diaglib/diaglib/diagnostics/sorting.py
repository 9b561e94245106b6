"""Presentation ordering for diagnostics."""

from __future__ import annotations

import os
from collections.abc import MutableSequence

from diaglib.diagnostics.diagnostic import Diagnostic
from diaglib.diagnostics.severity import Severity

# Warnings are presented before errors.
_SEVERITY_RANK: dict[Severity, int] = {
    Severity.WARNING: 0,
    Severity.ERROR: 1,
}


def sort_key(diag: Diagnostic) -> tuple:
    """
    Return the ordering key for one diagnostic.

    Keys compare by severity, then sourceless before sourced, then by subject:
    shallower paths first (fewer separators), filename, start byte, end byte.
    Diagnostics whose keys tie are left in their original relative order by
    the stable sort in ``sort_diagnostics``.
    """
    rank = _SEVERITY_RANK[diag.severity]
    subject = diag.source.subject
    if subject is None:
        return (rank, 0)
    return (
        rank,
        1,
        subject.filename.count(os.sep),
        subject.filename,
        subject.start.byte,
        subject.end.byte,
    )


def sort_diagnostics(diags: MutableSequence[Diagnostic]) -> None:
    """Sort ``diags`` in place. Stable: equal keys keep their input order."""
    diags[:] = sorted(diags, key=sort_key)

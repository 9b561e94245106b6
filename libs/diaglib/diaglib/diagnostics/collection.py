"""Diagnostics collection: accumulates findings while processing some input."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from diaglib.diagnostics.diagnostic import Diagnostic, NativeError
from diaglib.diagnostics.errors import DiagnosticsError, NonFatalError
from diaglib.diagnostics.severity import Severity
from diaglib.diagnostics.sorting import sort_diagnostics
from diaglib.diagnostics.unwrap import get_type

logger = logging.getLogger(__name__)


class Diagnostics(Sequence[Diagnostic]):
    """
    An ordered list of diagnostics.

    Collections are built with ``append()``, which returns ``None`` instead of
    an empty collection, so "no diagnostics" is always spelled ``None``. Order
    is insertion order until ``sort()`` is called. Duplicates are kept.
    """

    def __init__(self, items: Iterable[Diagnostic] = ()) -> None:
        self._items: list[Diagnostic] = list(items)

    @overload
    def __getitem__(self, index: int) -> Diagnostic: ...

    @overload
    def __getitem__(self, index: slice) -> list[Diagnostic]: ...

    def __getitem__(self, index):
        # Slices are plain lists; an empty Diagnostics is never handed out.
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Diagnostics):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Diagnostics({self._items!r})"

    def append(self, *items: object) -> Diagnostics | None:
        """Return a new collection with ``items`` accumulated after this one's."""
        return append(self, *items)

    def has_errors(self) -> bool:
        """Return True if any diagnostic has error severity."""
        return any(d.severity == Severity.ERROR for d in self._items)

    def errors(self) -> Diagnostics | None:
        return _filtered(self._items, Severity.ERROR)

    def warnings(self) -> Diagnostics | None:
        return _filtered(self._items, Severity.WARNING)

    def err(self) -> DiagnosticsError | None:
        """
        Flatten the collection into a single exception, or None if it has no errors.

        Warnings that are not accompanied by at least one error are lost on
        this path, since error-only APIs have no way to report them. Use
        ``err_with_warnings()`` where the caller understands ``NonFatalError``.
        """
        if not self.has_errors():
            return None
        return DiagnosticsError(self)

    def err_with_warnings(self) -> DiagnosticsError | NonFatalError | None:
        """
        Like ``err()``, but a warnings-only collection becomes a ``NonFatalError``.

        Only for callers that check for ``NonFatalError``; callers expecting
        ``None`` to mean success should use ``err()``.
        """
        if len(self) == 0:
            return None
        if self.has_errors():
            return self.err()
        return NonFatalError(self)

    def non_fatal_err(self) -> NonFatalError | None:
        """Return the collection as a ``NonFatalError`` whatever its severities."""
        if len(self) == 0:
            return None
        return NonFatalError(self)

    def sort(self) -> None:
        """
        Order the collection in place for presentation.

        Warnings before errors, sourceless before sourced, shallow paths before
        deep ones, then by position within each file. Diagnostics that do not
        differ by any of these keep their relative order.
        """
        sort_diagnostics(self._items)


def append(diags: Diagnostics | None, *items: object) -> Diagnostics | None:
    """
    Accumulate ``items`` onto ``diags`` and return the result.

    Each item may be None (skipped), a diagnostic, a ``Diagnostics``, a
    ``DiagnosticsError`` or ``NonFatalError`` (unwrapped), an exception group
    (each member wrapped), or any other exception (wrapped, unless its chain
    hides a diagnostics collection, which is unwrapped instead). Returns None
    rather than an empty collection.

    Raises:
        TypeError: If an item is none of the above.
    """
    result: list[Diagnostic] = list(diags) if diags is not None else []
    for item in items:
        _accumulate(result, item)

    if not result:
        return None
    return Diagnostics(result)


def _accumulate(into: list[Diagnostic], item: object) -> None:
    if item is None:
        return
    if isinstance(item, Diagnostic):
        into.append(item)
    elif isinstance(item, Diagnostics):
        into.extend(item)
    elif isinstance(item, (DiagnosticsError, NonFatalError)):
        _accumulate(into, item.diagnostics)
    elif isinstance(item, BaseExceptionGroup):
        into.extend(NativeError(err) for err in item.exceptions)
    elif isinstance(item, BaseException):
        hidden = get_type(item, (DiagnosticsError, NonFatalError))
        if hidden is not None:
            logger.debug("Unpicking diagnostics wrapped in %s", type(item).__name__)
            _accumulate(into, hidden.diagnostics)
        else:
            logger.debug("Wrapping %s as an error diagnostic", type(item).__name__)
            into.append(NativeError(item))
    else:
        raise TypeError(f"can't construct diagnostic(s) from {type(item).__name__}")


def _filtered(items: Iterable[Diagnostic], severity: Severity) -> Diagnostics | None:
    selected = [d for d in items if d.severity == severity]
    if not selected:
        return None
    return Diagnostics(selected)

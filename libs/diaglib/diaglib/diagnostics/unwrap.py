"""Exception-chain traversal for finding values hidden inside wrapped errors."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeVar

from diaglib.diagnostics.errors import DiagnosticsError

E = TypeVar("E", bound=BaseException)


def walk(err: BaseException) -> Iterator[BaseException]:
    """
    Yield ``err`` and every exception it wraps, depth first.

    An exception wraps its explicit ``__cause__`` (``raise ... from``) and, for
    a ``DiagnosticsError``, whatever ``wrapped_errors()`` returns. The implicit
    ``__context__`` is not followed: an exception raised while handling another
    does not wrap it. Each exception is yielded once even when the chain loops
    back on itself.
    """
    seen: set[int] = set()
    stack = [err]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current

        children: list[BaseException] = []
        if current.__cause__ is not None:
            children.append(current.__cause__)
        if isinstance(current, DiagnosticsError):
            children.extend(current.wrapped_errors())
        stack.extend(reversed(children))


def get_type(err: BaseException, cls: type[E] | tuple[type[E], ...]) -> E | None:
    """Return the first exception in ``err``'s chain that is an instance of ``cls``."""
    for candidate in walk(err):
        if isinstance(candidate, cls):
            return candidate
    return None


def contains_type(err: BaseException, cls: type[BaseException] | tuple[type[BaseException], ...]) -> bool:
    return get_type(err, cls) is not None

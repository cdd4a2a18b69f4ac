"""Generic helpers for walking exception cause chains."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeVar

from .error import TraceError

E = TypeVar("E", bound=BaseException)


def walk(err: BaseException | None) -> Iterator[BaseException]:
    """Yield ``err`` and each successive cause.

    TraceErrors are followed through ``unwrap()``, other exceptions through
    ``__cause__``. Stops at None or at an exception already yielded.
    """
    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.unwrap() if isinstance(current, TraceError) else current.__cause__


def find(err: BaseException | None, exc_type: type[E]) -> E | None:
    """Return the first error in the chain that is an instance of ``exc_type``."""
    for candidate in walk(err):
        if isinstance(candidate, exc_type):
            return candidate
    return None


def root_cause(err: BaseException | None) -> BaseException | None:
    """Return the innermost error of the chain, or None for an empty chain."""
    last: BaseException | None = None
    for last in walk(err):
        pass
    return last

"""traceerrors — annotate errors with messages and the call sites that raised them.

Convenience API (delegates to a default Annotator):
    traceerrors.new(message)              -> new TraceError
    traceerrors.newf(format, *args)       -> new TraceError, %-formatted
    traceerrors.wrap(err, message)        -> annotate err (None stays None)
    traceerrors.wrapf(err, format, *args) -> annotate err, %-formatted
    traceerrors.stack_trace(err)          -> call sites along the chain, oldest first

DI API (construct your own Annotator):
    from traceerrors.core import Annotator, TraceConfig
    annotator = Annotator(config=TraceConfig(include_trace=False))
    raise annotator.wrap(exc, "loading settings")
"""

from __future__ import annotations

from .core import (
    Annotator,
    TraceConfig,
    TraceError,
    annotate_errors,
    default_annotator,
    find,
    root_cause,
    stack_trace,
    walk,
)


def new(message: str, *, stacklevel: int = 1) -> Exception:
    """Create a TraceError recording the caller's location."""
    return default_annotator().new(message, stacklevel=stacklevel + 1)


def newf(format: str, *args: object, stacklevel: int = 1) -> Exception:
    return default_annotator().newf(format, *args, stacklevel=stacklevel + 1)


def wrap(err: BaseException | None, message: str, *, stacklevel: int = 1) -> Exception | None:
    """Annotate ``err`` with a message and the caller's location. None in, None out."""
    return default_annotator().wrap(err, message, stacklevel=stacklevel + 1)


def wrapf(
    err: BaseException | None,
    format: str,
    *args: object,
    stacklevel: int = 1,
) -> Exception | None:
    return default_annotator().wrapf(err, format, *args, stacklevel=stacklevel + 1)


__all__ = [
    "Annotator",
    "TraceConfig",
    "TraceError",
    "annotate_errors",
    "find",
    "new",
    "newf",
    "root_cause",
    "stack_trace",
    "walk",
    "wrap",
    "wrapf",
]

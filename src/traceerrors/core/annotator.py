"""Annotator — the DI-constructed entry point for building TraceErrors."""

from __future__ import annotations

from .config import TraceConfig
from .error import TraceError
from .frames import capture_location


class Annotator:
    """Builds TraceErrors that carry this annotator's config.

    ``stacklevel`` follows ``warnings.warn``: 1 records the direct caller of
    the method, 2 that caller's caller, and so on. Each call captures exactly
    one call site.
    """

    def __init__(self, config: TraceConfig | None = None) -> None:
        self.config = config or TraceConfig()

    def new(self, message: str, *, stacklevel: int = 1) -> Exception:
        return TraceError(
            message,
            location=capture_location(stacklevel + 1),
            config=self.config,
        )

    def newf(self, format: str, *args: object, stacklevel: int = 1) -> Exception:
        return TraceError(
            _interpolate(format, args),
            location=capture_location(stacklevel + 1),
            config=self.config,
        )

    def wrap(
        self,
        err: BaseException | None,
        message: str,
        *,
        stacklevel: int = 1,
    ) -> Exception | None:
        """Annotate ``err``. Wrapping None returns None without building a node."""
        if err is None:
            return None
        return TraceError(
            message,
            cause=err,
            location=capture_location(stacklevel + 1),
            config=self.config,
        )

    def wrapf(
        self,
        err: BaseException | None,
        format: str,
        *args: object,
        stacklevel: int = 1,
    ) -> Exception | None:
        if err is None:
            return None
        return TraceError(
            _interpolate(format, args),
            cause=err,
            location=capture_location(stacklevel + 1),
            config=self.config,
        )


def _interpolate(format: str, args: tuple[object, ...]) -> str:
    """printf-style interpolation; without args the format is used as-is."""
    if not args:
        return format
    return format % args


_default_annotator: Annotator | None = None


def default_annotator() -> Annotator:
    """Return the process-wide Annotator built from the default config."""
    global _default_annotator
    if _default_annotator is None:
        _default_annotator = Annotator()
    return _default_annotator

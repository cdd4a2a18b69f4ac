"""Call-site capture for error construction."""

from __future__ import annotations

import inspect

UNKNOWN_LOCATION = "unknown"


def capture_location(skip: int = 2) -> str:
    """Describe the frame ``skip`` levels above this function.

    With the default of two, one level is this function and one is the
    constructor calling it, which lands on the code that asked for the error.
    Returns ``"unknown"`` when the interpreter cannot provide frames or the
    stack is shallower than requested.
    """
    frame = inspect.currentframe()
    try:
        for _ in range(skip):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return UNKNOWN_LOCATION
        return format_location(
            _function_name(frame.f_globals.get("__name__"), frame.f_code.co_qualname),
            frame.f_code.co_filename,
            frame.f_lineno or 0,
        )
    finally:
        del frame


def format_location(function: str, filename: str, lineno: int) -> str:
    return f"{function}\n\t{filename}:{lineno}"


def split_location(location: str) -> tuple[str, str]:
    """Split a location into its function and ``file:line`` parts."""
    function, _, where = location.partition("\n\t")
    return function, where


def _function_name(module: object, qualname: str) -> str:
    if isinstance(module, str) and module:
        return f"{module}.{qualname}"
    return qualname

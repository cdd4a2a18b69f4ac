"""Function decorators that annotate escaping exceptions."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec, TypeVar, cast

from .annotator import Annotator, default_annotator

P = ParamSpec("P")
R = TypeVar("R")


def annotate_errors(
    message: str | None = None,
    *,
    annotator: Annotator | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Wrap any ``Exception`` escaping the function in a TraceError.

    The recorded location is the call site of the decorated function, not
    the decorator. When ``message`` is omitted it defaults to
    ``"calling <qualname>"``.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        label = message
        if label is None:
            label = f"calling {getattr(func, '__qualname__', 'callable')}"

        if inspect.iscoroutinefunction(func):
            async_func = cast(Callable[P, Awaitable[R]], func)

            @wraps(func)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
                try:
                    return await async_func(*args, **kwargs)
                except Exception as exc:
                    wrapped = (annotator or default_annotator()).wrap(exc, label, stacklevel=2)
                    raise cast(Exception, wrapped) from exc

            return cast(Callable[P, R], async_wrapper)

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                wrapped = (annotator or default_annotator()).wrap(exc, label, stacklevel=2)
                raise cast(Exception, wrapped) from exc

        return wrapper

    return decorator

from __future__ import annotations

import inspect
from collections.abc import Callable

import pytest

from traceerrors.core import Annotator, TraceConfig


def _caller_line() -> int:
    frame = inspect.currentframe()
    assert frame is not None and frame.f_back is not None
    return frame.f_back.f_lineno


@pytest.fixture
def current_line() -> Callable[[], int]:
    """Return a callable giving the caller's line, for matching captured locations."""
    return _caller_line


@pytest.fixture
def annotator() -> Annotator:
    return Annotator()


@pytest.fixture
def quiet_annotator() -> Annotator:
    """Annotator whose errors render without the trace suffix."""
    return Annotator(TraceConfig(include_trace=False))

"""Core error annotation runtime."""

from .annotator import Annotator, default_annotator
from .chain import find, root_cause, walk
from .config import DEFAULT_CONFIG, TraceConfig
from .decorators import annotate_errors
from .error import TraceError, iter_nodes, stack_trace
from .frames import UNKNOWN_LOCATION, capture_location

__all__ = [
    "DEFAULT_CONFIG",
    "UNKNOWN_LOCATION",
    "Annotator",
    "TraceConfig",
    "TraceError",
    "annotate_errors",
    "capture_location",
    "default_annotator",
    "find",
    "iter_nodes",
    "root_cause",
    "stack_trace",
    "walk",
]

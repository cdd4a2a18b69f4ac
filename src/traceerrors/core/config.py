"""Configuration for error annotation and rendering."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TraceConfig(BaseModel):
    """Validated, immutable configuration. Passed to an Annotator at construction."""

    model_config = ConfigDict(frozen=True, strict=True)

    include_trace: bool = True
    max_depth: int = Field(default=1024, gt=0)


DEFAULT_CONFIG = TraceConfig()

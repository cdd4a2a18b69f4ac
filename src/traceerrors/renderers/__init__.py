"""Human-readable renderers."""

from .console import render_chain

__all__ = ["render_chain"]

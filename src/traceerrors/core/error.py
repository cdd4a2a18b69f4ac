"""TraceError — an error annotated with a message and the site that built it."""

from __future__ import annotations

import warnings
from collections.abc import Iterator

from .config import DEFAULT_CONFIG, TraceConfig


class TraceError(Exception):
    """Error node carrying an optional message, an optional cause and a call site.

    All state is fixed at construction. ``cause`` is also exposed as
    ``__cause__`` so tracebacks and generic chain walkers follow it without
    knowing this type.

    Rendering contract (``str(err)``)
    ---------------------------------
    - the message, if non-empty, followed by ``": "`` when the cause is rendered;
    - the cause rendered by its own contract for a TraceError, ``str()`` otherwise;
    - when ``config.include_trace`` is set and this node has a location, a
      newline and the assembled trace of the chain from this node, oldest
      site first.

    A cause cut off by ``max_depth`` or a revisited node is not rendered.
    """

    def __init__(
        self,
        message: str = "",
        cause: BaseException | None = None,
        location: str = "",
        config: TraceConfig | None = None,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._cause = cause
        self._location = location
        self._config = config or DEFAULT_CONFIG
        if cause is not None:
            self.__cause__ = cause

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    @property
    def location(self) -> str:
        return self._location

    @property
    def config(self) -> TraceConfig:
        return self._config

    def unwrap(self) -> BaseException | None:
        """Return the immediate cause, or None."""
        return self._cause

    def message_chain(self, config: TraceConfig | None = None) -> str:
        """Render the messages of this node and its causes, without any trace."""
        return self._render(config or self._config, with_trace=False)

    def render(self, config: TraceConfig | None = None) -> str:
        """Render this node; ``config`` overrides this node's own config only.

        A TraceError cause is rendered by its own contract, trace suffix and
        config included, so inner traces appear before the outer one.
        """
        return self._render(config or self._config, with_trace=True)

    def _render(self, config: TraceConfig, *, with_trace: bool) -> str:
        nodes = list(iter_nodes(self, config.max_depth))
        tail = nodes[-1].cause
        rendered: str | None = None
        if tail is not None and not isinstance(tail, TraceError):
            rendered = str(tail)
        for node in reversed(nodes):
            node_config = config if node is self else node.config
            text = node.message
            if rendered is not None:
                text = f"{text}: {rendered}" if text else rendered
            if with_trace and node_config.include_trace and node.location:
                text = f"{text}\n{stack_trace(node, node_config)}"
            rendered = text
        return rendered or ""

    def __str__(self) -> str:
        return self.render()


def iter_nodes(err: BaseException | None, max_depth: int) -> Iterator[TraceError]:
    """Yield the TraceError nodes of a chain, outermost first.

    Stops at the first value that is not a TraceError. A chain that revisits
    a node or runs past ``max_depth`` is cut short with a warning.
    """
    seen: set[int] = set()
    current = err
    while isinstance(current, TraceError):
        if id(current) in seen:
            warnings.warn(
                "traceerrors: cause chain revisits a node; output truncated",
                stacklevel=2,
            )
            return
        if len(seen) >= max_depth:
            warnings.warn(
                f"traceerrors: cause chain exceeds max_depth={max_depth}; output truncated",
                stacklevel=2,
            )
            return
        seen.add(id(current))
        yield current
        current = current.cause


def stack_trace(err: BaseException | None, config: TraceConfig | None = None) -> str:
    """Join the locations recorded along a chain, oldest cause first.

    Only TraceError nodes are inspected; traversal stops at ``None`` or at the
    first foreign exception. Nodes with an empty location are skipped but
    their causes are still followed.
    """
    max_depth = (config or DEFAULT_CONFIG).max_depth
    frames = [node.location for node in iter_nodes(err, max_depth) if node.location]
    frames.reverse()
    return "\n".join(frames)

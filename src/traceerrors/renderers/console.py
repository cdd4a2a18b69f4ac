"""Rich-based cause chain rendering."""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.tree import Tree

from ..core import DEFAULT_CONFIG, TraceConfig, TraceError, iter_nodes
from ..core.frames import split_location


def render_chain(err: BaseException | None, *, config: TraceConfig | None = None) -> str:
    """Render a cause chain as a tree, outermost error at the top.

    Each TraceError shows its own message and call site. A foreign cause is
    shown as ``<TypeName>: <message>`` and ends the tree.
    """
    if err is None:
        return ""
    config = config or DEFAULT_CONFIG

    tree: Tree | None = None
    branch: Tree | None = None
    tail: BaseException | None = err
    for node in iter_nodes(err, config.max_depth):
        branch = _add(branch, _error_label(node, node.message))
        if tree is None:
            tree = branch
        if node.location:
            function, where = split_location(node.location)
            branch.add(f"at {function} ({where})" if where else f"at {function}")
        tail = node.cause

    if tail is not None and not isinstance(tail, TraceError):
        branch = _add(branch, _error_label(tail, str(tail)))
        if tree is None:
            tree = branch

    if tree is None:
        return ""
    console = Console(record=True, width=120, markup=False, file=StringIO())
    console.print(tree)
    return console.export_text()


def _add(parent: Tree | None, label: str) -> Tree:
    if parent is None:
        return Tree(label)
    return parent.add(f"caused by {label}")


def _error_label(err: BaseException, message: str) -> str:
    name = type(err).__name__
    return f"{name}: {message}" if message else name

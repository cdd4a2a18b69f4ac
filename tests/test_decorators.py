from __future__ import annotations

from collections.abc import Callable

import pytest

from traceerrors.core import Annotator, TraceError, annotate_errors
from traceerrors.core.frames import split_location


def test_success_passes_through(quiet_annotator: Annotator) -> None:
    @annotate_errors("adding", annotator=quiet_annotator)
    def add(a: int, b: int) -> int:
        return a + b

    assert add(2, 3) == 5
    assert add.__name__ == "add"


def test_exception_is_wrapped_at_call_site(
    quiet_annotator: Annotator, current_line: Callable[[], int]
) -> None:
    @annotate_errors("parsing config", annotator=quiet_annotator)
    def parse(raw: str) -> int:
        return int(raw)

    with pytest.raises(TraceError) as excinfo:
        line = current_line() + 1
        parse("not a number")

    err = excinfo.value
    assert str(err).startswith("parsing config: invalid literal for int()")
    assert isinstance(err.unwrap(), ValueError)
    assert err.__cause__ is err.unwrap()
    function, where = split_location(err.location)
    assert function == f"{__name__}.test_exception_is_wrapped_at_call_site"
    assert where.endswith(f":{line}")


def test_default_message_uses_qualname(quiet_annotator: Annotator) -> None:
    @annotate_errors(annotator=quiet_annotator)
    def explode() -> None:
        raise RuntimeError("kaboom")

    with pytest.raises(TraceError, match="^calling .*explode: kaboom$"):
        explode()


def test_nested_decorators_stack_annotations(quiet_annotator: Annotator) -> None:
    @annotate_errors("reading row", annotator=quiet_annotator)
    def read_row() -> None:
        raise KeyError("id")

    @annotate_errors("importing file", annotator=quiet_annotator)
    def import_file() -> None:
        read_row()

    with pytest.raises(TraceError) as excinfo:
        import_file()
    assert str(excinfo.value) == "importing file: reading row: 'id'"


def test_base_exceptions_are_not_wrapped(quiet_annotator: Annotator) -> None:
    @annotate_errors("interrupted", annotator=quiet_annotator)
    def stop() -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        stop()


def test_uses_default_annotator_when_none_given() -> None:
    @annotate_errors("defaulted")
    def fail() -> None:
        raise ValueError("x")

    with pytest.raises(TraceError) as excinfo:
        fail()
    assert "\n" in str(excinfo.value)


@pytest.mark.asyncio
async def test_async_function_wrapped(quiet_annotator: Annotator) -> None:
    @annotate_errors("fetching", annotator=quiet_annotator)
    async def fetch() -> str:
        raise TimeoutError("upstream timeout")

    with pytest.raises(TraceError) as excinfo:
        await fetch()
    assert str(excinfo.value) == "fetching: upstream timeout"
    function, _ = split_location(excinfo.value.location)
    assert function.endswith("test_async_function_wrapped")


@pytest.mark.asyncio
async def test_async_success_passes_through(quiet_annotator: Annotator) -> None:
    @annotate_errors(annotator=quiet_annotator)
    async def ok() -> int:
        return 7

    assert await ok() == 7


def test_explicit_empty_message_is_kept(quiet_annotator: Annotator) -> None:
    @annotate_errors("", annotator=quiet_annotator)
    def fail() -> None:
        raise ValueError("bare cause")

    with pytest.raises(TraceError) as excinfo:
        fail()
    assert excinfo.value.message == ""
    assert str(excinfo.value) == "bare cause"

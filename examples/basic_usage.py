"""Basic usage example using the convenience API."""

from __future__ import annotations

import traceerrors
from traceerrors.core import Annotator, TraceConfig
from traceerrors.renderers import render_chain

_USERS = {1: "ada"}


def query_user(user_id: int) -> str:
    try:
        return _USERS[user_id]
    except KeyError as exc:
        err = traceerrors.wrapf(exc, "db failure: no row for id %d", user_id)
        raise err from exc  # type: ignore[misc]


def fetch_user(user_id: int) -> str:
    try:
        return query_user(user_id)
    except Exception as exc:
        raise traceerrors.wrapf(exc, "fetch user %d", user_id) from exc  # type: ignore[misc]


def main() -> None:
    try:
        fetch_user(42)
    except traceerrors.TraceError as err:
        print(err)
        print()
        print(render_chain(err))

    single_line = Annotator(TraceConfig(include_trace=False))
    print(single_line.wrap(ValueError("bad port"), "loading settings"))


if __name__ == "__main__":
    main()

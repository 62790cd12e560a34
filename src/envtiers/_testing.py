"""Test utilities for envtiers."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from ._repository import FakeEnvironment
from ._resolver import get_environment, set_environment


@contextmanager
def override_environment(
    values: dict[str, str] | None = None,
) -> Iterator[FakeEnvironment]:
    """Temporarily replace the process environment with a ``FakeEnvironment``.

    Usage::

        with override_environment({"CLIENT_ID": "abc123"}) as env:
            resolve([VariableSpec(key="CLIENT_ID")], ".env")
            env.set("CLIENT_ID", "other")  # mutate inside context
    """
    previous = get_environment()
    fake = FakeEnvironment(values)
    set_environment(fake)
    try:
        yield fake
    finally:
        set_environment(previous)

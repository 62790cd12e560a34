"""Environment store protocol, the live ``os.environ`` adapter, and an
in-memory implementation for tests."""

from __future__ import annotations

import os
from typing import Protocol, runtime_checkable


@runtime_checkable
class EnvironmentStore(Protocol):
    """Process-wide key/value table the resolver reads from and binds into."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class OsEnvironment:
    """Reads and writes the real process environment."""

    def get(self, key: str) -> str | None:
        return os.environ.get(key)

    def set(self, key: str, value: str) -> None:
        os.environ[key] = value


class FakeEnvironment:
    """Dict-backed environment store for tests.

    >>> env = FakeEnvironment({"DEBUG": "1"})
    >>> env.get("DEBUG")
    '1'
    """

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def as_dict(self) -> dict[str, str]:
        return dict(self._values)

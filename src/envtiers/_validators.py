"""Ready-made validators for variable specs.

Each validator is a plain predicate: it takes the resolved string value and
returns ``True`` to accept it. Any callable with that shape works as a
``VariableSpec.validator``; these cover the common cases.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, Sequence

Validator = Callable[[str], bool]


def non_empty(value: str) -> bool:
    return len(value) > 0


# ---------------------------------------------------------------------------
# Length / prefix
# ---------------------------------------------------------------------------


class MinLength:
    """Accept values at least *length* characters long.

    >>> MinLength(8)("s3cr3t12")
    True
    """

    def __init__(self, length: int) -> None:
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        self.length = length

    def __call__(self, value: str) -> bool:
        return len(value) >= self.length

    def __repr__(self) -> str:
        return f"MinLength({self.length})"


class HasPrefix:
    """Accept values starting with any of *prefixes*.

    >>> HasPrefix("https://")("https://issuer.example.com")
    True
    >>> HasPrefix("https://")("")
    False
    """

    def __init__(self, *prefixes: str) -> None:
        if not prefixes:
            raise ValueError("HasPrefix needs at least one prefix")
        self.prefixes = prefixes

    def __call__(self, value: str) -> bool:
        return value.startswith(self.prefixes)

    def __repr__(self) -> str:
        return f"HasPrefix{self.prefixes!r}"


# ---------------------------------------------------------------------------
# Choices / pattern
# ---------------------------------------------------------------------------


class Choices:
    """Accept values that are one of a fixed set of choices.

    >>> Choices(["debug", "info", "warning"])("info")
    True
    """

    def __init__(self, choices: Sequence[str], case_sensitive: bool = True) -> None:
        self.choices = list(choices)
        self.case_sensitive = case_sensitive
        if case_sensitive:
            self._allowed = frozenset(self.choices)
        else:
            self._allowed = frozenset(c.casefold() for c in self.choices)

    def __call__(self, value: str) -> bool:
        candidate = value if self.case_sensitive else value.casefold()
        return candidate in self._allowed


class Matches:
    """Accept values that fully match a regular expression."""

    def __init__(self, pattern: str | re.Pattern[str]) -> None:
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def __call__(self, value: str) -> bool:
        return self.pattern.fullmatch(value) is not None


# ---------------------------------------------------------------------------
# Type-shaped values
# ---------------------------------------------------------------------------

_TRUTHY = frozenset({"1", "true", "yes", "on", "t", "y"})
_FALSY = frozenset({"0", "false", "no", "off", "f", "n"})


class IsInt:
    """Accept values that parse as an integer, optionally within bounds."""

    def __init__(self, minimum: int | None = None, maximum: int | None = None) -> None:
        self.minimum = minimum
        self.maximum = maximum

    def __call__(self, value: str) -> bool:
        try:
            number = int(value.strip())
        except ValueError:
            return False
        if self.minimum is not None and number < self.minimum:
            return False
        if self.maximum is not None and number > self.maximum:
            return False
        return True


class IsBool:
    """Accept common string spellings of a boolean (``"true"``, ``"0"``, ...)."""

    def __call__(self, value: str) -> bool:
        lower = value.strip().lower()
        return lower in _TRUTHY or lower in _FALSY


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


def all_of(*validators: Validator) -> Validator:
    """Combine validators; the value must satisfy every one of them."""
    checks: Iterable[Validator] = tuple(validators)

    def _check(value: str) -> bool:
        return all(check(value) for check in checks)

    return _check

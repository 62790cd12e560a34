"""Foundation types for envtiers.

Provides the variable specification model, the resolution result types, and
the exception classes raised by ``Resolution.raise_for_failure()``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

REDACTED = "***"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(Exception):
    """Base exception for envtiers errors."""


class ValidationFailedError(ConfigError):
    """Raised when a validator rejects the resolved value of a key."""

    def __init__(self, key: str, value: str = "") -> None:
        self.key = key
        self.value = value
        super().__init__(f"Validation failed for '{key}' with value '{value}'.")


class MissingValueError(ConfigError):
    """Raised when no source produced a non-empty value for a key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Could not resolve a value for '{key}'.")


# ---------------------------------------------------------------------------
# Variable specification
# ---------------------------------------------------------------------------


class VariableSpec(BaseModel):
    """Describes one configuration value to resolve.

    ``default`` of ``""`` means "no default"; a ``validator`` of ``None`` means
    every value is accepted. Secret specs are redacted in diagnostics.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1)
    default: str = ""
    validator: Callable[[str], bool] | None = None
    secret: bool = False

    def display(self, value: str) -> str:
        """Render *value* for a log line, hiding it for secret specs."""
        if self.secret and value:
            return REDACTED
        return value


# ---------------------------------------------------------------------------
# Resolution result
# ---------------------------------------------------------------------------


class FailureReason(str, enum.Enum):
    VALIDATION_FAILED = "validation_failed"
    MISSING = "missing"


@dataclass(frozen=True)
class ResolutionFailure:
    """The first spec that could not be resolved, and why."""

    key: str
    reason: FailureReason
    value: str = ""
    secret: bool = False

    @property
    def message(self) -> str:
        if self.reason is FailureReason.VALIDATION_FAILED:
            shown = REDACTED if self.secret and self.value else self.value
            return f"Validation failed for {self.key} with value '{shown}'."
        return f"Could not resolve a {self.key} environment variable."

    def to_error(self) -> ConfigError:
        if self.reason is FailureReason.VALIDATION_FAILED:
            return ValidationFailedError(
                self.key, REDACTED if self.secret and self.value else self.value
            )
        return MissingValueError(self.key)


@dataclass
class Resolution:
    """Outcome of a single ``resolve()`` run."""

    resolved: list[str] = field(default_factory=list)
    defaults_used: list[str] = field(default_factory=list)
    failure: ResolutionFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def raise_for_failure(self) -> None:
        """Raise the ``ConfigError`` matching the failure, if there is one."""
        if self.failure is not None:
            raise self.failure.to_error()

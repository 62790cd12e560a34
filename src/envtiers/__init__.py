"""Startup-time resolution of configuration values.

Resolves each requested key from the process environment, then a plain
``key=value`` file, then a default, validates it, and fails fast on the first
key that cannot be resolved.
"""

from ._file_source import lookup
from ._repository import EnvironmentStore, FakeEnvironment, OsEnvironment
from ._resolver import parse_environment, resolve
from ._testing import override_environment
from ._types import (
    ConfigError,
    FailureReason,
    MissingValueError,
    Resolution,
    ResolutionFailure,
    ValidationFailedError,
    VariableSpec,
)
from ._validators import Choices, HasPrefix, IsBool, IsInt, Matches, MinLength, all_of, non_empty
from ._version import __version__

__all__ = [
    "__version__",
    # Core
    "resolve",
    "parse_environment",
    "lookup",
    "VariableSpec",
    "Resolution",
    "ResolutionFailure",
    "FailureReason",
    "ConfigError",
    "ValidationFailedError",
    "MissingValueError",
    # Stores
    "EnvironmentStore",
    "OsEnvironment",
    "FakeEnvironment",
    # Validators
    "non_empty",
    "MinLength",
    "HasPrefix",
    "Choices",
    "Matches",
    "IsInt",
    "IsBool",
    "all_of",
    # Testing
    "override_environment",
]

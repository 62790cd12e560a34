"""Core ``resolve()`` function — resolves variable specs at startup.

Lookup order per spec:
1. Environment store (empty string counts as unset)
2. Env file (``key=value`` lines, case-insensitive key, last match wins)
3. Default (skipped when ``""``)

Then the validator runs against whatever was found (possibly ``""``), and a
still-empty value is a failure. The first failing spec halts the run.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Iterable

from ._file_source import lookup
from ._repository import EnvironmentStore, OsEnvironment
from ._types import FailureReason, Resolution, ResolutionFailure, VariableSpec

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Module-level store management
# ---------------------------------------------------------------------------

_active_environment: EnvironmentStore | None = None


def set_environment(store: EnvironmentStore | None) -> None:
    """Set the module-level environment store."""
    global _active_environment
    _active_environment = store


def get_environment() -> EnvironmentStore | None:
    """Return the current module-level environment store (may be ``None``)."""
    return _active_environment


def _auto_environment() -> EnvironmentStore:
    """Return the module-level store, falling back to ``os.environ``."""
    if _active_environment is None:
        return OsEnvironment()
    return _active_environment


# ---------------------------------------------------------------------------
# Per-spec resolution
# ---------------------------------------------------------------------------


def _file_missing(file_path: str | os.PathLike[str]) -> bool:
    """True only when the path does not exist; other stat errors are left to ``lookup``."""
    try:
        os.stat(file_path)
    except FileNotFoundError:
        return True
    except OSError:
        return False
    return False


def _current(store: EnvironmentStore, key: str) -> str:
    return store.get(key) or ""


def _resolve_one(
    spec: VariableSpec,
    file_path: str | os.PathLike[str],
    store: EnvironmentStore,
    resolution: Resolution,
) -> ResolutionFailure | None:
    value = _current(store, spec.key)

    if not value:
        from_file = lookup(file_path, spec.key)
        if from_file is not None:
            store.set(spec.key, from_file)
            value = _current(store, spec.key)

    if not value and spec.default:
        store.set(spec.key, spec.default)
        value = spec.default
        resolution.defaults_used.append(spec.key)
        logger.info("Using default value for %s", spec.key)

    if spec.validator is not None and not spec.validator(value):
        return ResolutionFailure(
            key=spec.key,
            reason=FailureReason.VALIDATION_FAILED,
            value=value,
            secret=spec.secret,
        )

    if not _current(store, spec.key):
        return ResolutionFailure(key=spec.key, reason=FailureReason.MISSING, secret=spec.secret)

    logger.info("Successfully loaded %s", spec.key)
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def resolve(
    specs: Iterable[VariableSpec],
    file_path: str | os.PathLike[str],
    *,
    environ: EnvironmentStore | None = None,
) -> Resolution:
    """Resolve *specs* in order and bind each value into the environment.

    Parameters
    ----------
    specs:
        Variable specs, processed strictly in the given order.
    file_path:
        Path of the ``key=value`` file consulted when the environment has no
        value. A missing file is not an error.
    environ:
        Store to read from and bind into. Falls back to the module-level store
        (see ``override_environment``) or the real process environment.

    Returns a ``Resolution``; on failure ``Resolution.failure`` names the first
    spec that could not be resolved and later specs are left untouched.
    """
    store = environ if environ is not None else _auto_environment()
    resolution = Resolution()

    if _file_missing(file_path):
        logger.info(
            "Env file not found at %s. Relying on environment variables and defaults.",
            file_path,
        )

    for spec in specs:
        failure = _resolve_one(spec, file_path, store, resolution)
        if failure is not None:
            logger.error(failure.message)
            resolution.failure = failure
            return resolution
        resolution.resolved.append(spec.key)

    return resolution


def parse_environment(
    specs: Iterable[VariableSpec],
    file_path: str | os.PathLike[str],
    *,
    environ: EnvironmentStore | None = None,
    exit_code: int = 1,
) -> Resolution:
    """Resolve *specs* and terminate the process on the first failure.

    Intended for program entry points; use ``resolve()`` to inspect failures
    without exiting.
    """
    resolution = resolve(specs, file_path, environ=environ)
    if not resolution.ok:
        logger.critical("Exiting with status %d.", exit_code)
        sys.exit(exit_code)
    return resolution

"""CLI wrapper for resolving keys from the shell."""

from __future__ import annotations

import logging
import sys

import click

from .._repository import OsEnvironment
from .._resolver import get_environment, resolve
from .._types import VariableSpec
from .._validators import HasPrefix, MinLength, all_of


def _parse_pairs(option: str, pairs: tuple[str, ...]) -> dict[str, str]:
    parsed: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint=option)
        parsed[key] = value
    return parsed


def build_specs(
    keys: list[str],
    *,
    defaults: dict[str, str] | None = None,
    prefixes: dict[str, str] | None = None,
    min_lengths: dict[str, int] | None = None,
    secrets: set[str] | None = None,
) -> list[VariableSpec]:
    """Build one ``VariableSpec`` per key from the CLI options.

    Args:
        keys: Keys to resolve, in order
        defaults: Default value per key
        prefixes: Required value prefix per key
        min_lengths: Minimum value length per key
        secrets: Keys whose values must be redacted
    """
    defaults = defaults or {}
    prefixes = prefixes or {}
    min_lengths = min_lengths or {}
    secrets = secrets or set()

    specs = []
    for key in keys:
        checks = []
        if key in prefixes:
            checks.append(HasPrefix(prefixes[key]))
        if key in min_lengths:
            checks.append(MinLength(min_lengths[key]))
        validator = None
        if len(checks) == 1:
            validator = checks[0]
        elif checks:
            validator = all_of(*checks)
        specs.append(
            VariableSpec(
                key=key,
                default=defaults.get(key, ""),
                validator=validator,
                secret=key in secrets,
            )
        )
    return specs


def _configure_logging() -> None:
    """Send envtiers INFO diagnostics to stderr."""
    logger = logging.getLogger("envtiers")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


@click.group("envtiers")
def envtiers_group():
    """envtiers commands."""
    pass


@envtiers_group.command("check")
@click.argument("keys", nargs=-1, required=True)
@click.option("--file", "file_path", default=".env", show_default=True, help="Env file to read.")
@click.option("--default", "defaults", multiple=True, metavar="KEY=VALUE", help="Default value.")
@click.option("--prefix", "prefixes", multiple=True, metavar="KEY=PREFIX", help="Required prefix.")
@click.option(
    "--min-length", "min_lengths", multiple=True, metavar="KEY=N", help="Minimum value length."
)
@click.option("--secret", "secrets", multiple=True, metavar="KEY", help="Redact this key's value.")
@click.option("--verbose", "-v", is_flag=True, help="Log resolution steps to stderr.")
def check_cli(
    keys: tuple[str, ...],
    file_path: str,
    defaults: tuple[str, ...],
    prefixes: tuple[str, ...],
    min_lengths: tuple[str, ...],
    secrets: tuple[str, ...],
    verbose: bool,
) -> None:
    """Resolve KEYS from the environment, the env file, and defaults.

    Examples:\n
        envtiers check CLIENT_ID CLIENT_SECRET --file .env\n
        envtiers check ISSUER --prefix ISSUER=https:// --default ISSUER=https://default-issuer.com\n
    """
    if verbose:
        _configure_logging()

    try:
        lengths = {k: int(v) for k, v in _parse_pairs("--min-length", min_lengths).items()}
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--min-length")
    for key, length in lengths.items():
        if length < 0:
            raise click.BadParameter(
                f"length for {key} must be non-negative, got {length}", param_hint="--min-length"
            )

    specs = build_specs(
        list(keys),
        defaults=_parse_pairs("--default", defaults),
        prefixes=_parse_pairs("--prefix", prefixes),
        min_lengths=lengths,
        secrets=set(secrets),
    )

    env = get_environment()
    if env is None:
        env = OsEnvironment()
    resolution = resolve(specs, file_path, environ=env)
    if not resolution.ok:
        click.secho(f"Error: {resolution.failure.message}", fg="red", err=True)
        sys.exit(1)

    for spec in specs:
        click.echo(f"{spec.key}={spec.display(env.get(spec.key) or '')}")


def main() -> None:
    envtiers_group()

"""Lookup of a single key in a plain ``key=value`` file."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


def _split_line(line: str) -> tuple[str, str] | None:
    """Split at the first ``=``; ``None`` when the line has no separator."""
    left, sep, right = line.partition("=")
    if not sep:
        return None
    return left.strip(), right.strip()


def lookup(file_path: str | os.PathLike[str], key: str) -> str | None:
    """Return the value for *key* in *file_path*, or ``None``.

    Keys compare case-insensitively. Every line is scanned and the last
    matching line wins. Lines without ``=`` are ignored; there is no comment,
    quoting or continuation syntax. A file that cannot be opened counts as
    "no match".
    """
    wanted = key.casefold()
    match: str | None = None

    try:
        with open(file_path, encoding="utf-8", errors="surrogateescape") as handle:
            for line in handle:
                parts = _split_line(line.rstrip("\r\n"))
                if parts is None:
                    continue
                name, value = parts
                if name.casefold() == wanted:
                    match = value
    except OSError as exc:
        logger.debug("Error opening env file %s: %s", file_path, exc)
        return None

    return match

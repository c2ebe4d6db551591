"""Parsing of ``NAME=LEVEL`` logger-level options.

Values may come from a repeatable Click option or from an environment
variable holding a comma/space separated list; both shapes are accepted.
"""

from __future__ import annotations

import logging
import re

import click

#: Library loggers quieted unless the user says otherwise.
DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten `value` into non-empty ``NAME=LEVEL`` fragments."""
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def _parse_level(level_str: str) -> int:
    # getLevelName maps known names to ints and anything else to "Level <x>"
    if isinstance(level := logging.getLevelName(level_str.strip().upper()), int):
        return level
    raise click.BadParameter(f"Invalid log level: {level_str}")


def parse_log_level(
    ctx: click.Context | None,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning ``NAME=LEVEL`` items into a name->level dict.

    Starts from `DEFAULT_LIB_LEVELS`; later items override earlier ones.
    Level names are case-insensitive.

    Raises:
        click.BadParameter: If an item is not ``NAME=LEVEL`` or the level is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = _parse_level(level_str)
    return levels

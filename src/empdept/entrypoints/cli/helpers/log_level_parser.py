"""Parse ``-L/--logger-level NAME=LEVEL`` options.

Values may be repeated on the command line or given as one comma/space
separated string (e.g. from ``EMPDEPT_LOGGER_LEVELS``). Later entries win.
"""

import logging
import re

import click

from empdept.config import DEFAULT_LIB_LEVELS


def _split_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Flatten option values into non-empty NAME=LEVEL fragments."""
    if not value:
        return []
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in re.split(r"[,\s]+", chunk) if item]


def parse_log_level(
    ctx: click.Context | None,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL pairs into a name->level mapping.

    The result starts from `DEFAULT_LIB_LEVELS` and applies the overrides in
    order.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is not a
            standard logging level name.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if lvl is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels

"""Helpers for parsing logger-level CLI options.

Options take the form NAME=LEVEL, repeatable or comma/space-separated. Items
are normalized into individual pairs and textual level names are converted
into numeric logging levels.
"""

import logging
import re

import click

# Library loggers quieted unless overridden on the command line.
DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Normalize an input value into a flat list of items.

    Accepts either a single string (which may contain several comma/space-
    separated items) or a sequence of strings, as given by repeatable Click
    options.

    Args:
        value (str | list[str] | tuple[str, ...]): The option value from Click.

    Returns:
        list[str]: A flat list of non-empty item strings.
    """
    raw = [value] if isinstance(value, str) else list(value)
    return [s for v in raw for s in re.split(r"[,\s]+", v) if s]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Combines DEFAULT_LIB_LEVELS with any overrides supplied via the CLI. LEVEL
    is a standard logging level name (e.g. DEBUG, INFO, WARNING), in any case.

    Args:
        ctx (click.Context): Click context (passed by Click, not used here).
        param (click.Parameter | None): Click parameter (passed by Click, not used here).
        value (str | list[str] | tuple[str, ...]): The raw option value(s).

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is malformed (not NAME=LEVEL) or LEVEL is invalid.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}") from e
        lvl = logging.getLevelName(level_str.strip().upper())
        if not isinstance(lvl, int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels

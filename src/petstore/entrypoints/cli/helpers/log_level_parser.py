"""Parsing of the ``-L NAME=LEVEL`` logger-level option.

Values may be repeated (``-L sqlalchemy=INFO -L alembic=DEBUG``) or packed
into one comma/space separated string, as they arrive from the
``PETSTORE_LOGGER_LEVELS`` environment variable.
"""

import logging
import re
from collections.abc import Iterable

import click

# Library loggers kept quiet unless overridden.
DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING, "alembic": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def split_items(value: str | Iterable[str]) -> list[str]:
    """Flatten one string or a sequence of strings into NAME=LEVEL items."""
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def parse_item(item: str) -> tuple[str, int]:
    """Parse a single ``NAME=LEVEL`` item.

    Raises:
        click.BadParameter: if the item has no ``=``, an empty name, or an
            unknown level name.
    """
    name, sep, level_name = item.partition("=")
    name = name.strip()
    if not sep or not name:
        raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
    level = logging.getLevelNamesMapping().get(level_name.strip().upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {level_name}")
    return name, level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | Iterable[str],
) -> dict[str, int]:
    """Click callback returning ``DEFAULT_LIB_LEVELS`` updated with the given overrides."""
    levels = dict(DEFAULT_LIB_LEVELS)
    levels.update(parse_item(item) for item in split_items(value))
    return levels

"""JSON rendering of projections on stdout."""

import dataclasses
import json
from typing import Any

import click


def to_jsonable(value: Any) -> Any:
    """Convert projections (and lists of them) into JSON-ready values."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


def echo_json(value: Any) -> None:
    """Write ``value`` to stdout as indented JSON."""
    click.echo(json.dumps(to_jsonable(value), indent=2))

"""Fixtures and helpers for end-to-end CLI tests.

Provides a test-only `log-demo` command that emits log messages at every
level, a CliRunner, an isolated filesystem, and a migrated SQLite database
the record commands can run against.
"""

import json
import logging
from collections.abc import Callable
from typing import Any

import click
import pytest
from click.testing import CliRunner, Result

from petstore.entrypoints.cli.main import petstore

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests.

    Emits DEBUG to CRITICAL messages on the 'petstore.demo' logger and a few
    on a 'some.thirdparty' logger to exercise logger-level filtering.
    """
    logger = logging.getLogger("petstore.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and the sections click-extra keeps."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command on `petstore` for one test."""
    petstore.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(petstore, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside ``runner.isolated_filesystem()``."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def db_env(sqlite_engine_file, sqlite_url_file) -> dict[str, str]:
    """Environment pointing PETSTORE_DB_URL at a migrated SQLite file."""
    return {"PETSTORE_DB_URL": sqlite_url_file}


@pytest.fixture
def cli(runner, db_env) -> Callable[..., Result]:
    """Invoke ``petstore`` against the test database, flight recorder off."""

    def _invoke(*args: str, **kwargs: Any) -> Result:
        return runner.invoke(
            petstore, ["--no-flight-recorder", *args], env=db_env, **kwargs
        )

    return _invoke


@pytest.fixture
def cli_json(cli) -> Callable[..., Any]:
    """Invoke ``petstore``, assert success and return the JSON it printed."""

    def _invoke(*args: str) -> Any:
        result = cli(*args)
        assert result.exit_code == 0, result.output
        return json.loads(result.stdout)

    return _invoke

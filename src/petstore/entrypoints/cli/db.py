"""``petstore db``: forward-only Alembic wrappers.

Human-oriented notices go to **stderr**, Alembic output to **stdout**.
Schema-changing actions prompt for confirmation unless ``--force`` is given.
There is no ``downgrade``: the record tables only move forward.

Requires ``PETSTORE_DB_URL``; a missing, malformed or unreachable URL ends
the command with a ``ClickException`` explaining what to fix.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import text
from sqlalchemy.exc import ArgumentError, OperationalError

from petstore import config
from petstore.adapters.db.dialects import UnsupportedDialect
from petstore.adapters.db.engine import make_engine

from .dispatch import INVALID_URL_MSG, MISSING_DB_URL_MSG
from .helpers import error, sanitize_url, success, warn

if TYPE_CHECKING:
    from alembic.config import Config
    from sqlalchemy.engine import Engine

CANNOT_CONNECT_MSG = (
    "PETSTORE_DB_URL is set, but the database is not reachable.\n"
    "Please ensure the database is running and the URL is correct."
)

UPGRADE_SCHEMA_WARNING = (
    "This will upgrade the database schema to the latest version.\n"
    "Please ensure you have a backup before proceeding."
)

UPGRADE_SCHEMA_INSTRUCTIONS = "Run 'petstore db upgrade' to update the schema."

VERBOSE_OPTION = click.option(
    "--verbose",
    "-v",
    "verbose",
    is_flag=True,
    help="Show alembic's more verbose output.",
)


class MigrationStatus(Enum):
    """Describes the migration status of the database schema."""

    UP_TO_DATE = "up to date"
    OUT_OF_DATE = "out of date"
    UNINITIALIZED = "uninitialized"


def _connect_engine(url: str) -> Engine:
    engine = make_engine(url)
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))  # pragma: no mutate
    return engine


def _get_engine() -> Engine:
    try:
        url = config.get_db_url()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e
    try:
        return _connect_engine(url)
    except OperationalError as e:
        raise click.ClickException(CANNOT_CONNECT_MSG) from e
    except (ArgumentError, UnsupportedDialect) as e:
        raise click.ClickException(INVALID_URL_MSG.format(e)) from e


def _url_of(engine: Engine) -> str:
    return engine.url.render_as_string(hide_password=False)


def _get_current_revision(engine: Engine) -> str | None:
    with engine.connect() as conn:
        return MigrationContext.configure(conn).get_current_revision()


def _get_head_revision(cfg: Config) -> str | None:
    heads = ScriptDirectory.from_config(cfg).get_heads()
    return heads[0] if heads else None


def _migration_status(current: str | None, head: str | None) -> MigrationStatus:
    if current == head:
        return MigrationStatus.UP_TO_DATE
    if current is None:
        return MigrationStatus.UNINITIALIZED
    return MigrationStatus.OUT_OF_DATE


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Database management commands."""


@db.command()
@VERBOSE_OPTION
def current(verbose: bool) -> None:
    """Show current DB revision."""
    cfg = config.build_alembic_config(db_url=_url_of(_get_engine()), stdout=sys.stdout)
    command.current(cfg, verbose=verbose)


@db.command()
@VERBOSE_OPTION
def heads(verbose: bool) -> None:
    """Show available head revisions."""
    cfg = config.build_alembic_config(stdout=sys.stdout)
    command.heads(cfg, verbose=verbose)


@db.command()
@VERBOSE_OPTION
@click.option(
    "--indicate-current",
    "-i",
    "indicate_current",
    is_flag=True,
    help="Indicate the current revision.",
)
def history(verbose: bool, indicate_current: bool) -> None:
    """Show revision history."""
    url = _url_of(_get_engine()) if indicate_current else None
    cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
    command.history(cfg, verbose=verbose, indicate_current=indicate_current)


@db.command()
@click.option("--sql", is_flag=True, help="Generate SQL without executing.")
@click.option("--force", is_flag=True, help="Upgrade without confirmation.")
def upgrade(sql: bool, force: bool) -> None:
    """Upgrade the database to the head revision."""
    url = _url_of(_get_engine())
    cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
    if not force and not sql:
        warn(UPGRADE_SCHEMA_WARNING)
        click.secho(f"db: {click.style(sanitize_url(url), underline=True)}", err=True)
        click.confirm("Are you sure you want to proceed?", abort=True, err=True)
    command.upgrade(cfg, revision="head", sql=sql)
    success("Upgrade complete!")


@db.command()
def status() -> None:
    """Show database connection and schema status."""
    try:
        engine = _get_engine()
    except click.ClickException as e:
        error("Cannot connect to database")
        click.echo(e.format_message())
        return

    success("Database reachable")
    url = _url_of(engine)
    click.echo(f"Backend : {engine.dialect.name}")
    click.echo(f"URL     : {sanitize_url(url)}")

    rev = _get_current_revision(engine)
    head = _get_head_revision(config.build_alembic_config(db_url=url))
    migration_status = _migration_status(rev, head)
    message = (
        f"{rev} ({migration_status.value})" if rev is not None else migration_status.value
    )
    click.echo(f"Schema  : {message}")

    if migration_status is not MigrationStatus.UP_TO_DATE:
        warn(UPGRADE_SCHEMA_INSTRUCTIONS)

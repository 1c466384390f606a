"""PETSTORE CLI entry point.

Defines the top-level ``petstore`` command (via Click-Extra), configures
logging from its options, and registers the command groups:

- ``petstore db`` for forward-only database management;
- ``petstore store``, ``petstore employee`` and ``petstore customer`` for
  the records themselves.

Record commands print JSON on stdout; notices and logs go to stderr.

Examples
    $ petstore --version
    $ petstore db upgrade
    $ petstore store create --name Paws --phone 555-0100
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from petstore import __version__
from petstore.logging import LoggingSettings, configure_logging, log_startup

from .customer import customer as customer_group
from .db import db as db_group
from .employee import employee as employee_group
from .helpers.log_level_parser import parse_log_level
from .store import store as store_group

logger = logging.getLogger(__name__)


HELP = """Record keeping for a small chain of pet stores.

    Stores own their employees; customers can be members of several stores.
    Point PETSTORE_DB_URL at a database, run `petstore db upgrade` once, then
    use the store, employee and customer commands. Records are printed as
    JSON on stdout, so they can be piped into jq or another script.
    """

DEFAULT_LOG_PATH = (
    Path(user_log_dir("petstore", appauthor=False, ensure_exists=True)) / "latest.log"
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Show more on stderr: -v adds record creates, deletes and reassignments "
        "(INFO), -vv adds every dispatched command and query (DEBUG)."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Show less on stderr: -q hides warnings such as a store saved under an "
        "unknown id, -qq hides errors too."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Log everything to stderr with timestamps, logger names and source lines.",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File the flight recorder writes to when a command goes wrong.",
    default=DEFAULT_LOG_PATH,
    envvar="PETSTORE_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="PETSTORE_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="How many recent log records the flight recorder keeps.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep recent DEBUG records in memory (whatever -v/-q say) and write them "
        "to --log-path once a warning or error is logged, e.g. a store saved "
        "under an unknown id or a database that cannot be used."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder to --log-path on exit even when nothing went wrong.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set one logger's level as NAME=LEVEL, for console and flight recorder "
        "alike. Repeatable: -L sqlalchemy.engine=INFO shows the SQL each command "
        "runs, -L petstore.service_layer=WARNING hides handler chatter."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def petstore(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """Configure logging for the subcommand that follows."""

    settings = LoggingSettings(
        verbose=verbose_count,
        quiet=quiet_count,
        debug=debug,
        color=ctx.color is not False,  # None or True => allow color
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, app_version=__version__, settings=settings, handlers=handlers)

    ctx.call_on_close(logging.shutdown)


petstore.add_command(db_group)
petstore.add_command(store_group)
petstore.add_command(employee_group)
petstore.add_command(customer_group)

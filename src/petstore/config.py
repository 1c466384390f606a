"""Where petstore finds its database and its migrations.

Both the record commands (through :func:`petstore.bootstrap.bootstrap`) and
``petstore db`` read the database URL from ``PETSTORE_DB_URL``; there is no
config file. Migrations ship inside the package, so ``petstore db upgrade``
works from any working directory.
"""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENVVAR = "PETSTORE_DB_URL"  # pragma: no mutate

MIGRATIONS_PACKAGE = "petstore.adapters.db.alembic"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """Raised when PETSTORE_DB_URL is unset or empty."""


def get_db_url() -> str:
    """Return the database URL holding the store records.

    An empty value counts as unset, so ``PETSTORE_DB_URL= petstore ...``
    fails the same way as a missing variable.

    Raises:
        DatabaseUrlNotSetError: If ``PETSTORE_DB_URL`` is unset or empty.
    """
    if not (url := os.environ.get(DB_URL_ENVVAR)):
        raise DatabaseUrlNotSetError
    return url


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Alembic config for the record tables (store, employee, customer).

    Args:
        db_url: Database to migrate, e.g. ``sqlite:///petstore.db``. Leave it
            ``None`` for commands that only read the scripts, such as
            ``petstore db heads``.
        stdout: Stream for Alembic's own output; the CLI passes the current
            ``sys.stdout`` so ``CliRunner`` can capture it.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option("sqlalchemy.url", db_url)
    cfg.set_main_option("script_location", str(files(MIGRATIONS_PACKAGE)))
    return cfg

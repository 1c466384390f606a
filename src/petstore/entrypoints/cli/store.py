"""``petstore store``: create, update, list, show and delete stores."""

from __future__ import annotations

import click
import click_extra as clickx

from petstore.service_layer import commands, queries

from .dispatch import dispatch
from .helpers import echo_json, success, warn

DELETE_STORE_WARNING = (
    "This deletes store {store_id} together with all of its employees.\n"
    "Its customers are kept but stop being members of the store."
)


def store_fields(func):
    """Attach the editable store fields as options."""
    for option in reversed(
        [
            click.option("--name", help="Store name (required, non-blank)."),
            click.option("--address", help="Street address."),
            click.option("--city", help="City."),
            click.option("--state", help="State."),
            click.option("--zip", "zip_code", help="ZIP code."),
            click.option("--phone", help="Phone number (required, non-blank)."),
        ]
    ):
        func = option(func)
    return func


@click.group(cls=clickx.ExtraGroup)
def store() -> None:
    """Store records."""


@store.command()
@store_fields
def create(**fields: str | None) -> None:
    """Create a store and print it."""
    echo_json(dispatch(commands.SaveStore(**fields)))


@store.command()
@click.argument("store_id", type=int)
@store_fields
def update(store_id: int, **fields: str | None) -> None:
    """Replace the fields of STORE_ID (created under a new id if absent)."""
    echo_json(dispatch(commands.SaveStore(store_id=store_id, **fields)))


@store.command(name="list")
def list_() -> None:
    """List all stores with their employees and customers."""
    echo_json(dispatch(queries.ListStores()))


@store.command()
@click.argument("store_id", type=int)
def show(store_id: int) -> None:
    """Show STORE_ID with its employees and customers."""
    echo_json(dispatch(queries.GetStore(store_id)))


@store.command()
@click.argument("store_id", type=int)
@click.option("--force", is_flag=True, help="Delete without confirmation.")
def delete(store_id: int, force: bool) -> None:
    """Delete STORE_ID, its employees and its customer memberships."""
    if not force:
        warn(DELETE_STORE_WARNING.format(store_id=store_id))
        click.confirm("Are you sure you want to proceed?", abort=True, err=True)
    dispatch(commands.DeleteStore(store_id))
    success(f"Store {store_id} deleted.")

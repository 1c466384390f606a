"""``petstore customer``: customer records and their store memberships."""

from __future__ import annotations

import click
import click_extra as clickx

from petstore.service_layer import commands, queries

from .dispatch import dispatch
from .helpers import echo_json, success, warn

DELETE_CUSTOMER_WARNING = (
    "This deletes customer {customer_id} everywhere, including its memberships "
    "of other stores.\nUse 'petstore customer remove' to end only this membership."
)


def customer_fields(func):
    """Attach the editable customer fields as options."""
    for option in reversed(
        [
            click.option("--first-name", help="First name."),
            click.option("--last-name", help="Last name."),
            click.option("--email", help="Email address."),
        ]
    ):
        func = option(func)
    return func


@click.group(cls=clickx.ExtraGroup)
def customer() -> None:
    """Customer records."""


@customer.command()
@click.argument("store_id", type=int)
@click.option(
    "--customer-id",
    type=int,
    default=None,
    help="Add this existing customer instead of creating one.",
)
@customer_fields
def add(store_id: int, customer_id: int | None, **fields: str | None) -> None:
    """Make a customer a member of STORE_ID and print it."""
    echo_json(
        dispatch(
            commands.AddCustomerToStore(
                store_id=store_id, customer_id=customer_id, **fields
            )
        )
    )


@customer.command()
@click.argument("store_id", type=int)
@click.argument("customer_id", type=int)
@customer_fields
def update(store_id: int, customer_id: int, **fields: str | None) -> None:
    """Replace the fields of CUSTOMER_ID, a member of STORE_ID."""
    echo_json(
        dispatch(
            commands.UpdateStoreCustomer(
                store_id=store_id, customer_id=customer_id, **fields
            )
        )
    )


@customer.command()
@click.argument("store_id", type=int)
@click.argument("customer_id", type=int)
def remove(store_id: int, customer_id: int) -> None:
    """End the membership of CUSTOMER_ID in STORE_ID, keeping the record."""
    echo_json(dispatch(commands.RemoveCustomerFromStore(store_id, customer_id)))


@customer.command(name="list")
@click.option(
    "--store",
    "store_id",
    type=int,
    default=None,
    help="Only list members of this store.",
)
def list_(store_id: int | None) -> None:
    """List all customers, or the members of one store."""
    if store_id is None:
        echo_json(dispatch(queries.ListCustomers()))
    else:
        echo_json(dispatch(queries.ListStoreCustomers(store_id)))


@customer.command()
@click.argument("store_id", type=int)
@click.argument("customer_id", type=int)
def show(store_id: int, customer_id: int) -> None:
    """Show CUSTOMER_ID, a member of STORE_ID."""
    echo_json(dispatch(queries.GetStoreCustomer(store_id, customer_id)))


@customer.command()
@click.argument("store_id", type=int)
@click.argument("customer_id", type=int)
@click.option("--force", is_flag=True, help="Delete without confirmation.")
def delete(store_id: int, customer_id: int, force: bool) -> None:
    """Delete CUSTOMER_ID, a member of STORE_ID, from every store."""
    if not force:
        warn(DELETE_CUSTOMER_WARNING.format(customer_id=customer_id))
        click.confirm("Are you sure you want to proceed?", abort=True, err=True)
    dispatch(commands.DeleteStoreCustomer(store_id, customer_id))
    success(f"Customer {customer_id} deleted.")

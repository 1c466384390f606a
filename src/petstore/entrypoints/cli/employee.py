"""``petstore employee``: employee records and their store assignment.

Commands that take a STORE_ID act only on employees of that store. The
``create``, ``update-any`` and unscoped ``show``/``delete`` forms work on any
employee, assigned or not.
"""

from __future__ import annotations

import click
import click_extra as clickx

from petstore.service_layer import commands, queries

from .dispatch import dispatch
from .helpers import echo_json, success, warn

DELETE_EMPLOYEE_WARNING = (
    "This permanently deletes employee {employee_id}.\n"
    "Use 'petstore employee assign' to move an employee to another store instead."
)


def employee_fields(func):
    """Attach the editable employee fields as options."""
    for option in reversed(
        [
            click.option("--first-name", help="First name."),
            click.option("--last-name", help="Last name."),
            click.option("--phone", help="Phone number."),
            click.option("--job-title", help="Job title."),
        ]
    ):
        func = option(func)
    return func


STORE_OPTION = click.option(
    "--store",
    "store_id",
    type=int,
    default=None,
    help="Only consider employees of this store.",
)


@click.group(cls=clickx.ExtraGroup)
def employee() -> None:
    """Employee records."""


@employee.command()
@click.argument("store_id", type=int)
@click.option(
    "--employee-id",
    type=int,
    default=None,
    help="Save this existing (unassigned or own) employee instead of creating one.",
)
@employee_fields
def add(store_id: int, employee_id: int | None, **fields: str | None) -> None:
    """Add an employee to STORE_ID and print it."""
    echo_json(
        dispatch(
            commands.AddEmployeeToStore(
                store_id=store_id, employee_id=employee_id, **fields
            )
        )
    )


@employee.command()
@click.argument("store_id", type=int)
@click.argument("employee_id", type=int)
@employee_fields
def update(store_id: int, employee_id: int, **fields: str | None) -> None:
    """Replace the fields of EMPLOYEE_ID, an employee of STORE_ID."""
    echo_json(
        dispatch(
            commands.UpdateStoreEmployee(
                store_id=store_id, employee_id=employee_id, **fields
            )
        )
    )


@employee.command(name="update-any")
@click.argument("employee_id", type=int)
@employee_fields
def update_any(employee_id: int, **fields: str | None) -> None:
    """Replace the fields of EMPLOYEE_ID wherever it works (names required)."""
    echo_json(dispatch(commands.UpdateEmployee(employee_id=employee_id, **fields)))


@employee.command()
@click.option(
    "--employee-id",
    type=int,
    default=None,
    help="Update this existing employee instead of creating one.",
)
@employee_fields
def create(employee_id: int | None, **fields: str | None) -> None:
    """Create an unassigned employee (names required) and print it."""
    echo_json(dispatch(commands.SaveEmployee(employee_id=employee_id, **fields)))


@employee.command()
@click.argument("store_id", type=int)
@click.argument("employee_id", type=int)
def assign(store_id: int, employee_id: int) -> None:
    """Move EMPLOYEE_ID to STORE_ID, leaving its previous store."""
    echo_json(dispatch(commands.AssignEmployeeToStore(store_id, employee_id)))


@employee.command(name="list")
@STORE_OPTION
def list_(store_id: int | None) -> None:
    """List all employees, or those of one store."""
    if store_id is None:
        echo_json(dispatch(queries.ListEmployees()))
    else:
        echo_json(dispatch(queries.ListStoreEmployees(store_id)))


@employee.command()
@click.argument("employee_id", type=int)
@STORE_OPTION
def show(employee_id: int, store_id: int | None) -> None:
    """Show EMPLOYEE_ID."""
    if store_id is None:
        echo_json(dispatch(queries.GetEmployee(employee_id)))
    else:
        echo_json(dispatch(queries.GetStoreEmployee(store_id, employee_id)))


@employee.command()
@click.argument("employee_id", type=int)
@STORE_OPTION
@click.option("--force", is_flag=True, help="Delete without confirmation.")
def delete(employee_id: int, store_id: int | None, force: bool) -> None:
    """Delete EMPLOYEE_ID."""
    if not force:
        warn(DELETE_EMPLOYEE_WARNING.format(employee_id=employee_id))
        click.confirm("Are you sure you want to proceed?", abort=True, err=True)
    if store_id is None:
        dispatch(commands.DeleteEmployee(employee_id))
    else:
        dispatch(commands.DeleteStoreEmployee(store_id, employee_id))
    success(f"Employee {employee_id} deleted.")

"""Module defining Commands.

Commands carry the full set of editable fields for a record: a save copies
every field onto the record, so an omitted field is stored as ``None``.
"""

from dataclasses import dataclass

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


# ============================================================================
#                               Store commands
# ============================================================================


@dataclass(frozen=True)
class SaveStore(Command):
    """Create a store (no id) or update it (id given; created if absent)."""

    store_id: int | None = None
    name: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    phone: str | None = None


@dataclass(frozen=True)
class DeleteStore(Command):
    """Delete a store together with its employees and customer memberships."""

    store_id: int


# ============================================================================
#                              Employee commands
# ============================================================================


@dataclass(frozen=True)
class AddEmployeeToStore(Command):
    """Create an employee in a store, or save an existing one into it."""

    store_id: int
    employee_id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    job_title: str | None = None


@dataclass(frozen=True)
class UpdateStoreEmployee(Command):
    """Update the fields of an employee of the given store."""

    store_id: int
    employee_id: int
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    job_title: str | None = None


@dataclass(frozen=True)
class SaveEmployee(Command):
    """Create an unassigned employee (no id) or update one (id given)."""

    employee_id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    job_title: str | None = None


@dataclass(frozen=True)
class UpdateEmployee(Command):
    """Update the fields of an employee, whatever store it works for."""

    employee_id: int
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    job_title: str | None = None


@dataclass(frozen=True)
class AssignEmployeeToStore(Command):
    """Move an employee to a store, leaving any previous store."""

    store_id: int
    employee_id: int


@dataclass(frozen=True)
class DeleteStoreEmployee(Command):
    """Delete an employee of the given store."""

    store_id: int
    employee_id: int


@dataclass(frozen=True)
class DeleteEmployee(Command):
    """Delete an employee, whatever store it works for."""

    employee_id: int


# ============================================================================
#                              Customer commands
# ============================================================================


@dataclass(frozen=True)
class AddCustomerToStore(Command):
    """Create a customer in a store, or add an existing customer to it."""

    store_id: int
    customer_id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class UpdateStoreCustomer(Command):
    """Update the fields of a customer who is a member of the given store."""

    store_id: int
    customer_id: int
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class RemoveCustomerFromStore(Command):
    """End one store membership, keeping the customer record."""

    store_id: int
    customer_id: int


@dataclass(frozen=True)
class DeleteStoreCustomer(Command):
    """Delete a member customer of the given store, with all its memberships."""

    store_id: int
    customer_id: int

"""Record lookups shared by the handlers.

Every helper expects an entered unit of work and reads through its
repositories. Failures are raised where they are detected:

- ``RecordNotFoundError`` when no record has the id;
- ``ScopeViolationError`` when the record exists but is not associated with
  the store the call is scoped to;
- ``ValidationError`` when a required text field is missing or blank.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from petstore.domain.errors import (
    CustomerNotInStoreError,
    EmployeeNotInStoreError,
    ValidationError,
)
from petstore.domain.model import Customer, Employee, Store
from petstore.domain.resolution import Existing, Missing, New, Resolution
from petstore.interfaces.repositories import RecordNotFoundError

if TYPE_CHECKING:
    from petstore.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)


# ============================================================================
#                               Validation
# ============================================================================


def require_text(kind: str, field: str, value: str | None) -> str:
    """Return ``value`` if it holds non-whitespace text.

    Raises:
        ValidationError: naming ``field`` when the value is missing or blank.
    """
    if value is None or not value.strip():
        raise ValidationError(kind, field)
    return value


# ============================================================================
#                            Lookups by id
# ============================================================================


def get_store(uow: AbstractUnitOfWork, store_id: int) -> Store:
    """Return the store or raise ``RecordNotFoundError``."""
    if (store := uow.stores.get(store_id)) is None:
        raise RecordNotFoundError(Store.KIND, store_id)
    return store


def get_employee(uow: AbstractUnitOfWork, employee_id: int) -> Employee:
    """Return the employee or raise ``RecordNotFoundError``."""
    if (employee := uow.employees.get(employee_id)) is None:
        raise RecordNotFoundError(Employee.KIND, employee_id)
    return employee


def get_customer(uow: AbstractUnitOfWork, customer_id: int) -> Customer:
    """Return the customer or raise ``RecordNotFoundError``."""
    if (customer := uow.customers.get(customer_id)) is None:
        raise RecordNotFoundError(Customer.KIND, customer_id)
    return customer


def get_employee_scoped(
    uow: AbstractUnitOfWork, store_id: int, employee_id: int
) -> Employee:
    """Return the employee if it works for ``store_id``.

    Raises:
        RecordNotFoundError: no employee has ``employee_id``.
        EmployeeNotInStoreError: the employee works elsewhere or nowhere.
    """
    employee = get_employee(uow, employee_id)
    if not employee.is_assigned_to(store_id):
        raise EmployeeNotInStoreError(employee_id, store_id)
    return employee


def get_customer_scoped(
    uow: AbstractUnitOfWork, store_id: int, customer_id: int
) -> Customer:
    """Return the customer if it is a member of ``store_id``.

    Raises:
        RecordNotFoundError: no customer has ``customer_id``.
        CustomerNotInStoreError: ``store_id`` is not among its memberships.
    """
    customer = get_customer(uow, customer_id)
    if not customer.is_member_of(store_id):
        raise CustomerNotInStoreError(customer_id, store_id)
    return customer


# ============================================================================
#                       Resolution of optional ids
# ============================================================================


def resolve_store(uow: AbstractUnitOfWork, store_id: int | None) -> Resolution[Store]:
    if store_id is None:
        return New()
    if (store := uow.stores.get(store_id)) is None:
        return Missing(store_id)
    return Existing(store)


def resolve_employee(
    uow: AbstractUnitOfWork, employee_id: int | None
) -> Resolution[Employee]:
    if employee_id is None:
        return New()
    if (employee := uow.employees.get(employee_id)) is None:
        return Missing(employee_id)
    return Existing(employee)


def resolve_customer(
    uow: AbstractUnitOfWork, customer_id: int | None
) -> Resolution[Customer]:
    if customer_id is None:
        return New()
    if (customer := uow.customers.get(customer_id)) is None:
        return Missing(customer_id)
    return Existing(customer)


# ============================================================================
#                             Find or create
# ============================================================================


def find_or_create_store(uow: AbstractUnitOfWork, store_id: int | None) -> Store:
    """Return the stored store, or a fresh one when the id is absent or unknown.

    An unknown id does not fail: the store is created under a new id assigned
    by the persistence layer, and a warning is logged.
    """
    match resolve_store(uow, store_id):
        case Existing(record):
            return record
        case Missing(record_id):
            logger.warning(
                "Store with ID=%s does not exist; saving it as a new store", record_id
            )
            return Store()
        case New():
            return Store()


def find_or_create_employee(
    uow: AbstractUnitOfWork, employee_id: int | None, store_id: int | None = None
) -> Employee:
    """Return the stored employee, or a fresh one when no id is given.

    With ``store_id``, an existing employee must be unassigned or already work
    for that store.

    Raises:
        RecordNotFoundError: an id was given but no employee has it.
        EmployeeNotInStoreError: the employee works for another store.
    """
    match resolve_employee(uow, employee_id):
        case New():
            return Employee()
        case Existing(record):
            if (
                store_id is not None
                and record.is_assigned
                and not record.is_assigned_to(store_id)
            ):
                raise EmployeeNotInStoreError(record.employee_id, store_id)  # type: ignore[arg-type]
            return record
        case Missing(record_id):
            raise RecordNotFoundError(Employee.KIND, record_id)


def find_or_create_customer(
    uow: AbstractUnitOfWork, customer_id: int | None, store_id: int | None = None
) -> Customer:
    """Return the stored customer, or a fresh one when no id is given.

    With ``store_id``, an existing customer must already be a member of it.

    Raises:
        RecordNotFoundError: an id was given but no customer has it.
        CustomerNotInStoreError: the customer is not a member of ``store_id``.
    """
    match resolve_customer(uow, customer_id):
        case New():
            return Customer()
        case Existing(record):
            if store_id is not None and not record.is_member_of(store_id):
                raise CustomerNotInStoreError(record.customer_id, store_id)  # type: ignore[arg-type]
            return record
        case Missing(record_id):
            raise RecordNotFoundError(Customer.KIND, record_id)

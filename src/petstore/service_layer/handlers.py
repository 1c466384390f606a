"""Command handlers.

Each handler runs in exactly one unit of work. Records are mutated in memory
first and saved through the repositories, then the unit commits once at the
end; any exception leaves the ``with uow:`` block before ``commit`` and the
whole call is rolled back.
"""

import logging
from collections.abc import Callable

from petstore.domain.errors import EmployeeAlreadyAssignedError
from petstore.domain.model import Customer, Employee
from petstore.interfaces.unit_of_work import AbstractUnitOfWork

from . import commands, lookups
from .projections import CustomerProjection, EmployeeProjection, StoreProjection

logger = logging.getLogger(__name__)


def _copy_employee_fields(
    employee: Employee,
    cmd: (
        commands.AddEmployeeToStore
        | commands.UpdateStoreEmployee
        | commands.SaveEmployee
        | commands.UpdateEmployee
    ),
) -> None:
    employee.first_name = cmd.first_name
    employee.last_name = cmd.last_name
    employee.phone = cmd.phone
    employee.job_title = cmd.job_title


def _copy_customer_fields(
    customer: Customer,
    cmd: commands.AddCustomerToStore | commands.UpdateStoreCustomer,
) -> None:
    customer.first_name = cmd.first_name
    customer.last_name = cmd.last_name
    customer.email = cmd.email


def _require_employee_names(
    cmd: commands.SaveEmployee | commands.UpdateEmployee,
) -> None:
    lookups.require_text(Employee.KIND, "first_name", cmd.first_name)
    lookups.require_text(Employee.KIND, "last_name", cmd.last_name)


# ============================================================================
#                               Store handlers
# ============================================================================


def save_store(cmd: commands.SaveStore, uow: AbstractUnitOfWork) -> StoreProjection:
    """Create or update a store (an unknown id creates a new store)."""

    lookups.require_text("Store", "name", cmd.name)
    lookups.require_text("Store", "phone", cmd.phone)

    with uow:
        store = lookups.find_or_create_store(uow, cmd.store_id)
        created = store.is_new

        store.name = cmd.name
        store.address = cmd.address
        store.city = cmd.city
        store.state = cmd.state
        store.zip_code = cmd.zip_code
        store.phone = cmd.phone

        saved = uow.stores.save(store)
        assert saved.store_id is not None
        projection = StoreProjection.from_records(
            saved,
            uow.employees.list_by_store(saved.store_id),
            uow.customers.list_by_store(saved.store_id),
        )
        uow.commit()

    if created:
        logger.info("Created store %s (%s)", saved.store_id, saved.name)
    else:
        logger.debug("Updated store %s", saved.store_id)
    return projection


def delete_store(cmd: commands.DeleteStore, uow: AbstractUnitOfWork) -> None:
    """Delete a store; its employees and customer memberships go with it."""

    with uow:
        lookups.get_store(uow, cmd.store_id)
        uow.stores.delete(cmd.store_id)
        uow.commit()

    logger.info("Deleted store %s", cmd.store_id)


# ============================================================================
#                              Employee handlers
# ============================================================================


def add_employee_to_store(
    cmd: commands.AddEmployeeToStore, uow: AbstractUnitOfWork
) -> EmployeeProjection:
    """Create an employee in a store, or save an unassigned/own employee into it."""

    with uow:
        lookups.get_store(uow, cmd.store_id)
        employee = lookups.find_or_create_employee(
            uow, cmd.employee_id, store_id=cmd.store_id
        )
        created = employee.is_new

        _copy_employee_fields(employee, cmd)
        employee.assign_to(cmd.store_id)

        saved = uow.employees.save(employee)
        uow.commit()

    if created:
        logger.info("Created employee %s in store %s", saved.employee_id, cmd.store_id)
    return EmployeeProjection.from_record(saved)


def update_store_employee(
    cmd: commands.UpdateStoreEmployee, uow: AbstractUnitOfWork
) -> EmployeeProjection:
    """Update the fields of an employee who works for the given store."""

    with uow:
        lookups.get_store(uow, cmd.store_id)
        employee = lookups.get_employee_scoped(uow, cmd.store_id, cmd.employee_id)
        _copy_employee_fields(employee, cmd)
        saved = uow.employees.save(employee)
        uow.commit()

    return EmployeeProjection.from_record(saved)


def save_employee(
    cmd: commands.SaveEmployee, uow: AbstractUnitOfWork
) -> EmployeeProjection:
    """Create an unassigned employee, or update an existing one by id."""

    _require_employee_names(cmd)

    with uow:
        employee = lookups.find_or_create_employee(uow, cmd.employee_id)
        created = employee.is_new
        _copy_employee_fields(employee, cmd)
        saved = uow.employees.save(employee)
        uow.commit()

    if created:
        logger.info("Created unassigned employee %s", saved.employee_id)
    return EmployeeProjection.from_record(saved)


def update_employee(
    cmd: commands.UpdateEmployee, uow: AbstractUnitOfWork
) -> EmployeeProjection:
    """Update the fields of an employee, leaving its store untouched."""

    _require_employee_names(cmd)

    with uow:
        employee = lookups.get_employee(uow, cmd.employee_id)
        _copy_employee_fields(employee, cmd)
        saved = uow.employees.save(employee)
        uow.commit()

    return EmployeeProjection.from_record(saved)


def assign_employee_to_store(
    cmd: commands.AssignEmployeeToStore, uow: AbstractUnitOfWork
) -> EmployeeProjection:
    """Move an employee to a store.

    The previous store (if any) loses the employee in the same save, since the
    store-side index follows ``employee.store_id``.
    """

    with uow:
        lookups.get_store(uow, cmd.store_id)
        employee = lookups.get_employee(uow, cmd.employee_id)
        if employee.is_assigned_to(cmd.store_id):
            raise EmployeeAlreadyAssignedError(cmd.employee_id, cmd.store_id)

        previous = employee.assign_to(cmd.store_id)
        saved = uow.employees.save(employee)
        uow.commit()

    if previous is None:
        logger.info("Assigned employee %s to store %s", cmd.employee_id, cmd.store_id)
    else:
        logger.info(
            "Reassigned employee %s from store %s to store %s",
            cmd.employee_id,
            previous,
            cmd.store_id,
        )
    return EmployeeProjection.from_record(saved)


def delete_store_employee(
    cmd: commands.DeleteStoreEmployee, uow: AbstractUnitOfWork
) -> None:
    """Delete an employee who works for the given store."""

    with uow:
        lookups.get_store(uow, cmd.store_id)
        lookups.get_employee_scoped(uow, cmd.store_id, cmd.employee_id)
        uow.employees.delete(cmd.employee_id)
        uow.commit()

    logger.info("Deleted employee %s of store %s", cmd.employee_id, cmd.store_id)


def delete_employee(cmd: commands.DeleteEmployee, uow: AbstractUnitOfWork) -> None:
    """Delete an employee, whatever store it works for."""

    with uow:
        uow.employees.delete(cmd.employee_id)
        uow.commit()

    logger.info("Deleted employee %s", cmd.employee_id)


# ============================================================================
#                              Customer handlers
# ============================================================================


def add_customer_to_store(
    cmd: commands.AddCustomerToStore, uow: AbstractUnitOfWork
) -> CustomerProjection:
    """Create a customer in a store, or make an existing customer a member.

    An existing customer is looked up regardless of its current memberships,
    which is how one customer comes to belong to several stores.
    """

    with uow:
        lookups.get_store(uow, cmd.store_id)
        customer = lookups.find_or_create_customer(uow, cmd.customer_id)
        created = customer.is_new

        _copy_customer_fields(customer, cmd)
        customer.join(cmd.store_id)

        saved = uow.customers.save(customer)
        uow.commit()

    if created:
        logger.info("Created customer %s in store %s", saved.customer_id, cmd.store_id)
    else:
        logger.debug("Customer %s joined store %s", saved.customer_id, cmd.store_id)
    return CustomerProjection.from_record(saved)


def update_store_customer(
    cmd: commands.UpdateStoreCustomer, uow: AbstractUnitOfWork
) -> CustomerProjection:
    """Update the fields of a member customer of the given store."""

    with uow:
        lookups.get_store(uow, cmd.store_id)
        customer = lookups.get_customer_scoped(uow, cmd.store_id, cmd.customer_id)
        _copy_customer_fields(customer, cmd)
        saved = uow.customers.save(customer)
        uow.commit()

    return CustomerProjection.from_record(saved)


def remove_customer_from_store(
    cmd: commands.RemoveCustomerFromStore, uow: AbstractUnitOfWork
) -> CustomerProjection:
    """End one membership; the customer record and other memberships stay."""

    with uow:
        lookups.get_store(uow, cmd.store_id)
        customer = lookups.get_customer_scoped(uow, cmd.store_id, cmd.customer_id)
        customer.leave(cmd.store_id)
        saved = uow.customers.save(customer)
        uow.commit()

    logger.info("Customer %s left store %s", cmd.customer_id, cmd.store_id)
    return CustomerProjection.from_record(saved)


def delete_store_customer(
    cmd: commands.DeleteStoreCustomer, uow: AbstractUnitOfWork
) -> None:
    """Delete a member customer of the given store.

    The record is deleted outright, so the customer also leaves every other
    store it belonged to.
    """

    with uow:
        lookups.get_store(uow, cmd.store_id)
        customer = lookups.get_customer_scoped(uow, cmd.store_id, cmd.customer_id)
        customer.leave(cmd.store_id)
        uow.customers.delete(cmd.customer_id)
        uow.commit()

    if customer.store_ids:
        logger.warning(
            "Deleted customer %s of store %s; also removed from stores %s",
            cmd.customer_id,
            cmd.store_id,
            sorted(customer.store_ids),
        )
    else:
        logger.info("Deleted customer %s of store %s", cmd.customer_id, cmd.store_id)


COMMAND_HANDLERS: dict[type[commands.Command], Callable[..., object]] = {
    commands.SaveStore: save_store,
    commands.DeleteStore: delete_store,
    commands.AddEmployeeToStore: add_employee_to_store,
    commands.UpdateStoreEmployee: update_store_employee,
    commands.SaveEmployee: save_employee,
    commands.UpdateEmployee: update_employee,
    commands.AssignEmployeeToStore: assign_employee_to_store,
    commands.DeleteStoreEmployee: delete_store_employee,
    commands.DeleteEmployee: delete_employee,
    commands.AddCustomerToStore: add_customer_to_store,
    commands.UpdateStoreCustomer: update_store_customer,
    commands.RemoveCustomerFromStore: remove_customer_from_store,
    commands.DeleteStoreCustomer: delete_store_customer,
}

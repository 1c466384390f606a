"""Query handlers.

Reads open a unit of work too, so a store and the employees and customers
listed under it come from one snapshot. Nothing is committed.
"""

from collections.abc import Callable

from petstore.domain.model import Store
from petstore.interfaces.unit_of_work import AbstractUnitOfWork

from . import lookups, queries
from .projections import CustomerProjection, EmployeeProjection, StoreProjection


def _store_projection(uow: AbstractUnitOfWork, store: Store) -> StoreProjection:
    assert store.store_id is not None
    return StoreProjection.from_records(
        store,
        uow.employees.list_by_store(store.store_id),
        uow.customers.list_by_store(store.store_id),
    )


# ============================================================================
#                                  Stores
# ============================================================================


def list_stores(_: queries.ListStores, uow: AbstractUnitOfWork) -> list[StoreProjection]:
    with uow:
        return [_store_projection(uow, store) for store in uow.stores.list()]


def get_store(query: queries.GetStore, uow: AbstractUnitOfWork) -> StoreProjection:
    with uow:
        return _store_projection(uow, lookups.get_store(uow, query.store_id))


# ============================================================================
#                                 Employees
# ============================================================================


def list_employees(
    _: queries.ListEmployees, uow: AbstractUnitOfWork
) -> list[EmployeeProjection]:
    with uow:
        return [EmployeeProjection.from_record(e) for e in uow.employees.list()]


def list_store_employees(
    query: queries.ListStoreEmployees, uow: AbstractUnitOfWork
) -> list[EmployeeProjection]:
    """Employees of one store; fails with not-found when the store is absent."""
    with uow:
        lookups.get_store(uow, query.store_id)
        return [
            EmployeeProjection.from_record(e)
            for e in uow.employees.list_by_store(query.store_id)
        ]


def get_employee(
    query: queries.GetEmployee, uow: AbstractUnitOfWork
) -> EmployeeProjection:
    with uow:
        return EmployeeProjection.from_record(
            lookups.get_employee(uow, query.employee_id)
        )


def get_store_employee(
    query: queries.GetStoreEmployee, uow: AbstractUnitOfWork
) -> EmployeeProjection:
    with uow:
        lookups.get_store(uow, query.store_id)
        employee = lookups.get_employee_scoped(uow, query.store_id, query.employee_id)
        return EmployeeProjection.from_record(employee)


# ============================================================================
#                                 Customers
# ============================================================================


def list_customers(
    _: queries.ListCustomers, uow: AbstractUnitOfWork
) -> list[CustomerProjection]:
    with uow:
        return [CustomerProjection.from_record(c) for c in uow.customers.list()]


def list_store_customers(
    query: queries.ListStoreCustomers, uow: AbstractUnitOfWork
) -> list[CustomerProjection]:
    """Member customers of one store; fails with not-found when the store is absent."""
    with uow:
        lookups.get_store(uow, query.store_id)
        return [
            CustomerProjection.from_record(c)
            for c in uow.customers.list_by_store(query.store_id)
        ]


def get_store_customer(
    query: queries.GetStoreCustomer, uow: AbstractUnitOfWork
) -> CustomerProjection:
    with uow:
        lookups.get_store(uow, query.store_id)
        customer = lookups.get_customer_scoped(uow, query.store_id, query.customer_id)
        return CustomerProjection.from_record(customer)


QUERY_HANDLERS: dict[type[queries.Query], Callable[..., object]] = {
    queries.ListStores: list_stores,
    queries.GetStore: get_store,
    queries.ListEmployees: list_employees,
    queries.ListStoreEmployees: list_store_employees,
    queries.GetEmployee: get_employee,
    queries.GetStoreEmployee: get_store_employee,
    queries.ListCustomers: list_customers,
    queries.ListStoreCustomers: list_store_customers,
    queries.GetStoreCustomer: get_store_customer,
}

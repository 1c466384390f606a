"""Module defining Queries.

Queries are read-only messages. Their handlers return projections.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Query:
    """Base class for all queries."""


@dataclass(frozen=True)
class ListStores(Query):
    """All stores, ordered by id."""


@dataclass(frozen=True)
class GetStore(Query):
    """One store with its employees and customers."""

    store_id: int


@dataclass(frozen=True)
class ListEmployees(Query):
    """All employees, assigned or not, ordered by id."""


@dataclass(frozen=True)
class ListStoreEmployees(Query):
    """The employees of one store."""

    store_id: int


@dataclass(frozen=True)
class GetEmployee(Query):
    """One employee, whatever store it works for."""

    employee_id: int


@dataclass(frozen=True)
class GetStoreEmployee(Query):
    """One employee of the given store."""

    store_id: int
    employee_id: int


@dataclass(frozen=True)
class ListCustomers(Query):
    """All customers, ordered by id."""


@dataclass(frozen=True)
class ListStoreCustomers(Query):
    """The member customers of one store."""

    store_id: int


@dataclass(frozen=True)
class GetStoreCustomer(Query):
    """One member customer of the given store."""

    store_id: int
    customer_id: int

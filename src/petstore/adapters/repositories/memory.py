"""In-memory repository adapter implementations.

Note: These implementations are not thread-safe and are intended for tests
and single-process demos.
"""

from __future__ import annotations

import copy
from typing import Generic, TypeVar

from petstore.domain.model import Customer, Employee, Store
from petstore.interfaces.repositories import (
    CustomerRepository,
    EmployeeRepository,
    RecordNotFoundError,
    StoreRepository,
)

from .memory_store import InMemoryRecordData

E = TypeVar("E", Store, Employee, Customer)

# pylint: disable=consider-using-assignment-expr


class InMemoryRepositoryBase(Generic[E]):
    """Shared mechanics for in-memory repositories: get, list, save, delete."""

    KIND: str  # e.g., "Store", "Employee", ...
    ID_ATTR: str  # e.g., "store_id", "employee_id", ...
    BUCKET_ATTR: str  # e.g., "stores", "employees", ...

    def __init__(self, data: InMemoryRecordData) -> None:
        self._data = data

    @property
    def _bucket(self) -> dict[int, E]:
        return getattr(self._data, self.BUCKET_ATTR)

    def _id_of(self, record: E) -> int | None:
        return getattr(record, self.ID_ATTR)

    def get(self, record_id: int) -> E | None:
        record = self._bucket.get(record_id)
        if record is None:
            return None
        return copy.deepcopy(record)

    def list(self) -> list[E]:
        return [copy.deepcopy(self._bucket[key]) for key in sorted(self._bucket)]

    def save(self, record: E) -> E:
        stored = copy.deepcopy(record)
        record_id = self._id_of(stored)
        if record_id is None:
            record_id = self._data.next_id(self.KIND)
            setattr(stored, self.ID_ATTR, record_id)
        else:
            self._data.bump_sequence(self.KIND, record_id)

        self._reindex(self._bucket.get(record_id), stored)
        self._bucket[record_id] = stored
        return copy.deepcopy(stored)

    def delete(self, record_id: int) -> None:
        if (record := self._bucket.pop(record_id, None)) is None:
            raise RecordNotFoundError(self.KIND, record_id)
        self._unindex(record)

    def _reindex(self, previous: E | None, current: E) -> None:
        """Update store-side indexes when ``previous`` is replaced by ``current``."""

    def _unindex(self, record: E) -> None:
        """Remove a deleted record from the store-side indexes."""

    @staticmethod
    def _members(index: dict[int, set[int]], store_id: int) -> set[int]:
        return index.setdefault(store_id, set())


class InMemoryStoreRepository(InMemoryRepositoryBase[Store], StoreRepository):
    """In-memory implementation of the StoreRepository interface."""

    KIND = "Store"
    ID_ATTR = "store_id"
    BUCKET_ATTR = "stores"

    def _unindex(self, record: Store) -> None:
        store_id = record.store_id
        assert store_id is not None

        # employees are owned: they go with the store
        for employee_id in self._data.employees_by_store.pop(store_id, set()):
            self._data.employees.pop(employee_id, None)

        # customers are shared: only the membership goes
        for customer_id in self._data.customers_by_store.pop(store_id, set()):
            if (customer := self._data.customers.get(customer_id)) is not None:
                customer.leave(store_id)


class InMemoryEmployeeRepository(InMemoryRepositoryBase[Employee], EmployeeRepository):
    """In-memory implementation of the EmployeeRepository interface."""

    KIND = "Employee"
    ID_ATTR = "employee_id"
    BUCKET_ATTR = "employees"

    def list_by_store(self, store_id: int) -> list[Employee]:
        employee_ids = self._data.employees_by_store.get(store_id, set())
        return [
            copy.deepcopy(self._data.employees[employee_id])
            for employee_id in sorted(employee_ids)
        ]

    def _reindex(self, previous: Employee | None, current: Employee) -> None:
        employee_id = current.employee_id
        assert employee_id is not None
        index = self._data.employees_by_store
        if previous is not None and previous.store_id is not None:
            self._members(index, previous.store_id).discard(employee_id)
        if current.store_id is not None:
            self._members(index, current.store_id).add(employee_id)

    def _unindex(self, record: Employee) -> None:
        if record.store_id is not None:
            self._members(self._data.employees_by_store, record.store_id).discard(
                record.employee_id  # type: ignore[arg-type]
            )


class InMemoryCustomerRepository(InMemoryRepositoryBase[Customer], CustomerRepository):
    """In-memory implementation of the CustomerRepository interface."""

    KIND = "Customer"
    ID_ATTR = "customer_id"
    BUCKET_ATTR = "customers"

    def list_by_store(self, store_id: int) -> list[Customer]:
        customer_ids = self._data.customers_by_store.get(store_id, set())
        return [
            copy.deepcopy(self._data.customers[customer_id])
            for customer_id in sorted(customer_ids)
        ]

    def _reindex(self, previous: Customer | None, current: Customer) -> None:
        customer_id = current.customer_id
        assert customer_id is not None
        index = self._data.customers_by_store
        before = previous.store_ids if previous is not None else set()
        for store_id in before - current.store_ids:
            self._members(index, store_id).discard(customer_id)
        for store_id in current.store_ids - before:
            self._members(index, store_id).add(customer_id)

    def _unindex(self, record: Customer) -> None:
        for store_id in record.store_ids:
            self._members(self._data.customers_by_store, store_id).discard(
                record.customer_id  # type: ignore[arg-type]
            )

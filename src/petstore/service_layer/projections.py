"""Read-side projections returned by the service layer.

Projections are immutable plain values built from records inside a unit of
work, so they stay valid after the unit closes and never leak repository
state to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass

from petstore.domain.model import Customer, Employee, Store

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True, slots=True)
class StoreEmployee:
    """An employee as listed under its store."""

    employee_id: int
    first_name: str | None
    last_name: str | None
    phone: str | None
    job_title: str | None

    @classmethod
    def from_record(cls, employee: Employee) -> StoreEmployee:
        assert employee.employee_id is not None
        return cls(
            employee_id=employee.employee_id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            phone=employee.phone,
            job_title=employee.job_title,
        )


@dataclass(frozen=True, slots=True)
class StoreCustomer:
    """A customer as listed under a store it is a member of."""

    customer_id: int
    first_name: str | None
    last_name: str | None
    email: str | None

    @classmethod
    def from_record(cls, customer: Customer) -> StoreCustomer:
        assert customer.customer_id is not None
        return cls(
            customer_id=customer.customer_id,
            first_name=customer.first_name,
            last_name=customer.last_name,
            email=customer.email,
        )


@dataclass(frozen=True, slots=True)
class StoreProjection:
    """A store with its employees and member customers, ordered by id."""

    store_id: int
    name: str | None
    address: str | None
    city: str | None
    state: str | None
    zip_code: str | None
    phone: str | None
    employees: tuple[StoreEmployee, ...] = ()
    customers: tuple[StoreCustomer, ...] = ()

    @classmethod
    def from_records(
        cls,
        store: Store,
        employees: list[Employee] | None = None,
        customers: list[Customer] | None = None,
    ) -> StoreProjection:
        """Build a projection from a store and the records read through its index."""
        assert store.store_id is not None
        return cls(
            store_id=store.store_id,
            name=store.name,
            address=store.address,
            city=store.city,
            state=store.state,
            zip_code=store.zip_code,
            phone=store.phone,
            employees=tuple(StoreEmployee.from_record(e) for e in employees or ()),
            customers=tuple(StoreCustomer.from_record(c) for c in customers or ()),
        )


@dataclass(frozen=True, slots=True)
class EmployeeProjection:
    """An employee and the store it works for (``None`` when unassigned)."""

    employee_id: int
    first_name: str | None
    last_name: str | None
    phone: str | None
    job_title: str | None
    store_id: int | None

    @classmethod
    def from_record(cls, employee: Employee) -> EmployeeProjection:
        assert employee.employee_id is not None
        return cls(
            employee_id=employee.employee_id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            phone=employee.phone,
            job_title=employee.job_title,
            store_id=employee.store_id,
        )


@dataclass(frozen=True, slots=True)
class CustomerProjection:
    """A customer and the ids of the stores it is a member of, ascending."""

    customer_id: int
    first_name: str | None
    last_name: str | None
    email: str | None
    store_ids: tuple[int, ...] = ()

    @classmethod
    def from_record(cls, customer: Customer) -> CustomerProjection:
        assert customer.customer_id is not None
        return cls(
            customer_id=customer.customer_id,
            first_name=customer.first_name,
            last_name=customer.last_name,
            email=customer.email,
            store_ids=tuple(sorted(customer.store_ids)),
        )

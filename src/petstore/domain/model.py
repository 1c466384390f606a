"""Entity records for stores, employees and customers.

Relationships are held as id-based foreign keys, never as object references:

- an employee points at its store through ``store_id`` (``None`` while the
  employee is unassigned);
- a customer carries the set of store ids it is a member of.

The store side of each relationship (the store's employees and customers) is
an index derived from these keys by the repositories, so a record and the
index it feeds are always written together.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# pylint: disable=too-many-instance-attributes


@dataclass(slots=True)
class Store:
    """A store: the owning business entity and root of the association graph."""

    KIND = "Store"

    store_id: int | None = None
    name: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    phone: str | None = None

    @property
    def is_new(self) -> bool:
        """True until the persistence layer has assigned an id."""
        return self.store_id is None


@dataclass(slots=True)
class Employee:
    """A staff record belonging to at most one store.

    States:
      - Unassigned: ``store_id`` is ``None``.
      - Assigned: ``store_id`` names the employing store.
    """

    KIND = "Employee"

    employee_id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    job_title: str | None = None
    store_id: int | None = None

    @property
    def is_new(self) -> bool:
        """True until the persistence layer has assigned an id."""
        return self.employee_id is None

    @property
    def is_assigned(self) -> bool:
        """True when the employee is employed by a store."""
        return self.store_id is not None

    def is_assigned_to(self, store_id: int) -> bool:
        """True when the employee is employed by the given store."""
        return self.store_id == store_id

    def assign_to(self, store_id: int) -> int | None:
        """Move the employee to ``store_id``.

        Returns:
            The id of the store the employee was previously assigned to, if any.
        """
        previous, self.store_id = self.store_id, store_id
        return previous


@dataclass(slots=True)
class Customer:
    """A client record that may be a member of several stores."""

    KIND = "Customer"

    customer_id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    store_ids: set[int] = field(default_factory=set)

    @property
    def is_new(self) -> bool:
        """True until the persistence layer has assigned an id."""
        return self.customer_id is None

    def is_member_of(self, store_id: int) -> bool:
        """True when ``store_id`` is in the customer's membership set."""
        return store_id in self.store_ids

    def join(self, store_id: int) -> None:
        """Add a store to the membership set (idempotent)."""
        self.store_ids.add(store_id)

    def leave(self, store_id: int) -> None:
        """Remove a single store from the membership set (idempotent)."""
        self.store_ids.discard(store_id)

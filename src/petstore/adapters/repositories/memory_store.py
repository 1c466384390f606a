"""In-memory shared data store for repository adapters."""

import copy
from dataclasses import dataclass, field, fields

from petstore.domain.model import Customer, Employee, Store


@dataclass(slots=True)
class InMemoryRecordData:
    """Shared in-memory backing store for in-memory repository adapters.

    A single shared instance should be passed to all in-memory repositories
    (``InMemoryStoreRepository``, ``InMemoryEmployeeRepository``,
    ``InMemoryCustomerRepository``) so they operate on a common data source and
    keep the store-side indexes consistent with the records.

    Records are keyed by id. The two indexes map a store id to the ids of its
    employees and customers; they are derived data, maintained by the
    repositories on every save and delete.
    """

    stores: dict[int, Store] = field(default_factory=dict)
    employees: dict[int, Employee] = field(default_factory=dict)
    customers: dict[int, Customer] = field(default_factory=dict)

    # store_id -> employee ids
    employees_by_store: dict[int, set[int]] = field(default_factory=dict)

    # store_id -> customer ids
    customers_by_store: dict[int, set[int]] = field(default_factory=dict)

    # last id handed out, per record kind
    sequences: dict[str, int] = field(default_factory=dict)

    def next_id(self, kind: str) -> int:
        """Return the next id for a record kind (starting at 1)."""
        self.sequences[kind] = self.sequences.get(kind, 0) + 1
        return self.sequences[kind]

    def bump_sequence(self, kind: str, record_id: int) -> None:
        """Ensure later ids for ``kind`` are greater than ``record_id``."""
        self.sequences[kind] = max(self.sequences.get(kind, 0), record_id)

    def snapshot(self) -> "InMemoryRecordData":
        """Return a deep copy of the current state."""
        return copy.deepcopy(self)

    def restore(self, snapshot: "InMemoryRecordData") -> None:
        """Replace the current state with a copy taken by ``snapshot()``.

        Updates this instance in place so repositories sharing it see the
        restored state.
        """
        for f in fields(self):
            setattr(self, f.name, copy.deepcopy(getattr(snapshot, f.name)))

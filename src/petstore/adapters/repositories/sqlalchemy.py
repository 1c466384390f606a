"""Repository implementations using SQLAlchemy Core.

All repositories share the connection of the unit of work that created them,
so every statement they issue belongs to that unit's transaction.
"""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import delete, func, insert, select, update

from petstore.adapters.db.dialects import DialectName
from petstore.adapters.db.schema import customer, employee, store, store_customer
from petstore.domain.model import Customer, Employee, Store
from petstore.interfaces.repositories import (
    CustomerRepository,
    EmployeeRepository,
    RecordNotFoundError,
    StoreRepository,
)

if TYPE_CHECKING:
    from sqlalchemy import Table
    from sqlalchemy.engine import Connection, Row

E = TypeVar("E", Store, Employee, Customer)

# pylint: disable=consider-using-assignment-expr


class SqlAlchemyRepositoryBase(Generic[E]):
    """Shared mechanics for table-backed repositories: get, list, save, delete."""

    KIND: str
    ID_ATTR: str
    TABLE: Table
    RECORD_CLASS: type

    def __init__(self, connection: Connection):
        self.connection = connection

    @property
    def _pk(self):
        return self.TABLE.c[self.ID_ATTR]

    # --- row mapping ---

    def _to_record(self, row: Row) -> E:
        return self.RECORD_CLASS(**row._mapping)  # pylint: disable=protected-access

    def _to_values(self, record: E) -> dict[str, Any]:
        return {
            column.name: getattr(record, column.name)
            for column in self.TABLE.columns
            if column.name != self.ID_ATTR
        }

    # --- lookups ---

    def get(self, record_id: int) -> E | None:
        stmt = select(self.TABLE).where(self._pk == record_id)
        if not (row := self.connection.execute(stmt).fetchone()):
            return None
        return self._to_record(row)

    def list(self) -> list[E]:
        stmt = select(self.TABLE).order_by(self._pk)
        return [self._to_record(row) for row in self.connection.execute(stmt)]

    # --- writes ---

    def save(self, record: E) -> E:
        values = self._to_values(record)
        record_id = getattr(record, self.ID_ATTR)

        if record_id is None:
            result = self.connection.execute(insert(self.TABLE).values(**values))
            record_id = result.inserted_primary_key[0]
        else:
            result = self.connection.execute(
                update(self.TABLE).where(self._pk == record_id).values(**values)
            )
            if result.rowcount == 0:  # last write wins: upsert under the given id
                self.connection.execute(
                    insert(self.TABLE).values(**{self.ID_ATTR: record_id}, **values)
                )
                self._sync_identity()

        saved = self.get(record_id)
        assert saved is not None
        return saved

    def _sync_identity(self) -> None:
        """Move the id sequence past the largest stored id.

        PostgreSQL identity columns do not advance when a row is inserted
        with an explicit id; SQLite already picks ``max(id) + 1``.
        """
        if self.connection.dialect.name != DialectName.POSTGRES:
            return
        sequence = func.pg_get_serial_sequence(self.TABLE.name, self.ID_ATTR)
        largest = select(func.max(self._pk)).scalar_subquery()
        self.connection.execute(select(func.setval(sequence, largest)))

    def delete(self, record_id: int) -> None:
        result = self.connection.execute(delete(self.TABLE).where(self._pk == record_id))
        if result.rowcount == 0:
            raise RecordNotFoundError(self.KIND, record_id)


class SqlAlchemyStoreRepository(SqlAlchemyRepositoryBase[Store], StoreRepository):
    """StoreRepository backed by the ``store`` table."""

    KIND = "Store"
    ID_ATTR = "store_id"
    TABLE = store
    RECORD_CLASS = Store

    def delete(self, record_id: int) -> None:
        # explicit, so the cascade holds even where foreign keys are not enforced
        self.connection.execute(delete(employee).where(employee.c.store_id == record_id))
        self.connection.execute(
            delete(store_customer).where(store_customer.c.store_id == record_id)
        )
        super().delete(record_id)


class SqlAlchemyEmployeeRepository(
    SqlAlchemyRepositoryBase[Employee], EmployeeRepository
):
    """EmployeeRepository backed by the ``employee`` table.

    ``employee.store_id`` is both the record's foreign key and the store-side
    index, so one statement keeps both sides in sync.
    """

    KIND = "Employee"
    ID_ATTR = "employee_id"
    TABLE = employee
    RECORD_CLASS = Employee

    def list_by_store(self, store_id: int) -> list[Employee]:
        stmt = (
            select(employee)
            .where(employee.c.store_id == store_id)
            .order_by(employee.c.employee_id)
        )
        return [self._to_record(row) for row in self.connection.execute(stmt)]


class SqlAlchemyCustomerRepository(
    SqlAlchemyRepositoryBase[Customer], CustomerRepository
):
    """CustomerRepository backed by the ``customer`` and ``store_customer`` tables."""

    KIND = "Customer"
    ID_ATTR = "customer_id"
    TABLE = customer
    RECORD_CLASS = Customer

    # --- memberships ---

    def _memberships(self, customer_ids: list[int] | None = None) -> dict[int, set[int]]:
        stmt = select(store_customer.c.customer_id, store_customer.c.store_id)
        if customer_ids is not None:
            stmt = stmt.where(store_customer.c.customer_id.in_(customer_ids))
        memberships: dict[int, set[int]] = defaultdict(set)
        for row in self.connection.execute(stmt):
            memberships[row.customer_id].add(row.store_id)
        return memberships

    def _with_memberships(self, rows: list[Row]) -> list[Customer]:
        memberships = self._memberships([row.customer_id for row in rows])
        customers = [self._to_record(row) for row in rows]
        for record in customers:
            record.store_ids = set(memberships.get(record.customer_id, set()))  # type: ignore[arg-type]
        return customers

    def _sync_memberships(self, customer_id: int, store_ids: set[int]) -> None:
        current = self._memberships([customer_id]).get(customer_id, set())
        if stale := current - store_ids:
            self.connection.execute(
                delete(store_customer).where(
                    store_customer.c.customer_id == customer_id,
                    store_customer.c.store_id.in_(stale),
                )
            )
        if added := store_ids - current:
            self.connection.execute(
                insert(store_customer),
                [
                    {"store_id": store_id, "customer_id": customer_id}
                    for store_id in sorted(added)
                ],
            )

    # --- overrides ---

    def get(self, record_id: int) -> Customer | None:
        stmt = select(customer).where(customer.c.customer_id == record_id)
        rows = list(self.connection.execute(stmt))
        if not rows:
            return None
        return self._with_memberships(rows)[0]

    def list(self) -> list[Customer]:
        stmt = select(customer).order_by(customer.c.customer_id)
        return self._with_memberships(list(self.connection.execute(stmt)))

    def list_by_store(self, store_id: int) -> list[Customer]:
        stmt = (
            select(customer)
            .join(store_customer, store_customer.c.customer_id == customer.c.customer_id)
            .where(store_customer.c.store_id == store_id)
            .order_by(customer.c.customer_id)
        )
        return self._with_memberships(list(self.connection.execute(stmt)))

    def save(self, record: Customer) -> Customer:
        saved = super().save(record)
        assert saved.customer_id is not None
        self._sync_memberships(saved.customer_id, set(record.store_ids))
        saved.store_ids = set(record.store_ids)
        return saved

    def delete(self, record_id: int) -> None:
        self.connection.execute(
            delete(store_customer).where(store_customer.c.customer_id == record_id)
        )
        super().delete(record_id)

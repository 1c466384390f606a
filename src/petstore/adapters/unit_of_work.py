"""SQLAlchemy-backed Unit of Work for PETSTORE.

Provides a context-managed UnitOfWork using one SQLAlchemy Connection and
the SQLAlchemy repositories bound to it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from petstore.adapters.repositories.sqlalchemy import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyEmployeeRepository,
    SqlAlchemyStoreRepository,
)
from petstore.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.stores = SqlAlchemyStoreRepository(self.connection)
        self.employees = SqlAlchemyEmployeeRepository(self.connection)
        self.customers = SqlAlchemyCustomerRepository(self.connection)
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()

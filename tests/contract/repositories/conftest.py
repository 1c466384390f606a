"""Pytest fixtures for the repository contract tests.

Provided fixtures
-----------------
- **repos**: Parametrized over every repository adapter. Yields a namespace
  holding ``stores``, ``employees`` and ``customers`` repositories that
  share one backing store (a single ``InMemoryRecordData``, or a single
  database connection).

Backends:
  - ``"memory"``: the in-memory repositories;
  - ``"sqlite"``: SQLAlchemy repositories over an in-memory SQLite database;
  - ``"postgres"``: SQLAlchemy repositories over a Testcontainers Postgres
    (skipped when Docker is unavailable).
"""

from __future__ import annotations

from collections.abc import Iterator
from types import SimpleNamespace

import pytest

from petstore.adapters.repositories.memory import (
    InMemoryCustomerRepository,
    InMemoryEmployeeRepository,
    InMemoryStoreRepository,
)
from petstore.adapters.repositories.memory_store import InMemoryRecordData
from petstore.adapters.repositories.sqlalchemy import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyEmployeeRepository,
    SqlAlchemyStoreRepository,
)

ENGINE_FIXTURES = {"sqlite": "sqlite_engine_memory", "postgres": "postgres_engine"}


@pytest.fixture(params=["memory", "sqlite", "postgres"])
def repos(request: pytest.FixtureRequest) -> Iterator[SimpleNamespace]:
    """Return the three repositories of the requested backend."""

    match request.param:
        case "memory":
            data = InMemoryRecordData()
            yield SimpleNamespace(
                stores=InMemoryStoreRepository(data),
                employees=InMemoryEmployeeRepository(data),
                customers=InMemoryCustomerRepository(data),
            )
        case "sqlite" | "postgres":
            engine = request.getfixturevalue(ENGINE_FIXTURES[request.param])
            with engine.connect() as conn:
                yield SimpleNamespace(
                    stores=SqlAlchemyStoreRepository(conn),
                    employees=SqlAlchemyEmployeeRepository(conn),
                    customers=SqlAlchemyCustomerRepository(conn),
                )
                conn.rollback()
        case _:
            raise ValueError(f"unknown repository backend: {request.param}")

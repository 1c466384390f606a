"""Record tables.

Defines the ``store``, ``employee``, ``customer`` and ``store_customer``
tables backing the SQLAlchemy repositories.

Relationships are plain foreign keys:

| Relation          | Held by                          | On store delete           |
|-------------------|----------------------------------|---------------------------|
| store 1:N employee| ``employee.store_id`` (nullable) | employees deleted         |
| store M:N customer| ``store_customer`` join rows     | memberships deleted       |

A store's employees and customers are read through these keys (the
store-side index); nothing is stored twice, so the two sides of a relation
cannot drift apart.
"""

from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Column,
    ForeignKey,
    Identity,
    Integer,
    PrimaryKeyConstraint,
    String,
    Table,
)

from .metadata import metadata

__all__ = ["store", "employee", "customer", "store_customer"]

# Portable auto-increment primary key:
# - Postgres: BIGINT IDENTITY
# - SQLite: rowid-backed autoincrement (primary_key=True is sufficient)
BIGINT_PK = BigInteger().with_variant(Integer(), "sqlite")


store = Table(
    "store",
    metadata,
    Column("store_id", BIGINT_PK, Identity(start=1), primary_key=True),
    Column("name", String(200), nullable=True),
    Column("address", String(200), nullable=True),
    Column("city", String(100), nullable=True),
    Column("state", String(100), nullable=True),
    Column("zip_code", String(20), nullable=True),
    Column("phone", String(40), nullable=True),
    comment="Stores: root of the association graph.",
)

employee = Table(
    "employee",
    metadata,
    Column("employee_id", BIGINT_PK, Identity(start=1), primary_key=True),
    Column("first_name", String(100), nullable=True),
    Column("last_name", String(100), nullable=True),
    Column("phone", String(40), nullable=True),
    Column("job_title", String(100), nullable=True),
    Column(
        "store_id",
        BIGINT_PK,
        ForeignKey("store.store_id", ondelete="CASCADE"),
        nullable=True,
        index=True,
        comment="Employing store; NULL while the employee is unassigned.",
    ),
    comment="Employees: each belongs to at most one store.",
)

customer = Table(
    "customer",
    metadata,
    Column("customer_id", BIGINT_PK, Identity(start=1), primary_key=True),
    Column("first_name", String(100), nullable=True),
    Column("last_name", String(100), nullable=True),
    Column("email", String(254), nullable=True),
    comment="Customers: may be members of several stores.",
)

store_customer = Table(
    "store_customer",
    metadata,
    Column(
        "store_id",
        BIGINT_PK,
        ForeignKey("store.store_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "customer_id",
        BIGINT_PK,
        ForeignKey("customer.customer_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    PrimaryKeyConstraint("store_id", "customer_id"),
    comment="Store/customer membership (one row per membership).",
)

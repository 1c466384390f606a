"""create record tables

Revision ID: 3f1c9a7d52e4
Revises:
Create Date: 2026-10-12 09:14:27.511203

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# deal with alembic stuff
# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d52e4"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

BIGINT_PK = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "store",
        sa.Column("store_id", BIGINT_PK, sa.Identity(start=1), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=True),
        sa.Column("address", sa.String(length=200), nullable=True),
        sa.Column("city", sa.String(length=100), nullable=True),
        sa.Column("state", sa.String(length=100), nullable=True),
        sa.Column("zip_code", sa.String(length=20), nullable=True),
        sa.Column("phone", sa.String(length=40), nullable=True),
        sa.PrimaryKeyConstraint("store_id", name=op.f("pk_store")),
        comment="Stores: root of the association graph.",
    )

    op.create_table(
        "employee",
        sa.Column("employee_id", BIGINT_PK, sa.Identity(start=1), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=True),
        sa.Column("last_name", sa.String(length=100), nullable=True),
        sa.Column("phone", sa.String(length=40), nullable=True),
        sa.Column("job_title", sa.String(length=100), nullable=True),
        sa.Column(
            "store_id",
            BIGINT_PK,
            nullable=True,
            comment="Employing store; NULL while the employee is unassigned.",
        ),
        sa.ForeignKeyConstraint(
            ["store_id"],
            ["store.store_id"],
            name=op.f("fk_employee_store_id_store"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("employee_id", name=op.f("pk_employee")),
        comment="Employees: each belongs to at most one store.",
    )
    op.create_index(op.f("ix_employee_store_id"), "employee", ["store_id"])

    op.create_table(
        "customer",
        sa.Column("customer_id", BIGINT_PK, sa.Identity(start=1), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=True),
        sa.Column("last_name", sa.String(length=100), nullable=True),
        sa.Column("email", sa.String(length=254), nullable=True),
        sa.PrimaryKeyConstraint("customer_id", name=op.f("pk_customer")),
        comment="Customers: may be members of several stores.",
    )

    op.create_table(
        "store_customer",
        sa.Column("store_id", BIGINT_PK, nullable=False),
        sa.Column("customer_id", BIGINT_PK, nullable=False),
        sa.ForeignKeyConstraint(
            ["store_id"],
            ["store.store_id"],
            name=op.f("fk_store_customer_store_id_store"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["customer_id"],
            ["customer.customer_id"],
            name=op.f("fk_store_customer_customer_id_customer"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint(
            "store_id", "customer_id", name=op.f("pk_store_customer")
        ),
        comment="Store/customer membership (one row per membership).",
    )
    op.create_index(
        op.f("ix_store_customer_customer_id"), "store_customer", ["customer_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index(op.f("ix_store_customer_customer_id"), table_name="store_customer")
    op.drop_table("store_customer")
    op.drop_table("customer")
    op.drop_index(op.f("ix_employee_store_id"), table_name="employee")
    op.drop_table("employee")
    op.drop_table("store")

"""The ``MetaData`` every petstore table is declared on.

Constraint and index names come from the naming convention below rather than
from the backend, so SQLite and PostgreSQL agree on them and the migration
can refer to them by name, e.g. ``pk_store``,
``fk_employee_store_id_store`` or ``ix_store_customer_customer_id``.
"""

from sqlalchemy import MetaData

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(table_name)s_%(column_0_N_name)s",
        "uq": "uq_%(table_name)s_%(column_0_N_name)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_N_name)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

"""Adapters (outbound implementations) for PETSTORE.

Concrete implementations of the ports defined in `petstore.interfaces`:
in-memory and SQLAlchemy repositories, the SQLAlchemy unit of work, the
engine factory, table schema and Alembic migrations.

Dependency rule: may import `petstore.interfaces` and `petstore.domain`; must
not import `petstore.service_layer` or `petstore.entrypoints`.
"""

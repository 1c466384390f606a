"""Packaged Alembic migration scripts for the PETSTORE record tables."""

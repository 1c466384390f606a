"""Fixture plugins loaded by ``tests/conftest.py``."""

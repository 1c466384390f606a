"""Unit of Work interface for PETSTORE.

Defines the AbstractUnitOfWork contract: a context-managed unit of work
exposing one repository per entity kind and abstract commit/rollback methods.
"""

from __future__ import annotations

import abc

from .repositories import CustomerRepository, EmployeeRepository, StoreRepository


class AbstractUnitOfWork(abc.ABC):
    """Contract for a transactional unit of work.

    Everything done through the repositories between ``__enter__`` and
    ``commit`` is one transaction: both sides of a relationship are
    committed together or not at all.
    """

    stores: StoreRepository
    employees: EmployeeRepository
    customers: CustomerRepository

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit.

        Implementations may acquire transactional resources here.
        """
        return self

    def __exit__(self, *args):
        """Exit the unit of work context.

        Default behavior is to roll back on exit.
        """
        self.rollback()

    @abc.abstractmethod
    def commit(self):
        """Persist changes and finalize the transaction."""

    @abc.abstractmethod
    def rollback(self):
        """Revert changes and clean up transactional resources."""

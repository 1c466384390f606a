"""Interface for the Employee repository."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, ClassVar

from .base import Repository

if TYPE_CHECKING:
    from petstore.domain.model import Employee


class EmployeeRepository(Repository["Employee"]):
    """Persistence port for employees.

    ``Employee.store_id`` is the foreign key of the store-to-employee
    relation. Saving an employee updates the store-side index in the same
    call, so a store's employees are always exactly the employees whose
    ``store_id`` names it.
    """

    KIND: ClassVar[str] = "Employee"

    @abc.abstractmethod
    def list_by_store(self, store_id: int) -> list[Employee]:
        """List the employees assigned to a store, ordered by id.

        Args:
            store_id: The id of the employing store.

        Returns:
            The store's employees; empty if it has none (or does not exist).
        """

"""Interface for the Customer repository."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, ClassVar

from .base import Repository

if TYPE_CHECKING:
    from petstore.domain.model import Customer


class CustomerRepository(Repository["Customer"]):
    """Persistence port for customers.

    ``Customer.store_ids`` is the membership set of the store-to-customer
    relation. Saving a customer rewrites its memberships from both sides in
    the same call, so a store's customers are always exactly the customers
    whose ``store_ids`` contain it. Deleting a customer removes every one of
    its memberships.
    """

    KIND: ClassVar[str] = "Customer"

    @abc.abstractmethod
    def list_by_store(self, store_id: int) -> list[Customer]:
        """List the customers that are members of a store, ordered by id.

        Args:
            store_id: The id of the store.

        Returns:
            The store's customers; empty if it has none (or does not exist).
        """

"""Interface for the Store repository."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from .base import Repository

if TYPE_CHECKING:
    from petstore.domain.model import Store


class StoreRepository(Repository["Store"]):
    """Persistence port for stores.

    Cascade contract:
        Deleting a store must also delete every employee assigned to it and
        drop the store from every customer's membership set. Customers
        themselves are kept. Implementations honour this inside the same
        transaction as the delete; callers do not re-implement it.
    """

    KIND: ClassVar[str] = "Store"

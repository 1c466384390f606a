"""Defines the base interface shared by all record repositories."""

from __future__ import annotations

import abc
from typing import ClassVar, Generic, TypeVar

E = TypeVar("E")  # Entity record type


class Repository(abc.ABC, Generic[E]):
    """Last-write-wins persistence for one entity kind, keyed by integer id."""

    KIND: ClassVar[str]  # e.g., "Store", "Employee"

    @abc.abstractmethod
    def get(self, record_id: int) -> E | None:
        """Get a record by its id.

        Args:
            record_id: The id assigned to the record on first save.

        Returns:
            A copy of the stored record if found, otherwise None.

        Note:
            Returned records are detached copies; mutating one has no effect
            until it is passed back to `save`.
        """

    @abc.abstractmethod
    def list(self) -> list[E]:
        """List every record of this kind, ordered by id."""

    @abc.abstractmethod
    def save(self, record: E) -> E:
        """Insert or update a record.

        A record without an id is inserted and assigned a fresh id. A record
        with an id replaces the stored record with that id (last write wins).

        Args:
            record: The record to persist.

        Returns:
            A copy of the persisted record, carrying its assigned id.
        """

    @abc.abstractmethod
    def delete(self, record_id: int) -> None:
        """Delete a record by its id.

        Args:
            record_id: The id of the record to delete.

        Raises:
            RecordNotFoundError: If no record exists with that id.
        """

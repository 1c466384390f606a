"""Errors related to repository interfaces."""


class RepositoryError(Exception):
    """Base class for all repository-related errors."""


class RecordNotFoundError(RepositoryError):
    """Raised when a referenced id does not exist in the backing store.

    Attributes:
        kind (str): The record kind (e.g. "Store", "Employee").
        record_id (int): The id that could not be found.
    """

    def __init__(self, kind: str, record_id: int) -> None:
        super().__init__(f"{kind} with ID={record_id} was not found.")
        self.kind = kind
        self.record_id = record_id

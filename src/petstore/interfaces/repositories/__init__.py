"""Repository interfaces for PETSTORE."""

from .customer_repository import CustomerRepository
from .employee_repository import EmployeeRepository
from .errors import RecordNotFoundError, RepositoryError
from .store_repository import StoreRepository

__all__ = [
    "StoreRepository",
    "EmployeeRepository",
    "CustomerRepository",
    "RepositoryError",
    "RecordNotFoundError",
]

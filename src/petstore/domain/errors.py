"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class ValidationError(DomainError):
    """Raised when a required field of a create/update payload is missing or blank."""

    def __init__(self, kind: str, field: str) -> None:
        super().__init__(f"{kind} {field} is required and cannot be blank.")
        self.kind = kind
        self.field = field


# ============================================================================
#                       Relationship related errors
# ============================================================================


class ScopeViolationError(DomainError):
    """Raised when a record exists but is not associated with the given store.

    Distinct from a not-found error: the record is there, just not in this store.
    """

    def __init__(self, kind: str, record_id: int, store_id: int, reason: str) -> None:
        super().__init__(
            f"The {kind.lower()} with ID={record_id} {reason} the store with ID={store_id}."
        )
        self.kind = kind
        self.record_id = record_id
        self.store_id = store_id


class EmployeeNotInStoreError(ScopeViolationError):
    """Raised when an employee is not employed by the store given in the call."""

    def __init__(self, employee_id: int, store_id: int) -> None:
        super().__init__("Employee", employee_id, store_id, "is not employed by")


class CustomerNotInStoreError(ScopeViolationError):
    """Raised when a store is not in a customer's membership set."""

    def __init__(self, customer_id: int, store_id: int) -> None:
        super().__init__("Customer", customer_id, store_id, "is not a member of")


class ConflictError(DomainError):
    """Raised when an operation would create a duplicate or contradictory relationship."""


class EmployeeAlreadyAssignedError(ConflictError):
    """Raised when assigning an employee to the store it already works for."""

    def __init__(self, employee_id: int, store_id: int) -> None:
        super().__init__(
            f"The employee with ID={employee_id} is already assigned to "
            f"the store with ID={store_id}."
        )
        self.employee_id = employee_id
        self.store_id = store_id

"""Service layer for PETSTORE.

Implements the application use-cases: command and query handlers, the lookups
they share, and the transaction boundaries around them. This is where the
store/employee/customer relationship rules are enforced.

Dependency rule: may import `petstore.domain` and `petstore.interfaces`, but
not `petstore.adapters` or `petstore.entrypoints`.
"""

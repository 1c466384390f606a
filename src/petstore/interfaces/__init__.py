"""Interfaces (application boundary) for PETSTORE.

Defines framework-free application contracts: the repository ports for each
entity kind and the unit of work that groups them into one transaction.
Business rules stay out of this package.

Dependency rule: this package may only import entity types from
`petstore.domain`. It may be imported by `petstore.service_layer`,
`petstore.adapters`, and `petstore.bootstrap`.
"""

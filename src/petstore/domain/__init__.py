"""Domain layer for PETSTORE.

Contains business rules: entity records, the tagged lookup result used by the
find-or-create paths, and domain errors. This package is deliberately
technology-agnostic.

Dependency rule: do not import from `petstore.adapters` or `petstore.entrypoints`.
"""

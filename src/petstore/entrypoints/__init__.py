"""Entrypoints (inbound adapters) for PETSTORE.

Expose the application to the outside world. Parse and validate inputs, hand
commands and queries to the message bus, and present the results.

Dependency rule: reach the service layer through `petstore.bootstrap`; avoid
importing `petstore.adapters` directly.
"""

"""Bootstrap (composition root) for PETSTORE.

Assembles the application at runtime: wires concrete adapters to the
service-layer handlers, composes the message bus and unit of work, and reads
configuration.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `petstore.adapters`, `petstore.service_layer`,
  `petstore.interfaces`, `petstore.domain`, and `petstore.config`.
- Inner layers must not import `petstore.bootstrap`.

No business rules live here; this is assembly and lifecycle only.
"""

from petstore.adapters.db.dialects import UnsupportedDialect
from petstore.config import DatabaseUrlNotSetError

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap", "DatabaseUrlNotSetError", "UnsupportedDialect"]

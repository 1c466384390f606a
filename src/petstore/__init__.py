"""PETSTORE

A record-keeping backend for a small pet store business. It keeps the
store/employee/customer association graph consistent across create, update,
reassignment and delete operations.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"

"""The ``petstore`` command-line interface."""

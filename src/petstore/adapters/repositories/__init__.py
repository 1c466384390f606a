"""Repository adapters for PETSTORE."""

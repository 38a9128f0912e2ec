"""PropertyOps - property management CRUD API and UI generator."""

__version__ = "0.1.0"

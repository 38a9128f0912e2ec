"""Core services and cross-cutting concerns.

This module intentionally does not re-export symbols from submodules
to avoid circular imports. Import directly from submodules when needed:

- propertyops.core.database: Base, get_db, mixins
- propertyops.core.errors: AppException, NotFoundError, ValidationError
- propertyops.core.logging: structlog setup and request middleware
- propertyops.core.validation: per-field rule checks
"""

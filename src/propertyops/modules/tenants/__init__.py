"""Tenants module - people renting or applying for units."""

from fastapi import APIRouter


router = APIRouter(prefix="/tenants", tags=["tenants"])

# Import routes to register them (must be after router is defined)
from propertyops.modules.tenants import routes  # noqa: F401, E402


# Module metadata
__module_info__ = {
    "name": "tenants",
    "version": "1.0.0",
    "description": "Tenant records",
}

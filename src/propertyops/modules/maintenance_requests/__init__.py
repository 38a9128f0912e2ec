"""Maintenance requests module - repair tickets raised by tenants."""

from fastapi import APIRouter


router = APIRouter(prefix="/maintenance_requests", tags=["maintenance_requests"])

# Import routes to register them (must be after router is defined)
from propertyops.modules.maintenance_requests import routes  # noqa: F401, E402


# Module metadata
__module_info__ = {
    "name": "maintenance_requests",
    "version": "1.0.0",
    "description": "Maintenance requests linked to a tenant and a unit",
}

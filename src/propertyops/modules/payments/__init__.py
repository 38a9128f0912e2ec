"""Payments module - append-only rent payments."""

from fastapi import APIRouter


router = APIRouter(prefix="/payments", tags=["payments"])

# Import routes to register them (must be after router is defined)
from propertyops.modules.payments import routes  # noqa: F401, E402


# Module metadata
__module_info__ = {
    "name": "payments",
    "version": "1.0.0",
    "description": "Payments linked to a tenant and a unit",
}

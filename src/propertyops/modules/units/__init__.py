"""Units module - rentable units and their rent."""

from fastapi import APIRouter


router = APIRouter(prefix="/units", tags=["units"])

# Import routes to register them (must be after router is defined)
from propertyops.modules.units import routes  # noqa: F401, E402


# Module metadata
__module_info__ = {
    "name": "units",
    "version": "1.0.0",
    "description": "Unit records",
}

"""Parent-record checks shared by records that belong to a tenant and a unit."""

from typing import Any

from propertyops.core.validation import MISSING_PARENT_MESSAGE, FieldErrors, is_record_id
from propertyops.modules.tenants.repos import TenantRepository
from propertyops.modules.units.repos import UnitRepository


async def check_tenant_and_unit(
    errors: FieldErrors,
    values: dict[str, Any],
    tenants: TenantRepository,
    units: UnitRepository,
) -> None:
    """Require ``tenant_id`` and ``unit_id`` to point at existing rows.

    Failures are recorded under ``tenant`` and ``unit``. Ids outside the
    range of the id column are treated as missing without a lookup.
    """
    tenant_id = values.get("tenant_id")
    if not is_record_id(tenant_id) or await tenants.get_by_id(tenant_id) is None:
        errors.add("tenant", MISSING_PARENT_MESSAGE)

    unit_id = values.get("unit_id")
    if not is_record_id(unit_id) or await units.get_by_id(unit_id) is None:
        errors.add("unit", MISSING_PARENT_MESSAGE)

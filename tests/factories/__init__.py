"""Test factories for generating request payloads."""

from tests.factories.maintenance_request import MaintenanceRequestCreateFactory
from tests.factories.payment import PaymentCreateFactory
from tests.factories.tenant import TenantCreateFactory
from tests.factories.unit import UnitCreateFactory


__all__ = [
    "MaintenanceRequestCreateFactory",
    "PaymentCreateFactory",
    "TenantCreateFactory",
    "UnitCreateFactory",
]

"""Factory for payment payloads.

``tenant_id`` and ``unit_id`` must be passed to ``build``.
"""

from datetime import date
from uuid import uuid4

from polyfactory.factories.pydantic_factory import ModelFactory

from propertyops.modules.payments.schemas import PaymentCreate


class PaymentCreateFactory(ModelFactory[PaymentCreate]):
    """Factory for generating PaymentCreate data."""

    __model__ = PaymentCreate
    __allow_none_optionals__ = False

    @classmethod
    def amount_cents(cls) -> int:
        """Generate a positive amount in cents."""
        return cls.__faker__.random_int(min=1, max=500000)

    @classmethod
    def paid_on(cls) -> date:
        return date.today()

    @classmethod
    def method(cls) -> str:
        return "ach"

    @classmethod
    def reference(cls) -> str:
        """Generate a unique reference."""
        return f"ACH-{uuid4().hex[:6].upper()}"

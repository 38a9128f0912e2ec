"""Payment API routes."""

from fastapi import Query, status

from propertyops.core.errors import ValidationError
from propertyops.core.validation import NOT_A_NUMBER_MESSAGE
from propertyops.modules.payments import router
from propertyops.modules.payments.schemas import PaymentCreateRequest, PaymentResponse
from propertyops.modules.payments.services import PaymentSvc


def _optional_id(field: str, value: str | None) -> int | None:
    """Parse an ID filter, treating an empty value as no filter."""
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError(errors={field: [NOT_A_NUMBER_MESSAGE]}) from None


@router.get(
    "",
    response_model=list[PaymentResponse],
    summary="List payments",
    description="List payments by paid date, newest first, with tenant and unit embedded.",
)
async def list_payments(
    service: PaymentSvc,
    tenant_id: str | None = Query(None, description="Only payments from this tenant"),
    unit_id: str | None = Query(None, description="Only payments for this unit"),
) -> list[PaymentResponse]:
    """List payments."""
    payments = await service.list_payments(
        tenant_id=_optional_id("tenant_id", tenant_id),
        unit_id=_optional_id("unit_id", unit_id),
    )
    return [PaymentResponse.model_validate(p) for p in payments]


@router.post(
    "",
    response_model=PaymentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record payment",
)
async def create_payment(body: PaymentCreateRequest, service: PaymentSvc) -> PaymentResponse:
    """Record a payment."""
    return PaymentResponse.model_validate(await service.record_payment(body.payment))

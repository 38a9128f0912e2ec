"""Unit API routes."""

from fastapi import Query, Response, status

from propertyops.api.dependencies import parse_record_id
from propertyops.modules.units import router
from propertyops.modules.units.schemas import (
    UnitCreateRequest,
    UnitResponse,
    UnitUpdateRequest,
)
from propertyops.modules.units.services import UnitSvc


@router.get(
    "",
    response_model=list[UnitResponse],
    summary="List units",
    description="List units newest first, optionally filtered by property or unit number.",
)
async def list_units(
    service: UnitSvc,
    q: str | None = Query(None, description="Substring of property name or unit number"),
) -> list[UnitResponse]:
    """List units."""
    units = await service.list_units(q)
    return [UnitResponse.model_validate(u) for u in units]


@router.get("/{unit_id}", response_model=UnitResponse, summary="Get unit")
async def get_unit(unit_id: str, service: UnitSvc) -> UnitResponse:
    """Get unit by ID."""
    unit = await service.get_unit(parse_record_id(unit_id))
    return UnitResponse.model_validate(unit)


@router.post(
    "",
    response_model=UnitResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create unit",
)
async def create_unit(body: UnitCreateRequest, service: UnitSvc) -> UnitResponse:
    """Create a unit."""
    return UnitResponse.model_validate(await service.create_unit(body.unit))


@router.api_route(
    "/{unit_id}",
    methods=["PATCH", "PUT"],
    response_model=UnitResponse,
    summary="Update unit",
)
async def update_unit(
    unit_id: str,
    body: UnitUpdateRequest,
    service: UnitSvc,
) -> UnitResponse:
    """Update the supplied unit fields."""
    unit = await service.update_unit(parse_record_id(unit_id), body.unit)
    return UnitResponse.model_validate(unit)


@router.delete(
    "/{unit_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete unit",
    description="Delete a unit together with its maintenance requests and payments.",
)
async def delete_unit(unit_id: str, service: UnitSvc) -> Response:
    """Delete a unit."""
    await service.delete_unit(parse_record_id(unit_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

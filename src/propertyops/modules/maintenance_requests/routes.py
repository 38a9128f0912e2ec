"""Maintenance request API routes."""

from fastapi import Query, Response, status

from propertyops.api.dependencies import parse_record_id
from propertyops.modules.maintenance_requests import router
from propertyops.modules.maintenance_requests.schemas import (
    MaintenanceRequestCreateRequest,
    MaintenanceRequestResponse,
    MaintenanceRequestUpdateRequest,
)
from propertyops.modules.maintenance_requests.services import MaintenanceRequestSvc


@router.get(
    "",
    response_model=list[MaintenanceRequestResponse],
    summary="List maintenance requests",
    description="List requests newest first with tenant and unit embedded.",
)
async def list_requests(
    service: MaintenanceRequestSvc,
    status_filter: str | None = Query(None, alias="status", description="Exact status"),
    priority: str | None = Query(None, description="Exact priority"),
) -> list[MaintenanceRequestResponse]:
    """List maintenance requests."""
    requests = await service.list_requests(status=status_filter, priority=priority)
    return [MaintenanceRequestResponse.model_validate(r) for r in requests]


@router.get(
    "/{request_id}",
    response_model=MaintenanceRequestResponse,
    summary="Get maintenance request",
)
async def get_request(
    request_id: str,
    service: MaintenanceRequestSvc,
) -> MaintenanceRequestResponse:
    """Get maintenance request by ID."""
    request = await service.get_request(parse_record_id(request_id))
    return MaintenanceRequestResponse.model_validate(request)


@router.post(
    "",
    response_model=MaintenanceRequestResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create maintenance request",
    description="Create a request. Status defaults to new when omitted.",
)
async def create_request(
    body: MaintenanceRequestCreateRequest,
    service: MaintenanceRequestSvc,
) -> MaintenanceRequestResponse:
    """Create a maintenance request."""
    request = await service.create_request(body.maintenance_request)
    return MaintenanceRequestResponse.model_validate(request)


@router.api_route(
    "/{request_id}",
    methods=["PATCH", "PUT"],
    response_model=MaintenanceRequestResponse,
    summary="Update maintenance request",
)
async def update_request(
    request_id: str,
    body: MaintenanceRequestUpdateRequest,
    service: MaintenanceRequestSvc,
) -> MaintenanceRequestResponse:
    """Update the supplied request fields."""
    request = await service.update_request(
        parse_record_id(request_id), body.maintenance_request
    )
    return MaintenanceRequestResponse.model_validate(request)


@router.delete(
    "/{request_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete maintenance request",
)
async def delete_request(request_id: str, service: MaintenanceRequestSvc) -> Response:
    """Delete a maintenance request."""
    await service.delete_request(parse_record_id(request_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Tenant API routes."""

from fastapi import Query, Response, status

from propertyops.api.dependencies import parse_record_id
from propertyops.modules.tenants import router
from propertyops.modules.tenants.schemas import (
    TenantCreateRequest,
    TenantResponse,
    TenantUpdateRequest,
)
from propertyops.modules.tenants.services import TenantSvc


@router.get(
    "",
    response_model=list[TenantResponse],
    summary="List tenants",
    description="List tenants newest first, optionally filtered by name or email.",
)
async def list_tenants(
    service: TenantSvc,
    q: str | None = Query(None, description="Substring of first name, last name or email"),
) -> list[TenantResponse]:
    """List tenants."""
    tenants = await service.list_tenants(q)
    return [TenantResponse.model_validate(t) for t in tenants]


@router.get(
    "/{tenant_id}",
    response_model=TenantResponse,
    summary="Get tenant",
)
async def get_tenant(tenant_id: str, service: TenantSvc) -> TenantResponse:
    """Get tenant by ID."""
    tenant = await service.get_tenant(parse_record_id(tenant_id))
    return TenantResponse.model_validate(tenant)


@router.post(
    "",
    response_model=TenantResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create tenant",
)
async def create_tenant(body: TenantCreateRequest, service: TenantSvc) -> TenantResponse:
    """Create a tenant."""
    tenant = await service.create_tenant(body.tenant)
    return TenantResponse.model_validate(tenant)


@router.api_route(
    "/{tenant_id}",
    methods=["PATCH", "PUT"],
    response_model=TenantResponse,
    summary="Update tenant",
)
async def update_tenant(
    tenant_id: str,
    body: TenantUpdateRequest,
    service: TenantSvc,
) -> TenantResponse:
    """Update the supplied tenant fields."""
    tenant = await service.update_tenant(parse_record_id(tenant_id), body.tenant)
    return TenantResponse.model_validate(tenant)


@router.delete(
    "/{tenant_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete tenant",
    description="Delete a tenant together with their maintenance requests and payments.",
)
async def delete_tenant(tenant_id: str, service: TenantSvc) -> Response:
    """Delete a tenant."""
    await service.delete_tenant(parse_record_id(tenant_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

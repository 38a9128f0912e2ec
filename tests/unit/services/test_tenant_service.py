"""Unit tests for TenantService."""

from unittest.mock import AsyncMock

import pytest

from propertyops.core.errors import NotFoundError, ValidationError
from propertyops.modules.tenants.models import Tenant
from propertyops.modules.tenants.schemas import TenantCreate, TenantUpdate
from propertyops.modules.tenants.services import TenantService


def make_tenant(**overrides) -> Tenant:
    values = {
        "id": 1,
        "first_name": "Ava",
        "last_name": "Patel",
        "email": "ava@example.com",
        "phone": None,
        "status": "active",
    }
    values.update(overrides)
    return Tenant(**values)


class TestCreateTenant:
    """Tests for TenantService.create_tenant."""

    async def test_create_tenant_success(self):
        """Verify a valid tenant is handed to the repository."""
        mock_repo = AsyncMock()
        mock_repo.get_by_email.return_value = None
        mock_repo.create.side_effect = lambda tenant: tenant

        service = TenantService(repo=mock_repo)
        result = await service.create_tenant(
            TenantCreate(first_name="Ava", last_name="Patel", email="ava@example.com")
        )

        assert result.email == "ava@example.com"
        mock_repo.get_by_email.assert_awaited_once_with("ava@example.com")
        mock_repo.create.assert_awaited_once()

    async def test_duplicate_email_raises_validation_error(self):
        """Verify an email owned by another tenant is rejected."""
        mock_repo = AsyncMock()
        mock_repo.get_by_email.return_value = make_tenant(id=7)

        service = TenantService(repo=mock_repo)

        with pytest.raises(ValidationError) as exc_info:
            await service.create_tenant(
                TenantCreate(first_name="Ava", last_name="Patel", email="ava@example.com")
            )

        assert exc_info.value.errors == {"email": ["has already been taken"]}
        mock_repo.create.assert_not_awaited()

    async def test_blank_email_skips_uniqueness_lookup(self):
        """Verify no lookup is made for a missing email."""
        mock_repo = AsyncMock()
        service = TenantService(repo=mock_repo)

        with pytest.raises(ValidationError) as exc_info:
            await service.create_tenant(TenantCreate(first_name="Ava", last_name="Patel"))

        assert exc_info.value.errors == {"email": ["can't be blank"]}
        mock_repo.get_by_email.assert_not_awaited()


class TestUpdateTenant:
    """Tests for TenantService.update_tenant."""

    async def test_update_not_found(self):
        """Verify NotFoundError for a missing tenant."""
        mock_repo = AsyncMock()
        mock_repo.get_by_id.return_value = None

        service = TenantService(repo=mock_repo)

        with pytest.raises(NotFoundError):
            await service.update_tenant(5, TenantUpdate(phone="555"))

    async def test_rejected_update_does_not_mutate(self):
        """Verify the tenant is untouched when validation fails."""
        tenant = make_tenant()
        mock_repo = AsyncMock()
        mock_repo.get_by_id.return_value = tenant
        mock_repo.get_by_email.return_value = tenant

        service = TenantService(repo=mock_repo)

        with pytest.raises(ValidationError):
            await service.update_tenant(1, TenantUpdate(last_name="", phone="555"))

        assert tenant.last_name == "Patel"
        assert tenant.phone is None
        mock_repo.update.assert_not_awaited()

    async def test_only_sent_fields_change(self):
        """Verify unset fields keep their stored values."""
        tenant = make_tenant()
        mock_repo = AsyncMock()
        mock_repo.get_by_id.return_value = tenant
        mock_repo.get_by_email.return_value = tenant
        mock_repo.update.side_effect = lambda t: t

        service = TenantService(repo=mock_repo)
        result = await service.update_tenant(1, TenantUpdate(status="inactive"))

        assert result.status == "inactive"
        assert result.email == "ava@example.com"


class TestDeleteTenant:
    """Tests for TenantService.delete_tenant."""

    async def test_delete_tenant(self):
        """Verify the repository delete is called with the tenant."""
        tenant = make_tenant()
        mock_repo = AsyncMock()
        mock_repo.get_by_id.return_value = tenant

        service = TenantService(repo=mock_repo)
        await service.delete_tenant(1)

        mock_repo.delete.assert_awaited_once_with(tenant)

"""Integration tests for the units API."""

from httpx import AsyncClient

from propertyops.modules.tenants.models import Tenant
from propertyops.modules.units.models import Unit
from tests.factories import UnitCreateFactory


def unit_payload(**overrides) -> dict:
    """Build a JSON-ready unit request body."""
    return {"unit": UnitCreateFactory.build(**overrides).model_dump(mode="json")}


class TestCreateUnit:
    """Tests for POST /api/units."""

    async def test_rent_cents_round_trips(self, client: AsyncClient):
        """Verify rent is stored and returned as the same integer."""
        created = await client.post("/api/units", json=unit_payload(rent_cents=215000))
        assert created.status_code == 201

        response = await client.get(f"/api/units/{created.json()['id']}")

        assert response.status_code == 200
        assert response.json()["rent_cents"] == 215000

    async def test_half_baths_are_kept(self, client: AsyncClient):
        """Verify fractional baths survive storage."""
        response = await client.post("/api/units", json=unit_payload(baths="1.5"))

        assert response.status_code == 201
        assert float(response.json()["baths"]) == 1.5

    async def test_only_names_are_required(self, client: AsyncClient):
        """Verify beds, baths, rent and status may be omitted."""
        response = await client.post(
            "/api/units",
            json={"unit": {"property_name": "Oak Plaza", "unit_number": "11C"}},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["rent_cents"] is None
        assert data["status"] is None

    async def test_negative_rent_is_rejected(self, client: AsyncClient):
        """Verify rent must be zero or more."""
        response = await client.post("/api/units", json=unit_payload(rent_cents=-1))

        assert response.status_code == 422
        assert response.json()["details"] == {
            "rent_cents": ["must be greater than or equal to 0"]
        }

    async def test_zero_rent_is_accepted(self, client: AsyncClient):
        """Verify a rent of zero is allowed."""
        response = await client.post("/api/units", json=unit_payload(rent_cents=0))

        assert response.status_code == 201

    async def test_blank_names_and_bad_status(self, client: AsyncClient):
        """Verify every broken rule is reported."""
        response = await client.post(
            "/api/units",
            json={"unit": {"property_name": "", "status": "demolished"}},
        )

        assert response.status_code == 422
        assert response.json()["details"] == {
            "property_name": ["can't be blank"],
            "unit_number": ["can't be blank"],
            "status": ["must be occupied, vacant, or maintenance"],
        }

    async def test_non_numeric_rent_is_rejected(self, client: AsyncClient):
        """Verify type errors use the same error shape."""
        payload = unit_payload()
        payload["unit"]["rent_cents"] = "lots"

        response = await client.post("/api/units", json=payload)

        assert response.status_code == 422
        assert response.json() == {
            "error": "Validation failed",
            "details": {"rent_cents": ["is not a number"]},
        }


class TestListUnits:
    """Tests for GET /api/units."""

    async def test_q_matches_property_or_unit_number(self, client: AsyncClient):
        """Verify ``q`` filters by property name or unit number."""
        await client.post(
            "/api/units", json=unit_payload(property_name="Maple Grove", unit_number="2B")
        )
        await client.post(
            "/api/units", json=unit_payload(property_name="Oak Plaza", unit_number="11C")
        )

        by_property = await client.get("/api/units", params={"q": "Maple"})
        by_number = await client.get("/api/units", params={"q": "11C"})
        everything = await client.get("/api/units")

        assert [u["unit_number"] for u in by_property.json()] == ["2B"]
        assert [u["property_name"] for u in by_number.json()] == ["Oak Plaza"]
        assert [u["unit_number"] for u in everything.json()] == ["11C", "2B"]


class TestUpdateUnit:
    """Tests for PATCH /api/units/{id}."""

    async def test_patch_status(self, client: AsyncClient, unit: Unit):
        """Verify a single field can be changed."""
        response = await client.patch(f"/api/units/{unit.id}", json={"unit": {"status": "vacant"}})

        assert response.status_code == 200
        assert response.json()["status"] == "vacant"
        assert response.json()["unit_number"] == unit.unit_number

    async def test_clearing_rent_is_allowed(self, client: AsyncClient, unit: Unit):
        """Verify rent may be set back to null."""
        response = await client.patch(
            f"/api/units/{unit.id}", json={"unit": {"rent_cents": None}}
        )

        assert response.status_code == 200
        assert response.json()["rent_cents"] is None

    async def test_unknown_id_returns_404(self, client: AsyncClient):
        """Verify updating a missing unit returns 404."""
        response = await client.patch("/api/units/424242", json={"unit": {"status": "vacant"}})

        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}


class TestDeleteUnit:
    """Tests for DELETE /api/units/{id}."""

    async def test_delete_cascades_to_requests_and_payments(
        self, client: AsyncClient, tenant: Tenant, unit: Unit
    ):
        """Verify a unit's requests and payments are removed with it."""
        await client.post(
            "/api/maintenance_requests",
            json={
                "maintenance_request": {
                    "tenant_id": tenant.id,
                    "unit_id": unit.id,
                    "title": "Broken window",
                }
            },
        )
        await client.post(
            "/api/payments",
            json={
                "payment": {
                    "tenant_id": tenant.id,
                    "unit_id": unit.id,
                    "amount_cents": 1000,
                    "paid_on": "2026-10-01",
                }
            },
        )

        response = await client.delete(f"/api/units/{unit.id}")

        assert response.status_code == 204
        assert (await client.get("/api/maintenance_requests")).json() == []
        assert (await client.get("/api/payments")).json() == []
        assert (await client.get(f"/api/tenants/{tenant.id}")).status_code == 200

    async def test_get_after_delete_returns_404(self, client: AsyncClient, unit: Unit):
        """Verify a deleted unit can no longer be fetched."""
        await client.delete(f"/api/units/{unit.id}")

        response = await client.get(f"/api/units/{unit.id}")

        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}


class TestUnusableUnitIds:
    """Ids that no stored unit can have are reported as not found."""

    async def test_non_numeric_id_returns_404(self, client: AsyncClient):
        response = await client.get("/api/units/maple-2b")

        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}

    async def test_oversized_id_returns_404(self, client: AsyncClient):
        response = await client.delete("/api/units/99999999999999999999")

        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}

    async def test_fractional_rent_keeps_whole_cents(self, client: AsyncClient):
        """Verify a fractional rent is truncated to whole cents."""
        payload = unit_payload()
        payload["unit"]["rent_cents"] = 215000.75

        response = await client.post("/api/units", json=payload)

        assert response.status_code == 201
        assert response.json()["rent_cents"] == 215000

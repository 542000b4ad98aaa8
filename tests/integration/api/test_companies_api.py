import pytest
from httpx import AsyncClient
from sqlmodel import select

from fleetadmin.adapter.repositories.company_admin_repository import CompanyAdminRepository
from fleetadmin.domain.entities import Company


def _payload(**overrides) -> dict:
    payload = {
        "name": "Beta Freight",
        "owner_name": "Bea Owner",
        "owner_email": "bea@beta.com",
        "owner_password": "SecurePass123",
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_create_company_defaults(client: AsyncClient):
    response = await client.post("/admin/companies", json=_payload())

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    company = body["data"]["company"]
    assert company["status"] == "active"
    assert company["timezone"] == "UTC"
    assert company["currency"] == "USD"
    assert company["max_allowed_drivers"] == 10
    assert body["data"]["owner"]["company_id"] == company["id"]
    assert body["data"]["owner"]["role"] == "owner"


@pytest.mark.asyncio
async def test_duplicate_owner_email_leaves_single_company(client: AsyncClient, company, admin_headers):
    """
    Given a company whose owner is owner@acme.com
    When another company is created with the same owner email
    Then the request fails with 409 DUPLICATE_OWNER_EMAIL
    And exactly one company exists
    """
    response = await client.post(
        "/admin/companies", json=_payload(owner_email="owner@acme.com")
    )

    assert response.status_code == 409
    assert response.json()["errors"]["code"] == "DUPLICATE_OWNER_EMAIL"

    listing = await client.get("/admin/companies", headers=admin_headers)
    assert listing.json()["data"]["total_count"] == 1


@pytest.mark.asyncio
async def test_list_companies_requires_token(client: AsyncClient, company):
    response = await client.get("/admin/companies")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_list_companies_pagination_and_search(client: AsyncClient, company, admin_headers):
    for i in range(3):
        await client.post(
            "/admin/companies",
            json=_payload(name=f"Gamma {i}", owner_email=f"gamma{i}@gamma.com"),
        )

    page = await client.get(
        "/admin/companies", params={"page": 2, "limit": 3}, headers=admin_headers
    )
    data = page.json()["data"]
    assert data["total_count"] == 4
    assert data["total_pages"] == 2
    assert len(data["companies"]) == 1
    # Newest first, so the first company created is on the last page
    assert data["companies"][0]["name"] == "Acme Logistics"

    search = await client.get(
        "/admin/companies", params={"search": "gamma"}, headers=admin_headers
    )
    assert search.json()["data"]["total_count"] == 3


@pytest.mark.asyncio
async def test_list_companies_rejects_limit_over_100(client: AsyncClient, admin_headers):
    response = await client.get(
        "/admin/companies", params={"limit": 500}, headers=admin_headers
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_get_unknown_company(client: AsyncClient, admin_headers):
    response = await client.get("/admin/companies/999", headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["errors"]["code"] == "COMPANY_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_company_and_branding(client: AsyncClient, company, admin_headers):
    company_id = company["company"]["id"]

    updated = await client.put(
        f"/admin/companies/{company_id}",
        json={"currency": "EUR", "routing_mode": "AI"},
        headers=admin_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["currency"] == "EUR"
    assert updated.json()["data"]["routing_mode"] == "AI"
    assert updated.json()["data"]["name"] == "Acme Logistics"

    branded = await client.put(
        f"/admin/companies/{company_id}/branding",
        json={"theme": "dark", "color_palette": {"primary": "#112233"}},
        headers=admin_headers,
    )
    assert branded.status_code == 200
    assert branded.json()["data"]["theme"] == "dark"
    assert branded.json()["data"]["color_palette"]["primary"] == "#112233"


@pytest.mark.asyncio
async def test_suspend_twice_is_idempotent(client: AsyncClient, company, admin_headers):
    company_id = company["company"]["id"]

    first = await client.put(f"/admin/companies/{company_id}/suspend", headers=admin_headers)
    second = await client.put(f"/admin/companies/{company_id}/suspend", headers=admin_headers)

    assert first.status_code == second.status_code == 200
    assert first.json()["data"]["status"] == "suspended"
    assert second.json()["data"]["status"] == "suspended"

    activated = await client.put(f"/admin/companies/{company_id}/activate", headers=admin_headers)
    assert activated.json()["data"]["status"] == "active"


@pytest.mark.asyncio
async def test_suspension_does_not_block_admin_login(client: AsyncClient, company, admin_headers):
    await client.put(f"/admin/companies/{company['company']['id']}/suspend", headers=admin_headers)

    response = await client.post(
        "/admin/auth/login", json={"email": "owner@acme.com", "password": "SecurePass123"}
    )

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_delete_company(client: AsyncClient, company, admin_headers):
    other = await client.post("/admin/companies", json=_payload())
    other_id = other.json()["data"]["company"]["id"]

    response = await client.delete(f"/admin/companies/{other_id}", headers=admin_headers)
    assert response.status_code == 200

    missing = await client.get(f"/admin/companies/{other_id}", headers=admin_headers)
    assert missing.status_code == 404

    # The owner went with the company, so the email is free again
    again = await client.post("/admin/companies", json=_payload())
    assert again.status_code == 201


@pytest.mark.asyncio
async def test_owner_email_race_rolls_back_company(
    client: AsyncClient, company, db_session, monkeypatch
):
    """
    Given owner@acme.com already owns a company
    And the email lookup misses it, as when two requests race
    When another company is created with that owner email
    Then the unique index rejects the owner with 409 DUPLICATE_OWNER_EMAIL
    And the new company row is rolled back
    """

    async def _not_found(self, email):
        return None

    monkeypatch.setattr(CompanyAdminRepository, "get_by_email", _not_found)

    response = await client.post(
        "/admin/companies",
        json=_payload(name="Racing Co", owner_email="owner@acme.com"),
    )

    assert response.status_code == 409
    assert response.json()["errors"]["code"] == "DUPLICATE_OWNER_EMAIL"

    names = (await db_session.exec(select(Company.name))).all()
    assert list(names) == ["Acme Logistics"]


@pytest.mark.asyncio
async def test_password_limit_is_counted_in_bytes(client: AsyncClient):
    # 40 characters but 80 UTF-8 bytes
    response = await client.post("/admin/companies", json=_payload(owner_password="é" * 40))

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "owner_password"

from datetime import UTC, datetime, timedelta

import pytest
import pytest_asyncio
from fastapi import Depends, FastAPI
from httpx import ASGITransport, AsyncClient

from fleetadmin.api.app import handle_client_error
from fleetadmin.api.error import ClientError
from fleetadmin.api.utils.auth_gate import AuthIdentity, require_admin
from fleetadmin.app.services.token_manager import TokenManager, TokenNamespace

ADMIN_SECRET = "gate-admin-secret"
USER_SECRET = "gate-user-secret"


@pytest.fixture
def managers():
    return {
        TokenNamespace.admin: TokenManager(ADMIN_SECRET, timedelta(hours=1)),
        TokenNamespace.user: TokenManager(USER_SECRET, timedelta(hours=1)),
    }


@pytest_asyncio.fixture
async def client(managers):
    app = FastAPI()
    app.state.token_managers = managers
    app.add_exception_handler(ClientError, handle_client_error)

    @app.get("/protected")
    async def protected(identity: AuthIdentity = Depends(require_admin)):
        return identity.model_dump(mode="json")

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


def _error_code(response) -> str:
    return response.json()["errors"]["code"]


@pytest.mark.asyncio
async def test_valid_token_attaches_identity(client, managers):
    token = managers[TokenNamespace.admin].issue(
        3, {"email": "a@acme.com", "role": "owner", "company_id": 9}
    )

    response = await client.get("/protected", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json() == {
        "id": 3,
        "email": "a@acme.com",
        "role": "owner",
        "company_id": 9,
        "namespace": "admin",
    }


@pytest.mark.asyncio
async def test_missing_header(client):
    response = await client.get("/protected")

    assert response.status_code == 401
    assert _error_code(response) == "UNAUTHORIZED"
    assert response.headers["WWW-Authenticate"] == "Bearer"
    assert response.json()["message"] == "Authorization header required"


@pytest.mark.asyncio
async def test_wrong_scheme(client, managers):
    token = managers[TokenNamespace.admin].issue(3)

    response = await client.get("/protected", headers={"Authorization": f"Basic {token}"})

    assert response.status_code == 401
    assert _error_code(response) == "INVALID_AUTH_SCHEME"


@pytest.mark.asyncio
async def test_empty_token(client):
    response = await client.get("/protected", headers={"Authorization": "Bearer    "})

    assert response.status_code == 401
    assert _error_code(response) in ("TOKEN_REQUIRED", "INVALID_AUTH_SCHEME")


@pytest.mark.asyncio
async def test_expired_token(client):
    past = datetime.now(UTC) - timedelta(hours=2)
    token = TokenManager(ADMIN_SECRET, timedelta(hours=1), clock=lambda: past).issue(3)

    response = await client.get("/protected", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert _error_code(response) == "TOKEN_EXPIRED"
    assert response.json()["message"] == "Token has expired"


@pytest.mark.asyncio
async def test_user_token_rejected_by_admin_gate(client, managers):
    token = managers[TokenNamespace.user].issue(3)

    response = await client.get("/protected", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert _error_code(response) == "INVALID_TOKEN"
    assert response.json()["message"] == "Invalid token"


@pytest.mark.asyncio
async def test_garbage_token(client):
    response = await client.get("/protected", headers={"Authorization": "Bearer not.a.jwt"})

    assert response.status_code == 401
    assert _error_code(response) == "INVALID_TOKEN"

"""Service test fixtures — FastAPI test client and registered identities.

Invariants:
    - client drives the real app in-process (httpx.ASGITransport)
    - register_identity returns (token, identity_id) for a fresh account
"""

import pytest
from httpx import ASGITransport, AsyncClient


@pytest.fixture
async def client(api_app):
    """FastAPI test client with DB dependency overridden."""
    async with AsyncClient(
        transport=ASGITransport(app=api_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def register_identity(client):
    """Register an account through the API and resolve its id."""
    async def _register(
        name: str = "alice", email: str = "a@x.com", password: str = "pw123456",
    ) -> tuple[str, str]:
        res = await client.post(
            "/api/users", json={"name": name, "email": email, "password": password},
        )
        assert res.status_code == 200, res.text
        token = res.json()["token"]
        me = await client.get("/api/auth", headers={"x-auth-token": token})
        return token, me.json()["id"]

    return _register


@pytest.fixture
async def alice(register_identity):
    token, identity_id = await register_identity()
    return {"token": token, "id": identity_id, "headers": {"x-auth-token": token}}


@pytest.fixture
async def bob(register_identity):
    token, identity_id = await register_identity("bob", "b@x.com", "pw654321")
    return {"token": token, "id": identity_id, "headers": {"x-auth-token": token}}

"""Auth Routes — verifies registration, login and token-protected identity lookup.

Tests:
    - register returns a token that resolves via GET /api/auth
    - duplicate email and invalid fields come back as {"errors": [...]}
    - login succeeds with the right password, fails uniformly otherwise
    - missing and bad tokens are 401 with the fixed messages
"""

from uuid import uuid4

from devconnector.api.dependencies import get_authenticator


async def test_register_returns_usable_token(client):
    res = await client.post(
        "/api/users",
        json={"name": "Alice", "email": "Alice@Example.com", "password": "secret1"},
    )
    assert res.status_code == 200
    token = res.json()["token"]

    me = await client.get("/api/auth", headers={"x-auth-token": token})
    assert me.status_code == 200
    body = me.json()
    assert body["name"] == "Alice"
    assert body["email"] == "alice@example.com"
    assert body["avatar"].startswith("https://www.gravatar.com/avatar/")
    assert "password_hash" not in body


async def test_register_duplicate_email(client, alice):
    res = await client.post(
        "/api/users", json={"name": "Again", "email": "A@x.com", "password": "pw123456"},
    )
    assert res.status_code == 400
    assert res.json() == {"errors": [{"msg": "User already exists", "field": "email"}]}


async def test_register_reports_all_invalid_fields(client):
    res = await client.post("/api/users", json={"email": "bad"})
    assert res.status_code == 400
    fields = [e["field"] for e in res.json()["errors"]]
    assert fields == ["name", "email", "password"]


async def test_login_with_valid_credentials(client, alice):
    res = await client.post(
        "/api/auth", json={"email": "a@x.com", "password": "pw123456"},
    )
    assert res.status_code == 200
    me = await client.get("/api/auth", headers={"x-auth-token": res.json()["token"]})
    assert me.json()["id"] == alice["id"]


async def test_login_wrong_password_and_unknown_email_look_the_same(client, alice):
    wrong = await client.post(
        "/api/auth", json={"email": "a@x.com", "password": "nope-nope"},
    )
    unknown = await client.post(
        "/api/auth", json={"email": "stranger@x.com", "password": "pw123456"},
    )
    assert wrong.status_code == unknown.status_code == 400
    assert wrong.json() == unknown.json() == {"errors": [{"msg": "Invalid credentials"}]}


async def test_missing_token_is_401(client):
    res = await client.get("/api/auth")
    assert res.status_code == 401
    assert res.json() == {"msg": "No token, authorization denied"}


async def test_bad_token_is_401(client):
    res = await client.get("/api/auth", headers={"x-auth-token": "garbage"})
    assert res.status_code == 401
    assert res.json() == {"msg": "Token is not valid"}


async def test_valid_token_for_deleted_identity_is_404(client):
    token = get_authenticator().issue(uuid4())
    res = await client.get("/api/auth", headers={"x-auth-token": token})
    assert res.status_code == 404
    assert res.json() == {"msg": "User not found"}

"""Integration tests for registration, login and session checks."""
from datetime import timedelta

from bloodlink.core.security import create_access_token, decode_token, verify_password
from bloodlink.models.user import User

from tests.conftest import registration_form


async def _register(async_client, **overrides):
    return await async_client.post("/api/register", data=registration_form(**overrides))


async def test_register_stores_hashed_password(async_client, db_session):
    r = await _register(async_client)
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["message"] == "User registered successfully"
    assert body["userId"]
    assert body["profileImage"] is None

    user = db_session.query(User).filter(User.email == "dana@example.com").first()
    assert user is not None
    assert user.account_type == "donor"
    assert user.password_hash != "Secret123!"
    assert verify_password("Secret123!", user.password_hash)


async def test_register_duplicate_email(async_client, db_session):
    r = await _register(async_client)
    assert r.status_code == 201
    first_id = r.json()["userId"]

    r = await _register(async_client, name="Someone Else", location="Albany", accountType="recipient")
    assert r.status_code == 400
    assert r.json()["error"] == "DuplicateEmail"

    users = db_session.query(User).filter(User.email == "dana@example.com").all()
    assert len(users) == 1
    assert users[0].id == first_id
    assert users[0].name == "Dana Donor"
    assert users[0].account_type == "donor"


async def test_register_missing_and_invalid_fields(async_client):
    form = registration_form()
    del form["name"]
    r = await async_client.post("/api/register", data=form)
    assert r.status_code == 400
    body = r.json()
    assert body["error"] == "ValidationError"
    assert "name" in body["errors"]

    r = await _register(async_client, accountType="admin")
    assert r.status_code == 400
    assert "accountType" in r.json()["errors"]


async def test_register_with_profile_image_is_served(async_client, db_session):
    files = {"profileImage": ("avatar.png", b"\x89PNG fake image", "image/png")}
    r = await async_client.post("/api/register", data=registration_form(), files=files)
    assert r.status_code == 201, r.text

    path = r.json()["profileImage"]
    assert path.startswith("/uploads/profileImage-")
    assert path.endswith(".png")

    user = db_session.query(User).filter(User.email == "dana@example.com").first()
    assert user.profile_image == path

    r = await async_client.get(path)
    assert r.status_code == 200
    assert r.content == b"\x89PNG fake image"


async def test_login_returns_token_with_identity_claims(async_client):
    await _register(async_client, accountType="recipient", name="Rita Recipient")

    r = await async_client.post("/api/login", json={"email": "dana@example.com", "password": "Secret123!"})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["message"] == "Login successful"
    assert body["tokenType"] == "bearer"

    claims = decode_token(body["token"])
    assert claims is not None
    assert claims["email"] == "dana@example.com"
    assert claims["accountType"] == "recipient"
    assert claims["name"] == "Rita Recipient"
    assert "exp" in claims


async def test_login_invalid_credentials(async_client):
    await _register(async_client)

    r = await async_client.post("/api/login", json={"email": "dana@example.com", "password": "wrong-pass"})
    assert r.status_code == 400
    body = r.json()
    assert body["error"] == "InvalidCredentials"
    assert "token" not in body

    r = await async_client.post("/api/login", json={"email": "nobody@example.com", "password": "Secret123!"})
    assert r.status_code == 400
    assert r.json()["error"] == "InvalidCredentials"


async def test_me_requires_valid_token(async_client):
    r = await _register(async_client)
    user_id = r.json()["userId"]

    r = await async_client.get("/api/me")
    assert r.status_code == 401

    r = await async_client.get("/api/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401
    assert r.json()["error"] == "Unauthorized"

    r = await async_client.post("/api/login", json={"email": "dana@example.com", "password": "Secret123!"})
    token = r.json()["token"]
    r = await async_client.get("/api/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    me = r.json()
    assert me["id"] == user_id
    assert me["accountType"] == "donor"
    assert "password" not in me and "passwordHash" not in me


async def test_me_rejects_expired_token(async_client):
    r = await _register(async_client)
    user_id = r.json()["userId"]

    expired = create_access_token(
        user_id=user_id,
        email="dana@example.com",
        account_type="donor",
        name="Dana Donor",
        expires_delta=timedelta(seconds=-5),
    )
    r = await async_client.get("/api/me", headers={"Authorization": f"Bearer {expired}"})
    assert r.status_code == 401


async def test_health(async_client):
    r = await async_client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


async def test_cors_allows_configured_origin(async_client):
    r = await async_client.options(
        "/api/events",
        headers={
            "Origin": "http://localhost:8080",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "http://localhost:8080"
    assert r.headers["access-control-allow-credentials"] == "true"

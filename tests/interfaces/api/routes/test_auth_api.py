"""Tests for registration, token issuance and the current-user endpoints."""

from __future__ import annotations

from app.infrastructure.repositories import UserRepository

VALID_TOKEN = "ExponentPushToken[abcdef]"


def _register_payload(**overrides):
    payload = {
        "fullname": "Awa Diop",
        "telephone": "+221 77 123 45 67",
        "password": "secret123",
        "role": "client",
    }
    payload.update(overrides)
    return payload


def test_register_then_login(client):
    response = client.post("/auth/register", json=_register_payload())

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["telephone"] == "+221771234567"
    assert "password" not in body["data"]

    token = client.post(
        "/auth/token", data={"username": "+221771234567", "password": "secret123"}
    )
    assert token.status_code == 200
    assert token.json()["token_type"] == "bearer"
    assert token.json()["user_id"] == body["data"]["id"]


def test_duplicate_phone_is_a_conflict(client):
    client.post("/auth/register", json=_register_payload())

    response = client.post("/auth/register", json=_register_payload(fullname="Autre"))

    assert response.status_code == 409
    assert response.json()["success"] is False


def test_admin_accounts_cannot_self_register(client):
    response = client.post("/auth/register", json=_register_payload(role="admin"))

    assert response.status_code == 403


def test_wrong_password_is_rejected(client):
    client.post("/auth/register", json=_register_payload())

    response = client.post(
        "/auth/token", data={"username": "+221771234567", "password": "wrong-password"}
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Téléphone ou mot de passe incorrect"


def test_me_requires_a_token(client):
    assert client.get("/users/me").status_code == 401


def test_push_token_registration(client, register):
    headers = register()

    bad = client.put("/users/me/push-token", json={"push_token": "abc"}, headers=headers)
    good = client.put("/users/me/push-token", json={"push_token": VALID_TOKEN}, headers=headers)
    cleared = client.put("/users/me/push-token", json={"push_token": None}, headers=headers)

    assert bad.status_code == 400
    assert good.json()["data"]["has_push_token"] is True
    assert cleared.json()["data"]["has_push_token"] is False


def test_deactivation_revokes_existing_tokens(client, register, session):
    headers = register()
    me = client.get("/users/me", headers=headers).json()["data"]

    repository = UserRepository(session)
    user = repository.get(me["id"])
    user.is_active = False
    repository.update(user)

    assert client.get("/users/me", headers=headers).status_code == 401


def test_profile_round_trip(client, register):
    headers = register()

    assert client.get("/profile/", headers=headers).status_code == 404
    saved = client.put(
        "/profile/",
        json={"email": "Awa@Example.com", "city": "Dakar", "country": "SN"},
        headers=headers,
    )

    assert saved.status_code == 200
    assert saved.json()["data"]["email"] == "awa@example.com"
    assert client.get("/profile/", headers=headers).json()["data"]["city"] == "Dakar"


def test_health_reports_database(client):
    body = client.get("/health").json()

    assert body == {"success": True, "status": "ok", "database": "ok"}

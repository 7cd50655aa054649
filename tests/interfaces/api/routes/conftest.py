"""Fixtures for exercising the HTTP API."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient  # noqa: E402

from app.domain.entities import DispatchResult  # noqa: E402
from app.interfaces.api.dependencies import get_push_dispatcher  # noqa: E402
from app.main import create_app  # noqa: E402


class CollectingDispatcher:
    """Push dispatcher that keeps messages instead of calling Expo."""

    def __init__(self):
        self.messages = []

    def __call__(self, message):
        self.messages.append(message)
        return DispatchResult.success("ticket")


@pytest.fixture()
def push_outbox() -> CollectingDispatcher:
    return CollectingDispatcher()


@pytest.fixture()
def app(session, push_outbox):
    application = create_app()
    application.dependency_overrides[get_push_dispatcher] = lambda: push_outbox
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture()
def register(client):
    """Create an account through the API and return its auth headers."""

    counter = {"value": 0}

    def _register(role: str = "client", password: str = "secret123") -> dict[str, str]:
        counter["value"] += 1
        telephone = f"+22177000{counter['value']:04d}"
        response = client.post(
            "/auth/register",
            json={
                "fullname": f"Compte {counter['value']}",
                "telephone": telephone,
                "password": password,
                "role": role,
            },
        )
        assert response.status_code == 201, response.text
        token = client.post(
            "/auth/token", data={"username": telephone, "password": password}
        ).json()["access_token"]
        return {"Authorization": f"Bearer {token}"}

    return _register

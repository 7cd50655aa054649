"""Tests for the alert endpoints and the sweep trigger."""

from __future__ import annotations

import pytest

from app.config import get_settings

ALERT = {
    "name": "Location Dakar",
    "criteria": {"city": "Dakar", "transaction_type": "location", "price_max": 300000},
    "frequency": "quotidien",
}
LISTING = {
    "title": "Studio Mermoz",
    "property_type": "studio",
    "transaction_type": "location",
    "price": 150000,
    "city": "Dakar",
    "district": "Mermoz",
}


@pytest.fixture()
def dispatcher(push_outbox):
    return push_outbox


@pytest.fixture()
def cron_secret(monkeypatch):
    monkeypatch.setattr(get_settings(), "cron_secret", "s3cret")
    return "s3cret"


def test_alert_crud(client, register):
    headers = register()

    created = client.post("/alerts/", json=ALERT, headers=headers)
    assert created.status_code == 201
    alert = created.json()["data"]
    assert alert["criteria"]["city"] == "Dakar"
    assert alert["notification_count"] == 0

    listed = client.get("/alerts/", headers=headers).json()["data"]
    assert [item["id"] for item in listed] == [alert["id"]]

    updated = client.put(
        f"/alerts/{alert['id']}",
        json={"frequency": "hebdomadaire", "criteria": {"price_max": 500000}},
        headers=headers,
    ).json()["data"]
    assert updated["frequency"] == "hebdomadaire"
    assert updated["criteria"]["price_max"] == 500000
    assert updated["criteria"]["city"] == "Dakar"

    toggled = client.patch(f"/alerts/{alert['id']}/toggle", headers=headers).json()
    assert toggled["data"]["is_active"] is False
    assert toggled["message"] == "Alerte désactivée"

    assert client.delete(f"/alerts/{alert['id']}", headers=headers).status_code == 200
    assert client.get(f"/alerts/{alert['id']}", headers=headers).status_code == 404


def test_alert_without_discriminating_criterion_is_rejected(client, register):
    response = client.post(
        "/alerts/",
        json={"name": "Tout", "criteria": {"transaction_type": "location"}},
        headers=register(),
    )

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_alerts_are_private(client, register):
    owner = register()
    stranger = register()
    alert_id = client.post("/alerts/", json=ALERT, headers=owner).json()["data"]["id"]

    assert client.get(f"/alerts/{alert_id}", headers=stranger).status_code == 404
    assert client.delete(f"/alerts/{alert_id}", headers=stranger).status_code == 404
    assert client.get(f"/alerts/{alert_id}/history", headers=stranger).status_code == 404


def test_check_previews_matching_listings(client, register):
    user = register()
    agent = register(role="agent")
    alert_id = client.post("/alerts/", json=ALERT, headers=user).json()["data"]["id"]
    client.post("/listings/", json=LISTING, headers=agent)

    preview = client.post(f"/alerts/{alert_id}/check", headers=user).json()["data"]

    assert preview["count"] == 1
    assert preview["listings"][0]["title"] == "Studio Mermoz"
    history = client.get(f"/alerts/{alert_id}/history", headers=user).json()["data"]
    assert history == []


def test_sweep_requires_the_cron_secret(client, dispatcher, cron_secret):
    assert client.post("/alerts/cron/sweep").status_code == 403
    assert (
        client.post("/alerts/cron/sweep", headers={"X-Cron-Secret": "nope"}).status_code
        == 403
    )


def test_sweep_without_secret_configured_is_admin_only(client, register, dispatcher):
    assert client.post("/alerts/cron/sweep", headers=register()).status_code == 403


def test_sweep_notifies_and_updates_statistics(client, register, dispatcher, cron_secret):
    user = register()
    agent = register(role="agent")
    client.put(
        "/users/me/push-token",
        json={"push_token": "ExponentPushToken[user-device]"},
        headers=user,
    )
    alert_id = client.post("/alerts/", json=ALERT, headers=user).json()["data"]["id"]
    client.post("/listings/", json=LISTING, headers=agent)

    response = client.post("/alerts/cron/sweep", headers={"X-Cron-Secret": cron_secret})

    assert response.status_code == 200
    report = response.json()["data"]
    assert report["alerts_checked"] == 1
    assert report["notifications_sent"] == 1
    assert report["results"][0]["dispatched"] is True
    assert dispatcher.messages[0].token == "ExponentPushToken[user-device]"

    stats = client.get(f"/alerts/{alert_id}/statistics", headers=user).json()["data"]
    assert stats["total_notifications"] == 1
    unread = client.get("/notifications/unread-count", headers=user).json()["data"]
    assert unread == {"unread": 1}

"""Tests for the Expo push client."""

from __future__ import annotations

import pytest
import requests

from app.domain.entities import PushMessage
from app.infrastructure.notifications import ExpoPushClient
from app.infrastructure.notifications.push import is_valid_push_token

TOKEN = "ExponentPushToken[device-1]"


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self.payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, json, headers, timeout):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def _client(session, access_token=None):
    return ExpoPushClient(
        url="https://push.example/send",
        access_token=access_token,
        timeout=5,
        session=session,
    )


def _message(token=TOKEN):
    return PushMessage(token=token, title="Titre", body="Corps", data={"type": "alerte"})


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("ExponentPushToken[abc]", True),
        ("ExpoPushToken[abc]", True),
        ("fcm:abc", False),
        ("", False),
        (None, False),
    ],
)
def test_token_format(token, expected):
    assert is_valid_push_token(token) is expected


def test_successful_ticket_is_reported():
    session = FakeSession(FakeResponse({"data": [{"status": "ok", "id": "ticket-1"}]}))

    result = _client(session, access_token="expo-secret")(_message())

    assert result.ok and result.ticket_id == "ticket-1"
    call = session.calls[0]
    assert call["json"][0]["to"] == TOKEN
    assert call["json"][0]["data"] == {"type": "alerte"}
    assert call["headers"]["Authorization"] == "Bearer expo-secret"


def test_rejected_ticket_carries_the_provider_error():
    session = FakeSession(
        FakeResponse(
            {
                "data": [
                    {
                        "status": "error",
                        "message": "not registered",
                        "details": {"error": "DeviceNotRegistered"},
                    }
                ]
            }
        )
    )

    result = _client(session)(_message())

    assert not result.ok
    assert result.error == "DeviceNotRegistered"


def test_network_failure_never_raises():
    session = FakeSession(error=requests.ConnectionError("unreachable"))

    result = _client(session)(_message())

    assert not result.ok
    assert "unreachable" in result.error


def test_invalid_tokens_are_not_sent():
    session = FakeSession(FakeResponse({"data": [{"status": "ok", "id": "t"}]}))

    results = _client(session).send([_message("not-a-token"), _message()])

    assert [result.ok for result in results] == [False, True]
    assert results[0].error == "invalid_push_token"
    assert len(session.calls[0]["json"]) == 1


def test_messages_are_sent_in_batches_of_one_hundred():
    session = FakeSession(FakeResponse({"data": [{"status": "ok", "id": "t"}] * 100}))

    results = _client(session).send([_message() for _ in range(150)])

    assert len(session.calls) == 2
    assert [len(call["json"]) for call in session.calls] == [100, 50]
    assert all(result.ok for result in results)

"""Client for the Expo push notification HTTP API."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

import requests

from app.config import get_settings
from app.domain.entities import DispatchResult, PushMessage

logger = logging.getLogger(__name__)

EXPO_TOKEN_PATTERN = re.compile(r"^(Exponent|Expo)PushToken\[.+\]$")
EXPO_BATCH_SIZE = 100


def is_valid_push_token(token: str | None) -> bool:
    """Return ``True`` when ``token`` looks like an Expo device token."""

    return bool(token) and EXPO_TOKEN_PATTERN.match(token) is not None


class ExpoPushClient:
    """Send :class:`PushMessage` objects through the Expo push service.

    ``send`` never raises: every message gets a :class:`DispatchResult` in the
    order it was given, and a rejected token or a failed batch only affects
    the destinations concerned.
    """

    def __init__(
        self,
        *,
        url: str | None = None,
        access_token: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        settings = get_settings()
        self.url = url or settings.expo_push_url
        self.access_token = access_token if access_token is not None else settings.expo_access_token
        self.timeout = timeout or settings.push_timeout_seconds
        self.http = session or requests.Session()

    def __call__(self, message: PushMessage) -> DispatchResult:
        return self.send([message])[0]

    def send(self, messages: Sequence[PushMessage]) -> list[DispatchResult]:
        results: list[DispatchResult | None] = [None] * len(messages)
        deliverable: list[tuple[int, PushMessage]] = []
        for index, message in enumerate(messages):
            if is_valid_push_token(message.token):
                deliverable.append((index, message))
            else:
                logger.warning("Skipping push message with invalid token %r", message.token)
                results[index] = DispatchResult.failure("invalid_push_token")

        for start in range(0, len(deliverable), EXPO_BATCH_SIZE):
            batch = deliverable[start : start + EXPO_BATCH_SIZE]
            for (index, _), result in zip(batch, self._send_batch([m for _, m in batch])):
                results[index] = result

        return [result or DispatchResult.failure("not_sent") for result in results]

    def _send_batch(self, batch: Sequence[PushMessage]) -> list[DispatchResult]:
        payload = [
            {
                "to": message.token,
                "title": message.title,
                "body": message.body,
                "data": message.data,
                "sound": "default",
                "priority": "high",
            }
            for message in batch
        ]
        try:
            response = self.http.post(
                self.url,
                json=payload,
                headers=self._headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()
            tickets = response.json().get("data", [])
        except (requests.RequestException, ValueError) as exc:
            logger.error("Expo push request failed for %d message(s): %s", len(batch), exc)
            return [DispatchResult.failure(str(exc)) for _ in batch]

        if isinstance(tickets, dict):
            tickets = [tickets]
        results: list[DispatchResult] = []
        for position, _ in enumerate(batch):
            ticket = tickets[position] if position < len(tickets) else None
            results.append(self._ticket_to_result(ticket))
        return results

    @staticmethod
    def _ticket_to_result(ticket: dict | None) -> DispatchResult:
        if not isinstance(ticket, dict):
            return DispatchResult.failure("missing_ticket")
        if ticket.get("status") == "ok":
            return DispatchResult.success(ticket.get("id"))
        details = ticket.get("details") or {}
        error = details.get("error") or ticket.get("message") or "push_error"
        logger.warning("Expo rejected push message: %s", error)
        return DispatchResult.failure(str(error))

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Accept-Encoding": "gzip, deflate",
            "Content-Type": "application/json",
        }
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers


__all__ = ["ExpoPushClient", "EXPO_TOKEN_PATTERN", "is_valid_push_token"]

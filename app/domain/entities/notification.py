"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

NOTIFICATION_TYPE_ALERT_MATCH = "alert_match"
NOTIFICATION_TYPE_MESSAGE = "message"
NOTIFICATION_TYPE_RESERVATION = "reservation"
NOTIFICATION_TYPE_SYSTEM = "systeme"


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    user_id: int
    event_type: str
    title: str
    message: str
    payload: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    read_at: datetime | None = None


__all__ = [
    "Notification",
    "NOTIFICATION_TYPE_ALERT_MATCH",
    "NOTIFICATION_TYPE_MESSAGE",
    "NOTIFICATION_TYPE_RESERVATION",
    "NOTIFICATION_TYPE_SYSTEM",
]

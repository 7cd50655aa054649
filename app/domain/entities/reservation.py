"""Domain entity representing a property visit booking."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time

RESERVATION_STATUS_PENDING = "attente"
RESERVATION_STATUS_CONFIRMED = "confirme"
RESERVATION_STATUS_CANCELLED = "annule"
RESERVATION_STATUS_COMPLETED = "termine"
RESERVATION_STATUS_REFUSED = "refuse"
RESERVATION_STATUSES = (
    RESERVATION_STATUS_PENDING,
    RESERVATION_STATUS_CONFIRMED,
    RESERVATION_STATUS_CANCELLED,
    RESERVATION_STATUS_COMPLETED,
    RESERVATION_STATUS_REFUSED,
)


@dataclass
class Reservation:
    """A visit of ``listing_id`` requested by ``user_id`` at a given slot."""

    id: int | None
    user_id: int
    listing_id: int
    visit_date: date
    visit_time: time
    party_size: int = 1
    notes: str | None = None
    visitor_phone: str | None = None
    agent_message: str | None = None
    status: str = RESERVATION_STATUS_PENDING
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "Reservation",
    "RESERVATION_STATUS_PENDING",
    "RESERVATION_STATUS_CONFIRMED",
    "RESERVATION_STATUS_CANCELLED",
    "RESERVATION_STATUS_COMPLETED",
    "RESERVATION_STATUS_REFUSED",
    "RESERVATION_STATUSES",
]

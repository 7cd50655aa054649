"""Domain entities describing saved-search alerts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .listing import TRANSACTION_RENT

FREQUENCY_DAILY = "quotidien"
FREQUENCY_WEEKLY = "hebdomadaire"
FREQUENCY_MONTHLY = "mensuel"
ALERT_FREQUENCIES = (FREQUENCY_DAILY, FREQUENCY_WEEKLY, FREQUENCY_MONTHLY)

# Minimum hours between two notifications of the same alert.
FREQUENCY_MIN_HOURS: dict[str, int] = {
    FREQUENCY_DAILY: 24,
    FREQUENCY_WEEKLY: 168,
    FREQUENCY_MONTHLY: 720,
}
DEFAULT_FREQUENCY_MIN_HOURS = 24

HISTORY_STATUS_SENT = "envoyee"
HISTORY_STATUS_READ = "lue"
HISTORY_STATUS_IGNORED = "ignoree"
HISTORY_STATUSES = (HISTORY_STATUS_SENT, HISTORY_STATUS_READ, HISTORY_STATUS_IGNORED)


@dataclass
class AlertCriteria:
    """Search criteria of an alert. ``None`` means the field is a wildcard."""

    property_type: str | None = None
    transaction_type: str | None = TRANSACTION_RENT
    city: str | None = None
    district: str | None = None
    price_min: float | None = None
    price_max: float | None = None
    surface_min: float | None = None
    surface_max: float | None = None
    min_bedrooms: int | None = None
    min_bathrooms: int | None = None
    amenities: list[str] = field(default_factory=list)

    def has_discriminating_criterion(self) -> bool:
        """An alert must narrow the catalog by type, place, price or surface."""

        return any(
            (
                self.property_type,
                self.city,
                self.district,
                self.price_min is not None,
                self.surface_min is not None,
            )
        )


@dataclass
class Alert:
    """A saved search that notifies its owner about new matching listings."""

    id: int | None
    user_id: int
    name: str
    criteria: AlertCriteria
    is_active: bool = True
    frequency: str = FREQUENCY_DAILY
    notifications_enabled: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
    last_notified_at: datetime | None = None
    notification_count: int = 0
    last_match_count: int = 0


@dataclass
class AlertHistoryEntry:
    """Audit record of a notification produced for an alert."""

    id: int | None
    alert_id: int
    match_count: int
    listing_ids: list[int]
    notified_at: datetime | None
    status: str = HISTORY_STATUS_SENT


@dataclass
class AlertStatistics:
    """Aggregates computed over the notification history of an alert."""

    total_notifications: int
    average_matches: float
    max_matches: int
    min_matches: int
    last_notified_at: datetime | None


__all__ = [
    "Alert",
    "AlertCriteria",
    "AlertHistoryEntry",
    "AlertStatistics",
    "ALERT_FREQUENCIES",
    "FREQUENCY_DAILY",
    "FREQUENCY_WEEKLY",
    "FREQUENCY_MONTHLY",
    "FREQUENCY_MIN_HOURS",
    "DEFAULT_FREQUENCY_MIN_HOURS",
    "HISTORY_STATUS_SENT",
    "HISTORY_STATUS_READ",
    "HISTORY_STATUS_IGNORED",
    "HISTORY_STATUSES",
]

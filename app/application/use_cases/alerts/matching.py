"""Pure decision logic for alert matching and notification throttling.

Nothing here touches the database: callers hand in entities and the current
time, which keeps the rules testable with plain objects.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

from app.domain.entities import Alert, Listing
from app.domain.entities.alert import (
    DEFAULT_FREQUENCY_MIN_HOURS,
    FREQUENCY_MIN_HOURS,
)
from app.domain.entities.listing import (
    ATTRIBUTE_BATHROOMS,
    ATTRIBUTE_BEDROOMS,
    ATTRIBUTE_SURFACE,
    LISTING_STATUS_AVAILABLE,
)
from app.utils import ensure_app_naive_datetime, hours_between

DEFAULT_LOOKBACK_DAYS = 7
DEFAULT_MATCH_LIMIT = 20


def matching_cutoff(
    alert: Alert, *, now: datetime, lookback_days: int = DEFAULT_LOOKBACK_DAYS
) -> datetime:
    """Listings must be created strictly after this (naive) instant."""

    if alert.last_notified_at is not None:
        return ensure_app_naive_datetime(alert.last_notified_at)
    return ensure_app_naive_datetime(now) - timedelta(days=lookback_days)


def _contains(haystack: str | None, needle: str | None) -> bool:
    if not needle:
        return True
    return needle.strip().lower() in (haystack or "").lower()


def _attribute_at_least(listing: Listing, name: str, bound: float | None) -> bool:
    if bound is None:
        return True
    value = listing.attribute_value(name)
    return value is not None and value >= bound


def _attribute_at_most(listing: Listing, name: str, bound: float | None) -> bool:
    if bound is None:
        return True
    value = listing.attribute_value(name)
    return value is not None and value <= bound


def alert_matches_listing(
    alert: Alert,
    listing: Listing,
    *,
    now: datetime,
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
) -> bool:
    """Return ``True`` when ``listing`` satisfies every criterion of ``alert``.

    Criteria are AND-ed; a criterion left empty accepts every listing. Attribute
    bounds fail when the listing lacks the attribute or its value is not numeric.
    """

    created_at = ensure_app_naive_datetime(listing.created_at)
    if created_at is None or created_at <= matching_cutoff(
        alert, now=now, lookback_days=lookback_days
    ):
        return False
    if listing.status != LISTING_STATUS_AVAILABLE:
        return False

    criteria = alert.criteria
    if criteria.property_type and listing.property_type != criteria.property_type:
        return False
    if criteria.transaction_type and listing.transaction_type != criteria.transaction_type:
        return False
    if not _contains(listing.city, criteria.city):
        return False
    if not _contains(listing.district, criteria.district):
        return False
    if criteria.price_min is not None and listing.price < criteria.price_min:
        return False
    if criteria.price_max is not None and listing.price > criteria.price_max:
        return False

    return (
        _attribute_at_least(listing, ATTRIBUTE_SURFACE, criteria.surface_min)
        and _attribute_at_most(listing, ATTRIBUTE_SURFACE, criteria.surface_max)
        and _attribute_at_least(listing, ATTRIBUTE_BEDROOMS, criteria.min_bedrooms)
        and _attribute_at_least(listing, ATTRIBUTE_BATHROOMS, criteria.min_bathrooms)
    )


def select_new_matches(
    alert: Alert,
    listings: Iterable[Listing],
    *,
    now: datetime,
    limit: int = DEFAULT_MATCH_LIMIT,
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
) -> list[Listing]:
    """Return at most ``limit`` matching listings, newest first."""

    matches = [
        listing
        for listing in listings
        if alert_matches_listing(alert, listing, now=now, lookback_days=lookback_days)
    ]
    matches.sort(
        key=lambda listing: (ensure_app_naive_datetime(listing.created_at), listing.id or 0),
        reverse=True,
    )
    return matches[:limit]


def minimum_interval_hours(frequency: str | None) -> int:
    return FREQUENCY_MIN_HOURS.get(frequency or "", DEFAULT_FREQUENCY_MIN_HOURS)


def is_alert_due(alert: Alert, *, now: datetime) -> bool:
    """An alert is due when it was never notified or its interval elapsed."""

    if alert.last_notified_at is None:
        return True
    elapsed = hours_between(alert.last_notified_at, now)
    return elapsed >= minimum_interval_hours(alert.frequency)


__all__ = [
    "DEFAULT_LOOKBACK_DAYS",
    "DEFAULT_MATCH_LIMIT",
    "alert_matches_listing",
    "is_alert_due",
    "matching_cutoff",
    "minimum_interval_hours",
    "select_new_matches",
]

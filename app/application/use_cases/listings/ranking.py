"""Preference-based scoring and ordering of listings.

Scores never filter: they only reorder what a query already returned.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime

from app.domain.entities import Listing, UserPreferences
from app.utils import ensure_app_naive_datetime

CITY_WEIGHT = 40
PROPERTY_TYPE_WEIGHT = 30
BUDGET_WEIGHT = 20

RELEVANCE_HIGH = "tres_pertinent"
RELEVANCE_MEDIUM = "pertinent"
RELEVANCE_STANDARD = "standard"
RELEVANCE_LEVELS = (RELEVANCE_HIGH, RELEVANCE_MEDIUM, RELEVANCE_STANDARD)


@dataclass(frozen=True)
class RankedListing:
    listing: Listing
    score: int
    relevance: str


def _normalized(values: Iterable[str] | None) -> set[str]:
    return {value.strip().lower() for value in values or () if value and value.strip()}


def has_usable_preferences(preferences: UserPreferences | None) -> bool:
    """Preferences personalize results once they name a city, a type or a project."""

    if preferences is None:
        return False
    return bool(
        _normalized(preferences.cities)
        or _normalized(preferences.property_types)
        or preferences.has_project()
    )


def score_listing(listing: Listing, preferences: UserPreferences | None) -> int:
    if preferences is None:
        return 0
    score = 0
    if (listing.city or "").strip().lower() in _normalized(preferences.cities):
        score += CITY_WEIGHT
    if (listing.property_type or "").strip().lower() in _normalized(
        preferences.property_types
    ):
        score += PROPERTY_TYPE_WEIGHT
    if preferences.budget_max is not None and listing.price <= preferences.budget_max:
        score += BUDGET_WEIGHT
    return score


def relevance_label(score: int) -> str:
    if score >= CITY_WEIGHT:
        return RELEVANCE_HIGH
    if score >= BUDGET_WEIGHT:
        return RELEVANCE_MEDIUM
    return RELEVANCE_STANDARD


def _created_key(listing: Listing) -> datetime:
    return ensure_app_naive_datetime(listing.created_at) or datetime.min


def popularity_order(listings: Iterable[Listing]) -> list[Listing]:
    return sorted(
        listings,
        key=lambda listing: (listing.view_count or 0, _created_key(listing), listing.id or 0),
        reverse=True,
    )


def rank_listings(
    listings: Iterable[Listing], preferences: UserPreferences | None
) -> list[RankedListing]:
    """Order by score, then view count, then recency.

    Without usable preferences every listing scores 0 and the popularity order
    applies.
    """

    if not has_usable_preferences(preferences):
        return [
            RankedListing(listing=listing, score=0, relevance=RELEVANCE_STANDARD)
            for listing in popularity_order(listings)
        ]

    ranked: list[RankedListing] = []
    for listing in listings:
        score = score_listing(listing, preferences)
        ranked.append(
            RankedListing(listing=listing, score=score, relevance=relevance_label(score))
        )
    ranked.sort(
        key=lambda item: (
            item.score,
            item.listing.view_count or 0,
            _created_key(item.listing),
            item.listing.id or 0,
        ),
        reverse=True,
    )
    return ranked


def summarize_relevance(ranked: Sequence[RankedListing]) -> dict[str, int]:
    summary = {level: 0 for level in RELEVANCE_LEVELS}
    for item in ranked:
        summary[item.relevance] += 1
    summary["total"] = len(ranked)
    return summary


__all__ = [
    "BUDGET_WEIGHT",
    "CITY_WEIGHT",
    "PROPERTY_TYPE_WEIGHT",
    "RELEVANCE_HIGH",
    "RELEVANCE_MEDIUM",
    "RELEVANCE_STANDARD",
    "RankedListing",
    "has_usable_preferences",
    "popularity_order",
    "rank_listings",
    "relevance_label",
    "score_listing",
    "summarize_relevance",
]

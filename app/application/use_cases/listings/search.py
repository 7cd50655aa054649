"""Personalized listing search and home feed."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from app.application.errors import ValidationError
from app.config import get_settings
from app.domain.entities import UserPreferences
from app.domain.entities.listing import (
    LISTING_STATUS_AVAILABLE,
    LISTING_STATUS_RESERVED,
    LISTING_STATUSES,
)
from app.domain.entities.preference import PROJECT_TRANSACTION_TYPES
from app.infrastructure.repositories import ListingRepository, PreferenceRepository
from app.infrastructure.repositories.listing_repository import LISTING_ORDERS, ORDER_RECENT

from .ranking import (
    RELEVANCE_STANDARD,
    RankedListing,
    has_usable_preferences,
    rank_listings,
    summarize_relevance,
)

logger = logging.getLogger(__name__)

CONTENT_PERSONALIZED = "recommandations_personnalisees"
CONTENT_POPULAR = "populaires"
CONTENT_RECENT = "recentes"

SEARCH_STATUSES = (LISTING_STATUS_AVAILABLE, LISTING_STATUS_RESERVED)


@dataclass
class ListingSearchCriteria:
    transaction_type: str | None = None
    property_type: str | None = None
    city: str | None = None
    district: str | None = None
    price_min: float | None = None
    price_max: float | None = None
    statuses: tuple[str, ...] = SEARCH_STATUSES
    sort: str = ORDER_RECENT

    def used_fields(self) -> list[str]:
        names = (
            "transaction_type",
            "property_type",
            "city",
            "district",
            "price_min",
            "price_max",
        )
        return [name for name in names if getattr(self, name) not in (None, "")]


@dataclass
class SearchResult:
    items: list[RankedListing]
    personalized: bool
    relevance: dict[str, int]
    criteria_used: list[str] = field(default_factory=list)


@dataclass
class HomeFeed:
    items: list[RankedListing]
    content_type: str
    fallback_used: bool = False
    fallback_reason: str | None = None


def _clean_term(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    if not stripped or stripped.lower() == "all":
        return None
    return stripped


def _normalize_criteria(criteria: ListingSearchCriteria) -> ListingSearchCriteria:
    normalized = ListingSearchCriteria(
        transaction_type=_clean_term(criteria.transaction_type),
        property_type=_clean_term(criteria.property_type),
        city=_clean_term(criteria.city),
        district=_clean_term(criteria.district),
        price_min=criteria.price_min,
        price_max=criteria.price_max,
        statuses=tuple(criteria.statuses or SEARCH_STATUSES),
        sort=criteria.sort or ORDER_RECENT,
    )
    unknown = [status for status in normalized.statuses if status not in LISTING_STATUSES]
    if unknown:
        raise ValidationError(f"Statut inconnu: {', '.join(unknown)}")
    if normalized.sort not in LISTING_ORDERS:
        raise ValidationError(f"Tri inconnu: {normalized.sort}")
    if (
        normalized.price_min is not None
        and normalized.price_max is not None
        and normalized.price_min > normalized.price_max
    ):
        raise ValidationError("Le prix minimum doit être inférieur ou égal au prix maximum")
    return normalized


def _load_preferences(session: Session, user_id: int | None) -> UserPreferences | None:
    if user_id is None:
        return None
    try:
        return PreferenceRepository(session).get_by_user(user_id)
    except Exception:
        logger.warning("Could not load preferences of user %s", user_id, exc_info=True)
        session.rollback()
        return None


def _unranked(listings) -> list[RankedListing]:
    return [
        RankedListing(listing=listing, score=0, relevance=RELEVANCE_STANDARD)
        for listing in listings
    ]


def search_listings(
    session: Session,
    criteria: ListingSearchCriteria,
    *,
    user_id: int | None = None,
    limit: int = 20,
    offset: int = 0,
) -> SearchResult:
    """Filter listings, then order them by the user's preferences when usable.

    Preferences only reorder the filtered set. Without usable preferences the
    requested sort applies.
    """

    criteria = _normalize_criteria(criteria)
    repository = ListingRepository(session)
    preferences = _load_preferences(session, user_id)
    filters = dict(
        transaction_type=criteria.transaction_type,
        property_type=criteria.property_type,
        city=criteria.city,
        district=criteria.district,
        price_min=criteria.price_min,
        price_max=criteria.price_max,
        statuses=criteria.statuses,
    )

    if has_usable_preferences(preferences):
        candidates = repository.search(
            **filters,
            order=ORDER_RECENT,
            limit=get_settings().search_candidate_limit,
        )
        ranked = rank_listings(candidates, preferences)[offset : offset + limit]
        personalized = True
    else:
        listings = repository.search(
            **filters, order=criteria.sort, limit=limit, offset=offset
        )
        ranked = _unranked(listings)
        personalized = False

    return SearchResult(
        items=ranked,
        personalized=personalized,
        relevance=summarize_relevance(ranked),
        criteria_used=criteria.used_fields(),
    )


def _personalized_feed(
    repository: ListingRepository, preferences: UserPreferences, limit: int
) -> list[RankedListing]:
    candidates = repository.list_recommended(
        cities=preferences.cities,
        property_types=preferences.property_types,
        transaction_type=PROJECT_TRANSACTION_TYPES.get(preferences.project or ""),
        limit=get_settings().search_candidate_limit,
    )
    return rank_listings(candidates, preferences)[:limit]


def get_home_feed(
    session: Session, *, user_id: int | None = None, limit: int | None = None
) -> HomeFeed:
    """Return the home page listings; this function never raises.

    Personalized recommendations are tried first, then the most viewed
    listings, then the most recent ones. A failing or empty stage hands over
    to the next one and the reason is reported.
    """

    limit = limit or get_settings().home_feed_limit
    repository = ListingRepository(session)
    reason: str | None = None

    if user_id is None:
        reason = "utilisateur_anonyme"
    else:
        try:
            preferences = PreferenceRepository(session).get_by_user(user_id)
        except Exception:
            logger.exception("Home feed: preferences of user %s unavailable", user_id)
            session.rollback()
            preferences = None
            reason = "erreur_preferences"
        if reason is None and not has_usable_preferences(preferences):
            reason = "aucune_preference"
        if reason is None:
            try:
                items = _personalized_feed(repository, preferences, limit)
            except Exception:
                logger.exception("Home feed: personalized stage failed for user %s", user_id)
                session.rollback()
                items = []
                reason = "erreur_recommandations"
            else:
                if items:
                    return HomeFeed(items=items, content_type=CONTENT_PERSONALIZED)
                reason = "aucune_recommandation"

    logger.info("Home feed falling back to popular listings: %s", reason)
    try:
        popular = repository.list_popular(limit=limit)
    except Exception:
        logger.exception("Home feed: popular stage failed")
        session.rollback()
        popular = []
        reason = "erreur_populaires"
    else:
        if popular:
            return HomeFeed(
                items=_unranked(popular),
                content_type=CONTENT_POPULAR,
                fallback_used=True,
                fallback_reason=reason,
            )
        reason = "aucun_populaire"

    logger.info("Home feed falling back to recent listings: %s", reason)
    try:
        recent = repository.list_recent(limit=limit)
    except Exception:
        logger.exception("Home feed: recent stage failed")
        session.rollback()
        recent = []
        reason = "erreur_recentes"
    return HomeFeed(
        items=_unranked(recent),
        content_type=CONTENT_RECENT,
        fallback_used=True,
        fallback_reason=reason,
    )


__all__ = [
    "CONTENT_PERSONALIZED",
    "CONTENT_POPULAR",
    "CONTENT_RECENT",
    "HomeFeed",
    "ListingSearchCriteria",
    "SearchResult",
    "get_home_feed",
    "search_listings",
]

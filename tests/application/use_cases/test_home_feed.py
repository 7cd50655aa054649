"""Tests for the home feed fallback chain and personalized search."""

from __future__ import annotations

from datetime import timedelta

import pytest

from app.application.errors import ValidationError
from app.application.use_cases.listings import (
    ListingSearchCriteria,
    get_home_feed,
    search_listings,
)
from app.application.use_cases.listings.search import (
    CONTENT_PERSONALIZED,
    CONTENT_POPULAR,
    CONTENT_RECENT,
)
from app.application.use_cases.preferences import save_preferences
from app.infrastructure.repositories import ListingRepository, PreferenceRepository


def test_anonymous_visitor_gets_popular_listings(session, make_listing, now):
    make_listing(created_at=now - timedelta(days=2), view_count=5)
    make_listing(created_at=now - timedelta(days=1), view_count=1)

    feed = get_home_feed(session)

    assert feed.content_type == CONTENT_POPULAR
    assert feed.fallback_used
    assert feed.fallback_reason == "utilisateur_anonyme"
    assert [item.listing.view_count for item in feed.items] == [5, 1]


def test_user_preferences_personalize_the_feed(session, make_user, make_listing, now):
    user = make_user()
    make_listing(created_at=now - timedelta(days=1), city="Thies", view_count=50)
    dakar = make_listing(created_at=now - timedelta(days=2), city="Dakar")
    save_preferences(session, user_id=user.id, project="louer", cities=["Dakar"])

    feed = get_home_feed(session, user_id=user.id)

    assert feed.content_type == CONTENT_PERSONALIZED
    assert not feed.fallback_used
    assert [item.listing.id for item in feed.items] == [dakar.id]


def test_user_without_preferences_falls_back(session, make_user, make_listing, now):
    user = make_user()
    make_listing(created_at=now - timedelta(days=1))

    feed = get_home_feed(session, user_id=user.id)

    assert feed.content_type == CONTENT_POPULAR
    assert feed.fallback_reason == "aucune_preference"


def test_no_recommendation_falls_back_to_popular(session, make_user, make_listing, now):
    user = make_user()
    make_listing(created_at=now - timedelta(days=1), city="Thies")
    save_preferences(session, user_id=user.id, cities=["Ziguinchor"])

    feed = get_home_feed(session, user_id=user.id)

    assert feed.content_type == CONTENT_POPULAR
    assert feed.fallback_reason == "aucune_recommandation"


def test_failing_preferences_store_never_breaks_the_feed(
    session, make_user, make_listing, now, monkeypatch
):
    user = make_user()
    make_listing(created_at=now - timedelta(days=1))

    def broken(self, user_id):
        raise RuntimeError("preferences table locked")

    monkeypatch.setattr(PreferenceRepository, "get_by_user", broken)

    feed = get_home_feed(session, user_id=user.id)

    assert feed.content_type == CONTENT_POPULAR
    assert feed.fallback_reason == "erreur_preferences"
    assert len(feed.items) == 1


def test_recent_listings_are_the_last_resort(session, make_listing, now, monkeypatch):
    sold = make_listing(created_at=now - timedelta(days=1), status="vendu")

    def broken(self, *, limit):
        raise RuntimeError("popular query failed")

    monkeypatch.setattr(ListingRepository, "list_popular", broken)

    feed = get_home_feed(session)

    assert feed.content_type == CONTENT_RECENT
    assert feed.fallback_reason == "erreur_populaires"
    assert [item.listing.id for item in feed.items] == [sold.id]


def test_every_stage_failing_still_returns_a_feed(session, monkeypatch):
    def broken(self, *, limit):
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(ListingRepository, "list_popular", broken)
    monkeypatch.setattr(ListingRepository, "list_recent", broken)

    feed = get_home_feed(session)

    assert feed.items == []
    assert feed.content_type == CONTENT_RECENT
    assert feed.fallback_reason == "erreur_recentes"


def test_search_orders_by_preferences_without_filtering(session, make_user, make_listing, now):
    user = make_user()
    thies = make_listing(created_at=now - timedelta(hours=1), city="Thies")
    dakar = make_listing(created_at=now - timedelta(hours=2), city="Dakar")
    save_preferences(session, user_id=user.id, cities=["Dakar"])

    result = search_listings(session, ListingSearchCriteria(), user_id=user.id)

    assert result.personalized
    assert [item.listing.id for item in result.items] == [dakar.id, thies.id]
    assert result.relevance["total"] == 2


def test_search_filters_apply_before_ranking(session, make_listing, now):
    make_listing(created_at=now - timedelta(hours=1), price=500_000)
    cheap = make_listing(created_at=now - timedelta(hours=2), price=100_000)

    result = search_listings(
        session, ListingSearchCriteria(price_max=200_000, city="all")
    )

    assert not result.personalized
    assert [item.listing.id for item in result.items] == [cheap.id]
    assert result.criteria_used == ["price_max"]


def test_search_rejects_inverted_price_range(session):
    with pytest.raises(ValidationError):
        search_listings(session, ListingSearchCriteria(price_min=10, price_max=5))

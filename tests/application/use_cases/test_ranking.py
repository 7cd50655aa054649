"""Tests for preference-based listing ranking."""

from __future__ import annotations

from datetime import timedelta

from app.application.use_cases.listings.ranking import (
    RELEVANCE_HIGH,
    RELEVANCE_MEDIUM,
    RELEVANCE_STANDARD,
    has_usable_preferences,
    rank_listings,
    score_listing,
    summarize_relevance,
)
from app.domain.entities import Listing, UserPreferences


def _listing(listing_id, now, *, city="Abidjan", property_type="villa", price=500_000, views=0):
    return Listing(
        id=listing_id,
        owner_id=1,
        title=f"Bien {listing_id}",
        property_type=property_type,
        transaction_type="vente",
        price=price,
        city=city,
        district="Cocody",
        view_count=views,
        created_at=now - timedelta(days=listing_id),
    )


def _preferences(**values) -> UserPreferences:
    return UserPreferences(id=1, user_id=1, **values)


def test_preferred_city_ranks_first(now):
    listings = [
        _listing(1, now, city="Abidjan", views=50),
        _listing(2, now, city="Dakar"),
    ]

    ranked = rank_listings(listings, _preferences(cities=["dakar"]))

    assert [item.listing.id for item in ranked] == [2, 1]
    assert ranked[0].relevance == RELEVANCE_HIGH
    assert ranked[1].relevance == RELEVANCE_STANDARD


def test_scores_add_city_type_and_budget(now):
    preferences = _preferences(
        cities=["Dakar"], property_types=["appartement"], budget_max=300_000
    )

    full = _listing(1, now, city="Dakar", property_type="appartement", price=250_000)
    budget_only = _listing(2, now, price=200_000)

    assert score_listing(full, preferences) == 90
    assert score_listing(budget_only, preferences) == 20
    assert rank_listings([budget_only], preferences)[0].relevance == RELEVANCE_MEDIUM


def test_ties_are_broken_by_views_then_recency(now):
    listings = [
        _listing(1, now, views=3),
        _listing(2, now, views=10),
        _listing(3, now, views=3),
    ]

    ranked = rank_listings(listings, _preferences(cities=["Dakar"]))

    # Listing 1 was created after listing 3.
    assert [item.listing.id for item in ranked] == [2, 1, 3]


def test_ranking_only_reorders(now):
    listings = [_listing(index, now) for index in range(1, 5)]

    ranked = rank_listings(listings, _preferences(cities=["Dakar"]))

    assert sorted(item.listing.id for item in ranked) == [1, 2, 3, 4]


def test_without_preferences_popularity_order_applies(now):
    listings = [_listing(1, now, views=1), _listing(2, now, views=7)]

    ranked = rank_listings(listings, None)

    assert [item.listing.id for item in ranked] == [2, 1]
    assert all(item.score == 0 for item in ranked)


def test_budget_alone_does_not_personalize():
    assert not has_usable_preferences(None)
    assert not has_usable_preferences(_preferences(budget_max=100_000, cities=["  "]))
    assert has_usable_preferences(_preferences(project="louer"))
    assert has_usable_preferences(_preferences(property_types=["studio"]))


def test_relevance_summary_counts_each_level(now):
    ranked = rank_listings(
        [_listing(1, now, city="Dakar"), _listing(2, now)], _preferences(cities=["Dakar"])
    )

    assert summarize_relevance(ranked) == {
        RELEVANCE_HIGH: 1,
        RELEVANCE_MEDIUM: 0,
        RELEVANCE_STANDARD: 1,
        "total": 2,
    }

"""Tests for the alert matching rules and the frequency throttle."""

from __future__ import annotations

from datetime import timedelta

import pytest

from app.application.use_cases.alerts.matching import (
    alert_matches_listing,
    is_alert_due,
    matching_cutoff,
    minimum_interval_hours,
    select_new_matches,
)
from app.domain.entities import Alert, AlertCriteria, Listing, ListingAttribute


def _alert(now, **criteria) -> Alert:
    return Alert(
        id=1,
        user_id=1,
        name="Appartement Dakar",
        criteria=AlertCriteria(**criteria),
        created_at=now - timedelta(days=30),
    )


def _listing(now, listing_id=1, *, hours_ago=1, attributes=(), **fields) -> Listing:
    values = dict(
        owner_id=9,
        title="Bel appartement",
        property_type="appartement",
        transaction_type="location",
        price=250_000,
        city="Dakar",
        district="Plateau",
    )
    values.update(fields)
    return Listing(
        id=listing_id,
        created_at=now - timedelta(hours=hours_ago),
        attributes=[ListingAttribute(name=name, value=value) for name, value in attributes],
        **values,
    )


def test_listing_matching_every_criterion_is_selected(now):
    alert = _alert(
        now,
        property_type="appartement",
        transaction_type="location",
        city="dakar",
        price_min=200_000,
        price_max=300_000,
    )

    assert alert_matches_listing(alert, _listing(now), now=now)


@pytest.mark.parametrize(
    "fields",
    [
        {"city": "Thies"},
        {"property_type": "villa"},
        {"transaction_type": "vente"},
        {"price": 350_000},
        {"price": 150_000},
        {"status": "vendu"},
    ],
)
def test_any_failing_criterion_rejects_the_listing(now, fields):
    alert = _alert(
        now,
        property_type="appartement",
        city="Dakar",
        price_min=200_000,
        price_max=300_000,
    )

    assert not alert_matches_listing(alert, _listing(now, **fields), now=now)


def test_adding_a_criterion_never_widens_the_matches(now):
    listings = [
        _listing(now, 1),
        _listing(now, 2, city="Thies"),
        _listing(now, 3, price=400_000),
        _listing(now, 4, property_type="villa"),
    ]
    broad = _alert(now, city="Dakar")
    narrow = _alert(now, city="Dakar", price_max=300_000)

    broad_ids = {item.id for item in select_new_matches(broad, listings, now=now)}
    narrow_ids = {item.id for item in select_new_matches(narrow, listings, now=now)}

    assert narrow_ids <= broad_ids
    assert narrow_ids == {1}


def test_city_and_district_match_case_insensitive_substrings(now):
    alert = _alert(now, city="dak", district="PLAT")

    assert alert_matches_listing(alert, _listing(now), now=now)


def test_attribute_bounds_require_a_numeric_value(now):
    alert = _alert(now, city="Dakar", surface_min=80, min_bedrooms=2)

    roomy = _listing(now, attributes=[("superficie", "95,5"), ("chambres", "3")])
    small = _listing(now, attributes=[("superficie", "60"), ("chambres", "3")])
    unknown = _listing(now, attributes=[("superficie", "spacieux"), ("chambres", "3")])
    missing = _listing(now)

    assert alert_matches_listing(alert, roomy, now=now)
    assert not alert_matches_listing(alert, small, now=now)
    assert not alert_matches_listing(alert, unknown, now=now)
    assert not alert_matches_listing(alert, missing, now=now)


def test_surface_max_is_an_upper_bound(now):
    alert = _alert(now, city="Dakar", surface_max=100)

    assert alert_matches_listing(alert, _listing(now, attributes=[("superficie", "100")]), now=now)
    assert not alert_matches_listing(
        alert, _listing(now, attributes=[("superficie", "120")]), now=now
    )


def test_never_notified_alert_looks_back_seven_days(now):
    alert = _alert(now, city="Dakar")

    assert matching_cutoff(alert, now=now) == (now - timedelta(days=7)).replace(tzinfo=None)
    assert alert_matches_listing(alert, _listing(now, hours_ago=24 * 6), now=now)
    assert not alert_matches_listing(alert, _listing(now, hours_ago=24 * 8), now=now)


def test_listings_older_than_last_notification_are_not_new(now):
    alert = _alert(now, city="Dakar")
    alert.last_notified_at = now - timedelta(hours=5)

    assert alert_matches_listing(alert, _listing(now, hours_ago=4), now=now)
    assert not alert_matches_listing(alert, _listing(now, hours_ago=6), now=now)


def test_select_new_matches_returns_newest_first_within_limit(now):
    alert = _alert(now, city="Dakar")
    listings = [_listing(now, index, hours_ago=index) for index in range(1, 6)]

    matches = select_new_matches(alert, listings, now=now, limit=3)

    assert [item.id for item in matches] == [1, 2, 3]


@pytest.mark.parametrize(
    ("frequency", "elapsed_hours", "expected"),
    [
        ("quotidien", 23, False),
        ("quotidien", 25, True),
        ("hebdomadaire", 100, False),
        ("hebdomadaire", 169, True),
        ("mensuel", 719, False),
        ("mensuel", 720, True),
    ],
)
def test_alert_is_due_only_once_its_interval_elapsed(now, frequency, elapsed_hours, expected):
    alert = _alert(now, city="Dakar")
    alert.frequency = frequency
    alert.last_notified_at = now - timedelta(hours=elapsed_hours)

    assert is_alert_due(alert, now=now) is expected


def test_never_notified_alert_is_due(now):
    assert is_alert_due(_alert(now, city="Dakar"), now=now)


def test_unknown_frequency_uses_the_daily_interval():
    assert minimum_interval_hours("instantane") == 24
    assert minimum_interval_hours(None) == 24

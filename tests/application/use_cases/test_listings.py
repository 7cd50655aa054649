"""Tests for publishing, editing and counting views of listings."""

from __future__ import annotations

from datetime import timedelta

import pytest

from app.application.errors import NotFoundError, ValidationError
from app.application.use_cases.listings import (
    create_listing,
    record_view,
    update_listing,
    update_listing_status,
)
from app.domain.entities import ListingMedia


def _publish(session, agent, **overrides):
    values = dict(
        owner_id=agent.id,
        title="Appartement meublé à Cocody",
        property_type="appartement",
        transaction_type="location",
        price=200_000,
        city="Abidjan",
        district="Cocody",
        attributes={"superficie": 85, "chambres": 2, "piscine": ""},
    )
    values.update(overrides)
    return create_listing(session, **values)


def test_rental_gets_monthly_billing_and_deposit(session, agent):
    listing = _publish(session, agent)

    assert listing.slug == "appartement-meuble-a-cocody"
    assert listing.billing_period == "mois"
    assert listing.deposit == 600_000
    assert listing.status == "disponible"
    assert {item.name: item.value for item in listing.attributes} == {
        "superficie": "85",
        "chambres": "2",
    }


def test_sale_has_no_billing_period(session, agent):
    listing = _publish(session, agent, transaction_type="vente", billing_period="mois")

    assert listing.billing_period is None
    assert listing.deposit == 0


def test_duplicate_titles_get_numbered_slugs(session, agent):
    first = _publish(session, agent)
    second = _publish(session, agent)

    assert second.slug == f"{first.slug}-1"


def test_first_media_becomes_main_when_none_is_flagged(session, agent):
    media = [
        ListingMedia(id=None, listing_id=None, url="https://cdn.example/1.jpg"),
        ListingMedia(id=None, listing_id=None, url="https://cdn.example/2.jpg"),
    ]

    listing = _publish(session, agent, media=media)

    assert [item.is_main for item in listing.media] == [True, False]


@pytest.mark.parametrize(
    "overrides",
    [
        {"property_type": "chateau"},
        {"transaction_type": "troc"},
        {"price": -5},
        {"billing_period": "decennie"},
        {"title": "   "},
    ],
)
def test_invalid_listing_is_rejected(session, agent, overrides):
    with pytest.raises(ValidationError):
        _publish(session, agent, **overrides)


def test_update_recomputes_deposit_and_checks_owner(session, agent, make_user):
    listing = _publish(session, agent)

    updated = update_listing(
        session, listing.id, changes={"price": 250_000}, owner_id=agent.id
    )
    assert updated.deposit == 750_000

    with pytest.raises(NotFoundError):
        update_listing(session, listing.id, changes={"price": 1}, owner_id=make_user().id)


def test_status_must_be_known(session, agent):
    listing = _publish(session, agent)

    assert update_listing_status(session, listing.id, status="loue").status == "loue"
    with pytest.raises(ValidationError):
        update_listing_status(session, listing.id, status="archive")


def test_repeated_views_are_counted_once_per_window(session, agent, make_user, now):
    listing = _publish(session, agent)
    visitor = make_user()

    first = record_view(session, listing.id, user_id=visitor.id, now=now)
    repeat = record_view(session, listing.id, user_id=visitor.id, now=now + timedelta(hours=1))
    next_day = record_view(
        session, listing.id, user_id=visitor.id, now=now + timedelta(hours=25)
    )

    assert (first.counted, repeat.counted, next_day.counted) == (True, False, True)
    assert next_day.view_count == 2


def test_anonymous_views_are_deduplicated_by_ip(session, agent, now):
    listing = _publish(session, agent)

    first = record_view(session, listing.id, ip_address="10.0.0.1", now=now)
    repeat = record_view(
        session, listing.id, ip_address="10.0.0.1", now=now + timedelta(minutes=30)
    )
    other = record_view(
        session, listing.id, ip_address="10.0.0.2", now=now + timedelta(minutes=30)
    )
    later = record_view(session, listing.id, ip_address="10.0.0.1", now=now + timedelta(hours=3))

    assert [first.counted, repeat.counted, other.counted, later.counted] == [
        True,
        False,
        True,
        True,
    ]
    assert later.view_count == 3

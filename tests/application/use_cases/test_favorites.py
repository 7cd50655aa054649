"""Tests for favorite listings."""

from __future__ import annotations

from datetime import timedelta

import pytest

from app.application.errors import ConflictError, NotFoundError
from app.application.use_cases.favorites import (
    add_favorite,
    check_favorites,
    clear_favorites,
    count_favorites,
    list_favorites,
    remove_favorite,
    toggle_favorite,
)


def test_adding_twice_is_a_conflict(session, make_user, make_listing, now):
    user = make_user()
    listing = make_listing(created_at=now - timedelta(days=1))

    add_favorite(session, user_id=user.id, listing_id=listing.id)

    with pytest.raises(ConflictError):
        add_favorite(session, user_id=user.id, listing_id=listing.id)
    assert count_favorites(session, user_id=user.id) == 1


def test_unknown_listing_cannot_be_favorited(session, make_user):
    with pytest.raises(NotFoundError):
        add_favorite(session, user_id=make_user().id, listing_id=999)


def test_toggle_adds_then_removes(session, make_user, make_listing, now):
    user = make_user()
    listing = make_listing(created_at=now - timedelta(days=1))

    assert toggle_favorite(session, user_id=user.id, listing_id=listing.id) is True
    assert toggle_favorite(session, user_id=user.id, listing_id=listing.id) is False
    assert count_favorites(session, user_id=user.id) == 0


def test_list_returns_listing_details(session, make_user, make_listing, now):
    user = make_user()
    listing = make_listing(created_at=now - timedelta(days=1), city="Saly")
    add_favorite(session, user_id=user.id, listing_id=listing.id)

    [(favorite, favorite_listing)] = list_favorites(session, user_id=user.id)

    assert favorite.listing_id == listing.id
    assert favorite_listing.city == "Saly"


def test_check_and_clear(session, make_user, make_listing, now):
    user = make_user()
    kept = make_listing(created_at=now - timedelta(days=1))
    other = make_listing(created_at=now - timedelta(days=2))
    add_favorite(session, user_id=user.id, listing_id=kept.id)

    assert check_favorites(session, user_id=user.id, listing_ids=[kept.id, other.id]) == {
        kept.id: True,
        other.id: False,
    }
    assert clear_favorites(session, user_id=user.id) == 1

    with pytest.raises(NotFoundError):
        remove_favorite(session, user_id=user.id, listing_id=kept.id)

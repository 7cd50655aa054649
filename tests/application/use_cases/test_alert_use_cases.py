"""Tests for alert management and the database-backed sweep."""

from __future__ import annotations

from datetime import timedelta

import pytest

from app.application.errors import NotFoundError, ValidationError
from app.application.use_cases.alerts import (
    check_alert_now,
    create_alert,
    get_alert,
    get_alert_history,
    get_alert_statistics,
    run_alert_sweep,
    toggle_alert,
    update_alert,
)
from app.domain.entities import AlertCriteria, DispatchResult
from app.infrastructure.models import AlertHistoryModel, NotificationModel


class CollectingDispatcher:
    def __init__(self):
        self.messages = []

    def __call__(self, message):
        self.messages.append(message)
        return DispatchResult.success("ticket")


def _dakar_alert(session, user, **overrides):
    values = dict(
        user_id=user.id,
        name="Location Dakar",
        criteria=AlertCriteria(city="Dakar", transaction_type="location", price_max=300_000),
    )
    values.update(overrides)
    return create_alert(session, **values)


def test_sweep_notifies_matching_alert_and_records_everything(
    session, make_user, make_listing, now
):
    owner = make_user()
    other = make_user()
    alert = _dakar_alert(session, owner)
    _dakar_alert(
        session, other, name="Thies", criteria=AlertCriteria(city="Thies")
    )
    listing = make_listing(created_at=now - timedelta(hours=3), city="Dakar", price=250_000)
    dispatcher = CollectingDispatcher()

    report = run_alert_sweep(session, dispatcher=dispatcher, now=now)

    assert report.alerts_checked == 2
    assert report.notifications_sent == 1
    assert [message.data["alerte_id"] for message in dispatcher.messages] == [alert.id]

    stored = get_alert(session, alert.id)
    assert stored.notification_count == 1
    assert stored.last_match_count == 1
    assert stored.last_notified_at is not None

    history = session.query(AlertHistoryModel).one()
    assert history.listing_ids == [listing.id]
    inbox = session.query(NotificationModel).one()
    assert inbox.user_id == owner.id
    assert inbox.event_type == "alert_match"


def test_sweep_ignores_owners_without_push_token(session, make_user, make_listing, now):
    owner = make_user(push_token=None)
    _dakar_alert(session, owner)
    make_listing(created_at=now - timedelta(hours=3))

    report = run_alert_sweep(session, dispatcher=CollectingDispatcher(), now=now)

    assert report.alerts_checked == 0


def test_second_sweep_within_a_day_skips_the_alert(session, make_user, make_listing, now):
    _dakar_alert(session, make_user())
    make_listing(created_at=now - timedelta(hours=3))
    dispatcher = CollectingDispatcher()

    run_alert_sweep(session, dispatcher=dispatcher, now=now)
    make_listing(created_at=now + timedelta(hours=1))
    report = run_alert_sweep(session, dispatcher=dispatcher, now=now + timedelta(hours=23))

    assert report.alerts_skipped == 1
    assert len(dispatcher.messages) == 1


def test_alert_requires_a_discriminating_criterion(session, make_user):
    with pytest.raises(ValidationError):
        _dakar_alert(session, make_user(), criteria=AlertCriteria(transaction_type="vente"))


def test_other_users_cannot_see_an_alert(session, make_user):
    alert = _dakar_alert(session, make_user())

    with pytest.raises(NotFoundError):
        get_alert(session, alert.id, owner_id=alert.user_id + 1)


def test_update_merges_criteria_changes(session, make_user):
    alert = _dakar_alert(session, make_user())

    updated = update_alert(
        session,
        alert.id,
        owner_id=alert.user_id,
        frequency="hebdomadaire",
        criteria_changes={"price_max": 400_000},
    )

    assert updated.frequency == "hebdomadaire"
    assert updated.criteria.city == "Dakar"
    assert updated.criteria.price_max == 400_000


def test_update_rejects_unknown_criteria(session, make_user):
    alert = _dakar_alert(session, make_user())

    with pytest.raises(ValidationError):
        update_alert(session, alert.id, criteria_changes={"piscine": True})


def test_toggle_flips_or_forces_the_state(session, make_user):
    alert = _dakar_alert(session, make_user())

    assert toggle_alert(session, alert.id).is_active is False
    assert toggle_alert(session, alert.id).is_active is True
    assert toggle_alert(session, alert.id, active=True).is_active is True


def test_check_now_previews_without_recording(session, make_user, make_listing, now):
    alert = _dakar_alert(session, make_user())
    listing = make_listing(created_at=now - timedelta(hours=3))

    matches = check_alert_now(session, alert.id, now=now)

    assert [item.id for item in matches] == [listing.id]
    assert session.query(AlertHistoryModel).count() == 0


def test_check_now_refuses_inactive_alerts(session, make_user):
    alert = _dakar_alert(session, make_user(), is_active=False)

    with pytest.raises(ValidationError):
        check_alert_now(session, alert.id)


def test_history_and_statistics_follow_the_sweeps(session, make_user, make_listing, now):
    alert = _dakar_alert(session, make_user())
    make_listing(created_at=now - timedelta(hours=3))
    make_listing(created_at=now - timedelta(hours=2))
    run_alert_sweep(session, dispatcher=CollectingDispatcher(), now=now)

    later = now + timedelta(days=2)
    make_listing(created_at=later - timedelta(hours=1))
    run_alert_sweep(session, dispatcher=CollectingDispatcher(), now=later)

    history = get_alert_history(session, alert.id)
    stats = get_alert_statistics(session, alert.id)

    assert [entry.match_count for entry in history] == [1, 2]
    assert stats.total_notifications == 2
    assert stats.max_matches == 2
    assert stats.min_matches == 1
    assert stats.average_matches == pytest.approx(1.5)

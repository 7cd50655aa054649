"""Tests for the alert sweep using an in-memory store."""

from __future__ import annotations

from datetime import timedelta

from app.application.use_cases.alerts.sweep import (
    build_inbox_notification,
    build_push_message,
    sweep_alerts,
)
from app.domain.entities import (
    Alert,
    AlertCriteria,
    AlertHistoryEntry,
    DispatchResult,
    Listing,
)
from app.utils import ensure_app_naive_datetime

TOKEN = "ExponentPushToken[abc]"


class FakeStore:
    def __init__(self, alerts, listings, *, failing_alert_ids=()):
        self.alerts = alerts
        self.listings = listings
        self.failing_alert_ids = set(failing_alert_ids)
        self.history: list[AlertHistoryEntry] = []
        self.inbox = []
        self.candidate_queries = 0

    def list_sweepable_alerts(self):
        return [(alert, TOKEN) for alert in self.alerts]

    def list_candidate_listings(self, created_after):
        self.candidate_queries += 1
        return [
            listing
            for listing in self.listings
            if ensure_app_naive_datetime(listing.created_at) > created_after
        ]

    def record_notification(self, alert, listings, *, notified_at, inbox):
        if alert.id in self.failing_alert_ids:
            raise RuntimeError("database unavailable")
        entry = AlertHistoryEntry(
            id=len(self.history) + 1,
            alert_id=alert.id,
            match_count=len(listings),
            listing_ids=[listing.id for listing in listings],
            notified_at=notified_at,
        )
        self.history.append(entry)
        self.inbox.append(inbox)
        alert.last_notified_at = notified_at
        alert.notification_count += 1
        return entry


class RecordingDispatcher:
    def __init__(self, result=None, error=None):
        self.messages = []
        self.result = result or DispatchResult.success("ticket")
        self.error = error

    def __call__(self, message):
        self.messages.append(message)
        if self.error is not None:
            raise self.error
        return self.result


def _alert(alert_id, now, **overrides) -> Alert:
    values = dict(
        id=alert_id,
        user_id=alert_id,
        name=f"Alerte {alert_id}",
        criteria=AlertCriteria(city="Dakar", transaction_type="location", price_max=300_000),
        created_at=now - timedelta(days=30),
    )
    values.update(overrides)
    return Alert(**values)


def _listing(listing_id, now, *, city="Dakar", hours_ago=2, price=250_000) -> Listing:
    return Listing(
        id=listing_id,
        owner_id=99,
        title=f"Bien {listing_id}",
        property_type="appartement",
        transaction_type="location",
        price=price,
        city=city,
        district="Centre",
        created_at=now - timedelta(hours=hours_ago),
    )


def test_new_dakar_listing_notifies_the_alert_owner(now):
    alert = _alert(1, now)
    store = FakeStore([alert], [_listing(10, now)])
    dispatcher = RecordingDispatcher()

    report = sweep_alerts(store, dispatcher, now=now)

    assert report.alerts_checked == 1
    assert report.notifications_sent == 1
    assert report.listings_found == 1
    assert report.results[0].success and report.results[0].dispatched
    assert [entry.listing_ids for entry in store.history] == [[10]]
    message = dispatcher.messages[0]
    assert message.token == TOKEN
    assert message.data["alerte_id"] == 1
    assert message.data["nombre_proprietes"] == 1
    assert alert.last_notified_at == now


def test_listing_in_another_city_notifies_nobody(now):
    store = FakeStore([_alert(1, now)], [_listing(10, now, city="Thies")])
    dispatcher = RecordingDispatcher()

    report = sweep_alerts(store, dispatcher, now=now)

    assert report.notifications_sent == 0
    assert report.results[0].new_listings == 0
    assert store.history == []
    assert dispatcher.messages == []


def test_second_sweep_does_not_repeat_listings(now):
    alert = _alert(1, now)
    store = FakeStore([alert], [_listing(10, now)])
    dispatcher = RecordingDispatcher()

    sweep_alerts(store, dispatcher, now=now)
    report = sweep_alerts(store, dispatcher, now=now + timedelta(hours=25))

    assert report.notifications_sent == 0
    assert len(store.history) == 1


def test_weekly_alert_notified_yesterday_is_skipped_without_reads(now):
    alert = _alert(1, now, frequency="hebdomadaire", last_notified_at=now - timedelta(days=1))
    store = FakeStore([alert], [_listing(10, now)])

    report = sweep_alerts(store, RecordingDispatcher(), now=now)

    assert report.alerts_checked == 1
    assert report.alerts_skipped == 1
    assert report.results == []
    assert store.candidate_queries == 0


def test_failure_on_one_alert_does_not_stop_the_others(now):
    alerts = [_alert(1, now), _alert(2, now)]
    store = FakeStore(alerts, [_listing(10, now)], failing_alert_ids={1})

    report = sweep_alerts(store, RecordingDispatcher(), now=now)

    first, second = report.results
    assert not first.success and "database unavailable" in first.error
    assert second.success and second.new_listings == 1
    assert report.notifications_sent == 1
    assert [entry.alert_id for entry in store.history] == [2]


def test_push_failure_keeps_the_recorded_history(now):
    store = FakeStore([_alert(1, now)], [_listing(10, now)])
    dispatcher = RecordingDispatcher(error=ConnectionError("push service down"))

    report = sweep_alerts(store, dispatcher, now=now)

    result = report.results[0]
    assert result.success
    assert not result.dispatched
    assert len(store.history) == 1
    assert report.notifications_sent == 1


def test_rejected_push_is_reported_as_not_dispatched(now):
    store = FakeStore([_alert(1, now)], [_listing(10, now)])
    dispatcher = RecordingDispatcher(result=DispatchResult.failure("DeviceNotRegistered"))

    report = sweep_alerts(store, dispatcher, now=now)

    assert report.results[0].success
    assert not report.results[0].dispatched


def test_muted_alert_is_recorded_without_push(now):
    store = FakeStore([_alert(1, now, notifications_enabled=False)], [_listing(10, now)])
    dispatcher = RecordingDispatcher()

    report = sweep_alerts(store, dispatcher, now=now)

    assert report.notifications_sent == 1
    assert dispatcher.messages == []
    assert len(store.inbox) == 1


def test_matches_are_capped_by_match_limit(now):
    listings = [_listing(index, now, hours_ago=index) for index in range(1, 6)]
    store = FakeStore([_alert(1, now)], listings)

    report = sweep_alerts(store, RecordingDispatcher(), now=now, match_limit=2)

    assert report.listings_found == 2
    assert store.history[0].listing_ids == [1, 2]


def test_push_and_inbox_messages_describe_the_matches(now):
    alert = _alert(7, now, name="Studio Plateau")
    listings = [_listing(1, now), _listing(2, now)]

    message = build_push_message(alert, TOKEN, listings)
    inbox = build_inbox_notification(alert, listings)

    assert message.title.startswith("🎯 2 nouvelle(s) propriété(s)")
    assert message.body == "Studio Plateau - 2 bien(s) trouvé(s)"
    assert message.data == {
        "type": "alerte",
        "alerte_id": 7,
        "nombre_proprietes": 2,
        "listing_ids": [1, 2],
    }
    assert inbox.user_id == alert.user_id
    assert inbox.event_type == "alert_match"

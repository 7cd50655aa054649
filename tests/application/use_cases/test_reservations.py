"""Tests for visit booking and its effect on the listing status."""

from __future__ import annotations

from datetime import date, time, timedelta

import pytest

from app.application.errors import ConflictError, NotFoundError, ValidationError
from app.application.use_cases.reservations import (
    DAILY_SLOTS,
    create_reservation,
    list_available_slots,
    update_reservation_status,
)
from app.domain.entities import DispatchResult
from app.infrastructure.models import NotificationModel, ReservationModel
from app.infrastructure.repositories import ListingRepository

VISIT_DAY = date(2026, 3, 12)


@pytest.fixture()
def listing(make_listing, now):
    return make_listing(created_at=now - timedelta(days=1))


class RecordingDispatcher:
    def __init__(self, fail=False):
        self.messages = []
        self.fail = fail

    def __call__(self, message):
        if self.fail:
            raise ConnectionError("push provider unreachable")
        self.messages.append(message)
        return DispatchResult.success()


def _book(session, user, listing, slot=time(10, 0), dispatcher=None):
    return create_reservation(
        session,
        user_id=user.id,
        listing_id=listing.id,
        visit_date=VISIT_DAY,
        visit_time=slot,
        dispatcher=dispatcher,
    )


def test_booking_reserves_the_listing_and_notifies_both_parties(session, make_user, listing):
    visitor = make_user()
    dispatcher = RecordingDispatcher()

    reservation = _book(session, visitor, listing, dispatcher=dispatcher)

    assert reservation.status == "attente"
    assert ListingRepository(session).get(listing.id).status == "reserve"
    notifications = session.query(NotificationModel).all()
    assert sorted((item.user_id, item.event_type) for item in notifications) == sorted(
        [(listing.owner_id, "reservation"), (visitor.id, "reservation")]
    )
    # The owner has no push token, so only the visitor gets the acknowledgement.
    assert [message.title for message in dispatcher.messages] == ["Demande envoyée"]
    assert dispatcher.messages[0].data["reservation_id"] == reservation.id


def test_failed_status_change_leaves_no_reservation(session, make_user, listing, monkeypatch):
    visitor = make_user()

    def broken(self, listing_id, status):
        raise RuntimeError("listing row locked")

    monkeypatch.setattr(ListingRepository, "update_status", broken)

    with pytest.raises(RuntimeError):
        _book(session, visitor, listing)

    monkeypatch.undo()
    assert session.query(ReservationModel).count() == 0
    assert session.query(NotificationModel).count() == 0
    assert ListingRepository(session).get(listing.id).status == "disponible"


def test_confirmed_slot_cannot_be_booked_again(session, make_user, listing):
    first = _book(session, make_user(), listing)
    update_reservation_status(session, first.id, status="confirme")

    with pytest.raises(ConflictError, match="créneau"):
        _book(session, make_user(), listing)


def test_reserved_listing_refuses_other_slots(session, make_user, listing):
    _book(session, make_user(), listing)

    with pytest.raises(ConflictError, match="disponible"):
        _book(session, make_user(), listing, slot=time(15, 0))


def test_unknown_listing_is_reported(session, make_user, listing):
    with pytest.raises(NotFoundError):
        create_reservation(
            session,
            user_id=make_user().id,
            listing_id=listing.id + 100,
            visit_date=VISIT_DAY,
            visit_time=time(10, 0),
        )


def test_cancellation_releases_the_listing(session, make_user, listing):
    reservation = _book(session, make_user(), listing)

    cancelled = update_reservation_status(session, reservation.id, status="annule")

    assert cancelled.status == "annule"
    assert ListingRepository(session).get(listing.id).status == "disponible"


def test_available_slots_exclude_confirmed_visits(session, make_user, listing):
    assert list_available_slots(session, listing.id, VISIT_DAY) == list(DAILY_SLOTS)

    reservation = _book(session, make_user(), listing, slot=time(9, 30))
    update_reservation_status(session, reservation.id, status="confirme")

    slots = list_available_slots(session, listing.id, VISIT_DAY)
    assert time(9, 30) not in slots
    assert len(slots) == len(DAILY_SLOTS) - 1


def test_daily_slots_cover_morning_and_afternoon():
    assert DAILY_SLOTS[0] == time(9, 0)
    assert time(11, 30) in DAILY_SLOTS
    assert time(12, 0) not in DAILY_SLOTS
    assert DAILY_SLOTS[-1] == time(17, 0)


def test_off_template_times_are_rejected(session, make_user, listing):
    with pytest.raises(ValidationError, match="Créneau invalide"):
        _book(session, make_user(), listing, slot=time(3, 17))

    assert session.query(ReservationModel).count() == 0


def test_seconds_are_ignored_when_matching_the_template(session, make_user, listing):
    reservation = _book(session, make_user(), listing, slot=time(14, 30, 45))

    assert reservation.visit_time == time(14, 30)


def test_a_slot_cannot_be_confirmed_twice(session, make_user, listing):
    first = _book(session, make_user(), listing)
    update_reservation_status(session, first.id, status="refuse")
    second = _book(session, make_user(), listing)
    update_reservation_status(session, second.id, status="confirme")

    with pytest.raises(ConflictError, match="déjà confirmé"):
        update_reservation_status(session, first.id, status="confirme")

    confirmed = (
        session.query(ReservationModel)
        .filter(ReservationModel.visit_time == time(10, 0))
        .filter(ReservationModel.status == "confirme")
        .count()
    )
    assert confirmed == 1
    assert ListingRepository(session).get(listing.id).status == "reserve"


def test_reconfirming_the_same_reservation_is_allowed(session, make_user, listing):
    reservation = _book(session, make_user(), listing)
    update_reservation_status(session, reservation.id, status="confirme")

    again = update_reservation_status(session, reservation.id, status="confirme")

    assert again.status == "confirme"


def test_listing_stays_reserved_while_another_visit_holds_it(session, make_user, listing):
    first = _book(session, make_user(), listing)
    update_reservation_status(session, first.id, status="refuse")
    second = _book(session, make_user(), listing, slot=time(15, 0))
    update_reservation_status(session, first.id, status="confirme")

    update_reservation_status(session, second.id, status="annule")

    assert ListingRepository(session).get(listing.id).status == "reserve"

    update_reservation_status(session, first.id, status="termine")

    assert ListingRepository(session).get(listing.id).status == "disponible"


def test_sold_listing_keeps_its_status_when_a_visit_ends(session, make_user, listing):
    reservation = _book(session, make_user(), listing)
    ListingRepository(session).update_status(listing.id, "vendu")

    update_reservation_status(session, reservation.id, status="annule")

    assert ListingRepository(session).get(listing.id).status == "vendu"


def test_status_change_notifies_visitor_and_owner(session, make_user, listing):
    visitor = make_user()
    reservation = _book(session, visitor, listing)
    dispatcher = RecordingDispatcher()

    update_reservation_status(
        session,
        reservation.id,
        status="refuse",
        agent_message="Le bien vient d'être loué.",
        dispatcher=dispatcher,
    )

    titles = {
        (item.user_id, item.title)
        for item in session.query(NotificationModel).filter(
            NotificationModel.title == "Visite refusée"
        )
    }
    assert titles == {(listing.owner_id, "Visite refusée"), (visitor.id, "Visite refusée")}
    [message] = dispatcher.messages
    assert message.title == "Visite refusée"
    assert message.body.endswith("Le bien vient d'être loué.")
    assert message.data["previous_status"] == "attente"


def test_push_failure_does_not_undo_the_status_change(session, make_user, listing):
    reservation = _book(session, make_user(), listing)

    updated = update_reservation_status(
        session,
        reservation.id,
        status="confirme",
        dispatcher=RecordingDispatcher(fail=True),
    )

    assert updated.status == "confirme"
    assert session.get(ReservationModel, reservation.id).status == "confirme"

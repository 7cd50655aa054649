"""Tests for payments, messages, preferences and the notification inbox."""

from __future__ import annotations

from datetime import timedelta

import pytest

from app.application.errors import ConflictError, NotFoundError, ValidationError
from app.application.use_cases.messages import (
    list_received_messages,
    mark_message_read,
    send_message,
)
from app.application.use_cases.notifications import (
    count_unread_notifications,
    delete_notification,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from app.application.use_cases.payments import (
    create_payment,
    get_payment_by_reference,
    refund_payment,
    update_payment_status,
)
from app.application.use_cases.preferences import (
    delete_preferences,
    has_completed_onboarding,
    save_preferences,
)


def test_payment_gets_a_generated_reference(session, make_user):
    payment = create_payment(session, user_id=make_user().id, amount=5000)

    assert payment.reference.startswith("PAY")
    assert payment.status == "en_attente"
    assert get_payment_by_reference(session, payment.reference).id == payment.id


def test_payment_reference_must_be_unique(session, make_user):
    user = make_user()
    create_payment(session, user_id=user.id, amount=5000, reference="WAVE-1")

    with pytest.raises(ConflictError):
        create_payment(session, user_id=user.id, amount=2000, reference="WAVE-1")


@pytest.mark.parametrize(
    "overrides",
    [{"amount": 0}, {"method": "cheque"}, {"payment_type": "pourboire"}],
)
def test_invalid_payments_are_rejected(session, make_user, overrides):
    arguments = {"amount": 1000, **overrides}

    with pytest.raises(ValidationError):
        create_payment(session, user_id=make_user().id, **arguments)


def test_only_paid_payments_are_refunded(session, make_user):
    payment = create_payment(session, user_id=make_user().id, amount=5000)

    with pytest.raises(ConflictError):
        refund_payment(session, payment.id)

    paid = update_payment_status(session, payment.id, status="paye")
    assert paid.paid_at is not None
    assert refund_payment(session, payment.id).status == "rembourse"


def test_message_lands_in_recipient_inbox(session, make_user, make_listing, now):
    sender = make_user()
    recipient = make_user()
    listing = make_listing(created_at=now - timedelta(days=1))

    message = send_message(
        session,
        sender_id=sender.id,
        recipient_id=recipient.id,
        content="  Est-ce toujours disponible ?  ",
        listing_id=listing.id,
    )

    assert message.content == "Est-ce toujours disponible ?"
    assert [item.id for item in list_received_messages(session, user_id=recipient.id)] == [
        message.id
    ]
    assert count_unread_notifications(session, user_id=recipient.id) == 1
    assert count_unread_notifications(session, user_id=sender.id) == 0


def test_messages_to_oneself_are_rejected(session, make_user):
    user = make_user()

    with pytest.raises(ValidationError):
        send_message(session, sender_id=user.id, recipient_id=user.id, content="Bonjour")


def test_only_the_recipient_marks_a_message_read(session, make_user):
    sender = make_user()
    recipient = make_user()
    message = send_message(
        session, sender_id=sender.id, recipient_id=recipient.id, content="Bonjour"
    )

    with pytest.raises(NotFoundError):
        mark_message_read(session, message.id, user_id=sender.id)
    assert mark_message_read(session, message.id, user_id=recipient.id).is_read is True
    assert list_received_messages(session, user_id=recipient.id, unread_only=True) == []


def test_notification_inbox_lifecycle(session, make_user):
    sender = make_user()
    recipient = make_user()
    for text in ("Premier", "Second"):
        send_message(session, sender_id=sender.id, recipient_id=recipient.id, content=text)

    first, second = list_notifications(session, user_id=recipient.id)
    read = mark_notification_read(session, first.id, user_id=recipient.id)
    assert read.read_at is not None
    assert count_unread_notifications(session, user_id=recipient.id) == 1

    with pytest.raises(NotFoundError):
        delete_notification(session, second.id, user_id=sender.id)

    assert mark_all_notifications_read(session, user_id=recipient.id) == 1
    delete_notification(session, second.id, user_id=recipient.id)
    assert len(list_notifications(session, user_id=recipient.id)) == 1


def test_preferences_are_replaced_and_deduplicated(session, make_user):
    user = make_user()
    assert has_completed_onboarding(session, user_id=user.id) is False

    save_preferences(session, user_id=user.id, cities=["Dakar"])
    assert has_completed_onboarding(session, user_id=user.id) is False

    saved = save_preferences(
        session,
        user_id=user.id,
        project="louer",
        cities=["Dakar", " Dakar ", "Thiès"],
        property_types=["villa"],
    )
    assert saved.cities == ["Dakar", "Thiès"]
    assert has_completed_onboarding(session, user_id=user.id) is True

    delete_preferences(session, user_id=user.id)
    with pytest.raises(NotFoundError):
        delete_preferences(session, user_id=user.id)


def test_preferences_reject_unknown_values(session, make_user):
    user = make_user()

    with pytest.raises(ValidationError):
        save_preferences(session, user_id=user.id, project="squatter")
    with pytest.raises(ValidationError):
        save_preferences(session, user_id=user.id, property_types=["chateau"])

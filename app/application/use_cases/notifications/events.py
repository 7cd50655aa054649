"""Utility helpers to generate and persist in-app notifications."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import Message, Notification, Reservation
from app.domain.entities.notification import (
    NOTIFICATION_TYPE_MESSAGE,
    NOTIFICATION_TYPE_RESERVATION,
)
from app.domain.entities.reservation import (
    RESERVATION_STATUS_CANCELLED,
    RESERVATION_STATUS_COMPLETED,
    RESERVATION_STATUS_CONFIRMED,
    RESERVATION_STATUS_REFUSED,
)
from app.infrastructure.repositories import NotificationRepository
from app.utils import now_in_app_timezone


def persist_notification(
    session: Session,
    *,
    user_id: int,
    event_type: str,
    title: str,
    message: str,
    payload: dict | None = None,
    repository: NotificationRepository | None = None,
) -> Notification:
    notification = Notification(
        id=None,
        user_id=user_id,
        event_type=event_type,
        title=title,
        message=message,
        payload=payload or {},
        created_at=now_in_app_timezone(),
        read_at=None,
    )
    return (repository or NotificationRepository(session)).create(notification)


def notify_message_received(
    session: Session,
    message: Message,
    *,
    repository: NotificationRepository | None = None,
) -> Notification:
    subject = message.subject or "Nouveau message"
    preview = message.content if len(message.content) <= 120 else f"{message.content[:117]}..."
    return persist_notification(
        session,
        user_id=message.recipient_id,
        event_type=NOTIFICATION_TYPE_MESSAGE,
        title=subject,
        message=preview,
        payload={
            "message_id": message.id,
            "sender_id": message.sender_id,
            "listing_id": message.listing_id,
        },
        repository=repository,
    )


def _visit_slot(reservation: Reservation, listing_title: str | None = None) -> str:
    slot = f"le {reservation.visit_date:%d/%m/%Y} à {reservation.visit_time:%H:%M}"
    return f"pour « {listing_title} » {slot}" if listing_title else slot


def _reservation_payload(reservation: Reservation, **extra) -> dict:
    return {
        "reservation_id": reservation.id,
        "listing_id": reservation.listing_id,
        "status": reservation.status,
        **extra,
    }


def notify_reservation_requested(
    session: Session,
    reservation: Reservation,
    *,
    owner_id: int,
    listing_title: str | None = None,
    repository: NotificationRepository | None = None,
) -> list[Notification]:
    """Tell the owner about the request and acknowledge it to the visitor."""

    slot = _visit_slot(reservation, listing_title)
    owner_entry = persist_notification(
        session,
        repository=repository,
        user_id=owner_id,
        event_type=NOTIFICATION_TYPE_RESERVATION,
        title="Nouvelle demande de visite",
        message=f"Visite demandée {slot}",
        payload=_reservation_payload(reservation),
    )
    visitor_entry = persist_notification(
        session,
        repository=repository,
        user_id=reservation.user_id,
        event_type=NOTIFICATION_TYPE_RESERVATION,
        title="Demande envoyée",
        message=(
            f"Votre demande de visite {slot} a été transmise au propriétaire. "
            "Vous recevrez une confirmation sous peu."
        ),
        payload=_reservation_payload(reservation),
    )
    return [owner_entry, visitor_entry]


# (owner title, owner message, visitor title, visitor message) per new status.
_STATUS_MESSAGES: dict[str, tuple[str, str, str, str]] = {
    RESERVATION_STATUS_CONFIRMED: (
        "Visite confirmée",
        "La visite {slot} est confirmée.",
        "Visite confirmée",
        "Votre visite {slot} est confirmée.",
    ),
    RESERVATION_STATUS_CANCELLED: (
        "Visite annulée",
        "La visite {slot} a été annulée.",
        "Visite annulée",
        "Votre visite {slot} a été annulée.",
    ),
    RESERVATION_STATUS_COMPLETED: (
        "Visite terminée",
        "La visite {slot} est terminée.",
        "Visite terminée",
        "Merci pour votre visite {slot}.",
    ),
    RESERVATION_STATUS_REFUSED: (
        "Visite refusée",
        "Vous avez refusé la visite {slot}.",
        "Visite refusée",
        "Votre demande de visite {slot} a été refusée.",
    ),
}


def notify_reservation_status_changed(
    session: Session,
    reservation: Reservation,
    *,
    owner_id: int,
    previous_status: str,
    listing_title: str | None = None,
    repository: NotificationRepository | None = None,
) -> list[Notification]:
    """Record the new status in the inbox of both the owner and the visitor."""

    texts = _STATUS_MESSAGES.get(reservation.status)
    if texts is None or reservation.status == previous_status:
        return []
    owner_title, owner_text, visitor_title, visitor_text = texts
    slot = _visit_slot(reservation, listing_title)
    visitor_message = visitor_text.format(slot=slot)
    if reservation.agent_message:
        visitor_message = f"{visitor_message} {reservation.agent_message}"
    payload = _reservation_payload(reservation, previous_status=previous_status)

    notifications = []
    for user_id, title, message in (
        (owner_id, owner_title, owner_text.format(slot=slot)),
        (reservation.user_id, visitor_title, visitor_message),
    ):
        notifications.append(
            persist_notification(
                session,
                repository=repository,
                user_id=user_id,
                event_type=NOTIFICATION_TYPE_RESERVATION,
                title=title,
                message=message,
                payload=payload,
            )
        )
    return notifications


__all__ = [
    "notify_message_received",
    "notify_reservation_requested",
    "notify_reservation_status_changed",
    "persist_notification",
]

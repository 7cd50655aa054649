"""Use cases for messages sent to agencies and owners."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.application.errors import NotFoundError, ValidationError
from app.application.use_cases.notifications import notify_message_received
from app.domain.entities import Message
from app.domain.entities.message import MESSAGE_TYPES
from app.infrastructure.database import transaction
from app.infrastructure.repositories import (
    ListingRepository,
    MessageRepository,
    NotificationRepository,
    UserRepository,
)


def send_message(
    session: Session,
    *,
    sender_id: int,
    recipient_id: int,
    content: str,
    listing_id: int | None = None,
    subject: str | None = None,
    message_type: str = "demande_info",
) -> Message:
    """Store the message and drop a notification in the recipient's inbox."""

    text = (content or "").strip()
    if not text:
        raise ValidationError("Le message ne peut pas être vide")
    if message_type not in MESSAGE_TYPES:
        raise ValidationError(f"Type de message inconnu: {message_type}")
    if sender_id == recipient_id:
        raise ValidationError("Vous ne pouvez pas vous envoyer un message")
    if not UserRepository(session).exists(recipient_id):
        raise NotFoundError("Destinataire non trouvé")
    if listing_id is not None and ListingRepository(session).get(listing_id) is None:
        raise NotFoundError("Propriété non trouvée")

    with transaction(session):
        message = MessageRepository(session, autocommit=False).create(
            Message(
                id=None,
                sender_id=sender_id,
                recipient_id=recipient_id,
                content=text,
                listing_id=listing_id,
                subject=(subject or "").strip() or None,
                message_type=message_type,
            )
        )
        notify_message_received(
            session, message, repository=NotificationRepository(session, autocommit=False)
        )
    return message


def list_received_messages(
    session: Session, *, user_id: int, unread_only: bool = False
) -> Sequence[Message]:
    return MessageRepository(session).list_received(user_id, unread_only=unread_only)


def list_sent_messages(session: Session, *, user_id: int) -> Sequence[Message]:
    return MessageRepository(session).list_sent(user_id)


def mark_message_read(session: Session, message_id: int, *, user_id: int) -> Message:
    repository = MessageRepository(session)
    message = repository.get(message_id)
    if message is None or message.recipient_id != user_id:
        raise NotFoundError("Message non trouvé")
    return repository.mark_as_read(message_id)


__all__ = [
    "list_received_messages",
    "list_sent_messages",
    "mark_message_read",
    "send_message",
]

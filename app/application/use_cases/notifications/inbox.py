"""Use cases for reading and acknowledging in-app notifications."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.application.errors import NotFoundError
from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session, *, user_id: int, unread_only: bool = False, limit: int = 50
) -> Sequence[Notification]:
    return NotificationRepository(session).list_for_user(
        user_id, unread_only=unread_only, limit=limit
    )


def count_unread_notifications(session: Session, *, user_id: int) -> int:
    return NotificationRepository(session).count_unread(user_id)


def mark_notification_read(
    session: Session, notification_id: int, *, user_id: int
) -> Notification:
    repository = NotificationRepository(session)
    notification = repository.get(notification_id)
    if notification is None or notification.user_id != user_id:
        raise NotFoundError("Notification non trouvée")
    repository.mark_as_read([notification_id], user_id=user_id)
    return repository.get(notification_id)


def mark_all_notifications_read(session: Session, *, user_id: int) -> int:
    return NotificationRepository(session).mark_all_as_read(user_id)


def delete_notification(session: Session, notification_id: int, *, user_id: int) -> None:
    if not NotificationRepository(session).delete(notification_id, user_id=user_id):
        raise NotFoundError("Notification non trouvée")


__all__ = [
    "count_unread_notifications",
    "delete_notification",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
]

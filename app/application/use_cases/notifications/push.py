"""Best-effort push delivery for events already recorded in the inbox."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from sqlalchemy.orm import Session

from app.domain.entities import DispatchResult, Notification, PushMessage
from app.infrastructure.repositories import UserRepository

logger = logging.getLogger(__name__)

PushDispatcher = Callable[[PushMessage], DispatchResult]


def dispatch_push(dispatcher: PushDispatcher, message: PushMessage, *, context: str) -> bool:
    """Send ``message`` and report success; failures are logged, never raised."""

    try:
        result = dispatcher(message)
    except Exception:
        logger.exception("Push dispatcher raised for %s", context)
        return False
    if not result.ok:
        logger.warning("Push delivery failed for %s: %s", context, result.error)
    return result.ok


def push_notifications(
    session: Session,
    dispatcher: PushDispatcher | None,
    notifications: Iterable[Notification],
) -> int:
    """Mirror inbox entries as push messages to their recipients' devices.

    Recipients without a push token, or inactive ones, are skipped. Returns
    the number of messages the provider accepted.
    """

    if dispatcher is None:
        return 0
    users = UserRepository(session)
    delivered = 0
    for notification in notifications:
        user = users.get(notification.user_id)
        if user is None or not user.is_active or not user.push_token:
            continue
        message = PushMessage(
            token=user.push_token,
            title=notification.title,
            body=notification.message,
            data={"type": notification.event_type, **notification.payload},
        )
        if dispatch_push(dispatcher, message, context=f"notification {notification.id}"):
            delivered += 1
    return delivered


__all__ = ["PushDispatcher", "dispatch_push", "push_notifications"]

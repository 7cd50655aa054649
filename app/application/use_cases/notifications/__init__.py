"""Public helpers for emitting and reading in-app notifications."""

from .events import (
    notify_message_received,
    notify_reservation_requested,
    notify_reservation_status_changed,
    persist_notification,
)
from .inbox import (
    count_unread_notifications,
    delete_notification,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from .push import PushDispatcher, dispatch_push, push_notifications

__all__ = [
    "PushDispatcher",
    "count_unread_notifications",
    "delete_notification",
    "dispatch_push",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "notify_message_received",
    "notify_reservation_requested",
    "notify_reservation_status_changed",
    "persist_notification",
    "push_notifications",
]

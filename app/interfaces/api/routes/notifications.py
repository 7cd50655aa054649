"""Endpoints for the in-app notification inbox."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.application.errors import DomainError
from app.application.use_cases.notifications import (
    count_unread_notifications,
    delete_notification,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user
from app.interfaces.api.routes_helpers import http_error
from app.interfaces.api.schemas import ApiResponse, NotificationRead, UnreadCount, ok

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/", response_model=ApiResponse[list[NotificationRead]])
def read_notifications(
    unread_only: bool = False,
    limit: int = Query(default=50, ge=1, le=200),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Return the most recent notifications for the authenticated user."""

    notifications = list_notifications(
        db, user_id=current_user.id, unread_only=unread_only, limit=limit
    )
    return ok([NotificationRead.model_validate(item) for item in notifications])


@router.get("/unread-count", response_model=ApiResponse[UnreadCount])
def unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    return ok(UnreadCount(unread=count_unread_notifications(db, user_id=current_user.id)))


@router.patch("/read-all", response_model=ApiResponse[int])
def read_all(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    updated = mark_all_notifications_read(db, user_id=current_user.id)
    return ok(updated, f"{updated} notification(s) marquée(s) comme lue(s)")


@router.patch("/{notification_id}/read", response_model=ApiResponse[NotificationRead])
def read_one(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        notification = mark_notification_read(db, notification_id, user_id=current_user.id)
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(NotificationRead.model_validate(notification))


@router.delete("/{notification_id}", response_model=ApiResponse[None])
def remove_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        delete_notification(db, notification_id, user_id=current_user.id)
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(message="Notification supprimée")


__all__ = ["router"]

"""Routes for messages exchanged between visitors and agents."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.errors import DomainError
from app.application.use_cases.messages import (
    list_received_messages,
    list_sent_messages,
    mark_message_read,
    send_message,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user
from app.interfaces.api.routes_helpers import http_error
from app.interfaces.api.schemas import ApiResponse, MessageCreate, MessageRead, ok

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post(
    "/",
    response_model=ApiResponse[MessageRead],
    status_code=status.HTTP_201_CREATED,
)
def post_message(
    payload: MessageCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        message = send_message(db, sender_id=current_user.id, **payload.model_dump())
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(MessageRead.model_validate(message), "Message envoyé")


@router.get("/received", response_model=ApiResponse[list[MessageRead]])
def inbox(
    unread_only: bool = False,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    messages = list_received_messages(db, user_id=current_user.id, unread_only=unread_only)
    return ok([MessageRead.model_validate(message) for message in messages])


@router.get("/sent", response_model=ApiResponse[list[MessageRead]])
def outbox(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    messages = list_sent_messages(db, user_id=current_user.id)
    return ok([MessageRead.model_validate(message) for message in messages])


@router.patch("/{message_id}/read", response_model=ApiResponse[MessageRead])
def read_message(
    message_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        message = mark_message_read(db, message_id, user_id=current_user.id)
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(MessageRead.model_validate(message))


__all__ = ["router"]

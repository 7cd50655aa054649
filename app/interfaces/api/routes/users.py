"""Routes for the authenticated user's account."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.errors import DomainError
from app.application.use_cases.users import register_push_token
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user
from app.interfaces.api.routes_helpers import http_error
from app.interfaces.api.schemas import ApiResponse, PushTokenUpdate, UserRead, ok

router = APIRouter(prefix="/users", tags=["users"])


def to_user_read(user: User) -> UserRead:
    read = UserRead.model_validate(user)
    read.has_push_token = bool(user.push_token)
    return read


@router.get("/me", response_model=ApiResponse[UserRead])
def read_current_user(current_user: User = Depends(get_current_active_user)):
    """Return the authenticated user."""

    return ok(to_user_read(current_user))


@router.put("/me/push-token", response_model=ApiResponse[UserRead])
def update_push_token(
    payload: PushTokenUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Register the device push token, or clear it with ``null``."""

    try:
        user = register_push_token(db, current_user.id, push_token=payload.push_token)
    except DomainError as exc:
        raise http_error(exc) from exc
    message = "Token push enregistré" if user.push_token else "Token push supprimé"
    return ok(to_user_read(user), message)


__all__ = ["router", "to_user_read"]

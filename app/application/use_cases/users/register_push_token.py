"""Use case for storing the Expo push token of a device."""

from sqlalchemy.orm import Session

from app.application.errors import ValidationError
from app.domain.entities import User
from app.infrastructure.notifications import is_valid_push_token
from app.infrastructure.repositories import UserRepository

from .get_user import get_user


def register_push_token(session: Session, user_id: int, *, push_token: str | None) -> User:
    """Store ``push_token`` for the user; ``None`` unregisters the device."""

    get_user(session, user_id)
    token = (push_token or "").strip() or None
    if token is not None and not is_valid_push_token(token):
        raise ValidationError("Format de token push invalide")
    return UserRepository(session).set_push_token(user_id, token)


__all__ = ["register_push_token"]

"""Use case for authenticating a user."""

from enum import Enum, auto

from sqlalchemy.orm import Session

from app.application.errors import ValidationError
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import verify_password

from .validators import normalize_telephone


class AuthenticationStatus(Enum):
    """Possible outcomes when attempting to authenticate a user."""

    SUCCESS = auto()
    INVALID_CREDENTIALS = auto()
    INACTIVE = auto()


def authenticate_user(session: Session, telephone: str, password: str):
    """Return the authentication result along with the user when possible."""

    try:
        phone = normalize_telephone(telephone)
    except ValidationError:
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    user = UserRepository(session).get_by_telephone(phone)
    if not user:
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    if not verify_password(password, user.password):
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    if not user.is_active:
        return user, AuthenticationStatus.INACTIVE

    return user, AuthenticationStatus.SUCCESS


__all__ = ["AuthenticationStatus", "authenticate_user"]

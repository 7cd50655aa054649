"""Use case for retrieving a single user."""

from sqlalchemy.orm import Session

from app.application.errors import NotFoundError, ValidationError
from app.domain.entities import User
from app.infrastructure.repositories import UserRepository


def get_user(session: Session, user_id: int, *, include_inactive: bool = False) -> User:
    """Return the requested user or raise an error if it does not exist."""

    user = UserRepository(session).get(user_id)
    if user is None:
        raise NotFoundError("Utilisateur non trouvé")
    if not include_inactive and not user.is_active:
        raise ValidationError("Utilisateur inactif")
    return user


__all__ = ["get_user"]

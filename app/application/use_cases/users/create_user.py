"""Use case for registering users."""

from sqlalchemy.orm import Session

from app.application.errors import ConflictError, ValidationError
from app.domain.entities import User
from app.domain.entities.user import ROLE_CLIENT
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import get_password_hash
from app.utils import now_in_app_timezone

from .validators import ensure_valid_password, ensure_valid_role, normalize_telephone


def create_user(
    session: Session,
    *,
    fullname: str,
    telephone: str,
    password: str,
    role: str = ROLE_CLIENT,
) -> User:
    """Create a new user ensuring unique phone numbers."""

    repository = UserRepository(session)
    name = (fullname or "").strip()
    if not name:
        raise ValidationError("Le nom complet est obligatoire")
    phone = normalize_telephone(telephone)
    if repository.get_by_telephone(phone):
        raise ConflictError("Ce numéro de téléphone est déjà utilisé")

    user = User(
        id=None,
        fullname=name,
        telephone=phone,
        password=get_password_hash(ensure_valid_password(password)),
        role=ensure_valid_role(role),
        is_active=True,
        push_token=None,
        created_at=now_in_app_timezone(),
    )
    return repository.create(user)


__all__ = ["create_user"]

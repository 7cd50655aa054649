"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.domain.entities import User
from app.domain.entities.user import ROLE_AGENT
from app.infrastructure.database import get_db
from app.infrastructure.notifications import ExpoPushClient
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import decode_access_token, password_signature

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)


def _credentials_error(detail: str = "Identifiants invalides") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_error() from exc

    telephone = payload.get("sub")
    signature_claim = payload.get("pwd_sig")
    if not isinstance(telephone, str) or not isinstance(signature_claim, str):
        raise _credentials_error()

    user = UserRepository(db).get_by_telephone(telephone)
    if user is None:
        raise _credentials_error("Utilisateur non trouvé")

    # Changing the password or deactivating the account revokes older tokens.
    if signature_claim != password_signature(user.password, user.is_active):
        raise _credentials_error()

    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, db)


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user is active."""

    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Utilisateur inactif",
        )
    return current_user


def get_optional_user(
    token: str | None = Depends(optional_oauth2_scheme),
    db: Session = Depends(get_db),
) -> User | None:
    """Return the caller when a valid token is sent, ``None`` for anonymous calls."""

    if not token:
        return None
    try:
        user = resolve_current_user(token, db)
    except HTTPException:
        return None
    return user if user.is_active else None


def require_agent(current_user: User = Depends(get_current_active_user)) -> User:
    """Ensure the authenticated user may publish listings."""

    if not (current_user.has_role(ROLE_AGENT) or current_user.is_admin()):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Seuls les agents peuvent publier des propriétés",
        )
    return current_user


def require_admin(current_user: User = Depends(get_current_active_user)) -> User:
    """Ensure the authenticated user has administrator privileges."""

    if not current_user.is_admin():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Non autorisé",
        )
    return current_user


def get_push_dispatcher() -> ExpoPushClient:
    """Return the client used to deliver push notifications."""

    return ExpoPushClient()


__all__ = [
    "get_current_active_user",
    "get_current_user",
    "get_optional_user",
    "get_push_dispatcher",
    "oauth2_scheme",
    "require_admin",
    "require_agent",
    "resolve_current_user",
]

"""Endpoints for account registration and token issuance."""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from app.application.errors import DomainError
from app.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    create_user,
)
from app.config import get_settings
from app.domain.entities import User
from app.domain.entities.user import ROLE_ADMIN
from app.infrastructure.database import get_db
from app.infrastructure.security import create_access_token, password_signature
from app.interfaces.api.routes_helpers import http_error
from app.interfaces.api.schemas import ApiResponse, Token, UserCreate, UserRead, ok

from .users import to_user_read

router = APIRouter(prefix="/auth", tags=["auth"])
settings = get_settings()
logger = logging.getLogger(__name__)


def issue_token(user: User) -> Token:
    """Sign an access token bound to the user's current password and state."""

    access_token = create_access_token(
        data={
            "sub": user.telephone,
            "role": user.role,
            "pwd_sig": password_signature(user.password, user.is_active),
        },
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
    )
    return Token(
        access_token=access_token,
        token_type="bearer",
        role=user.role,
        user_id=user.id,
    )


@router.post(
    "/register",
    response_model=ApiResponse[UserRead],
    status_code=status.HTTP_201_CREATED,
)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    """Create a client or agent account."""

    if payload.role.strip().lower() == ROLE_ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Impossible de créer un compte administrateur",
        )
    try:
        user = create_user(
            db,
            fullname=payload.fullname,
            telephone=payload.telephone,
            password=payload.password,
            role=payload.role,
        )
    except DomainError as exc:
        raise http_error(exc) from exc

    logger.info("Registered user %s with role %s", user.id, user.role)
    return ok(to_user_read(user), "Compte créé avec succès")


# The form field is named ``username`` by OAuth2; it carries the phone number.
@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    """Authenticate with phone number and password and return a JWT."""

    user, auth_status = authenticate_user(db, form_data.username, form_data.password)

    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Téléphone ou mot de passe incorrect",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if auth_status is AuthenticationStatus.INACTIVE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Utilisateur inactif",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return issue_token(user)


__all__ = ["issue_token", "router"]

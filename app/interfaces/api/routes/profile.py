"""Routes for the authenticated user's public profile."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.errors import DomainError
from app.application.use_cases.profile import get_profile, save_profile
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user
from app.interfaces.api.routes_helpers import http_error
from app.interfaces.api.schemas import ApiResponse, ProfileRead, ProfileUpdate, ok

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("/", response_model=ApiResponse[ProfileRead])
def read_profile(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        profile = get_profile(db, user_id=current_user.id)
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(ProfileRead.model_validate(profile))


@router.put("/", response_model=ApiResponse[ProfileRead])
def write_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        profile = save_profile(db, user_id=current_user.id, **payload.model_dump())
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(ProfileRead.model_validate(profile), "Profil enregistré")


__all__ = ["router"]

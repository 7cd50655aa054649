"""Routes for onboarding preferences."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.errors import DomainError
from app.application.use_cases.preferences import (
    delete_preferences,
    get_preferences,
    has_completed_onboarding,
    save_preferences,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user
from app.interfaces.api.routes_helpers import http_error
from app.interfaces.api.schemas import (
    ApiResponse,
    OnboardingStatus,
    PreferencesRead,
    PreferencesUpdate,
    ok,
)

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("/", response_model=ApiResponse[PreferencesRead])
def read_preferences(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        preferences = get_preferences(db, user_id=current_user.id)
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(PreferencesRead.model_validate(preferences))


@router.put("/", response_model=ApiResponse[PreferencesRead])
def write_preferences(
    payload: PreferencesUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Create or replace the user's preferences."""

    try:
        preferences = save_preferences(db, user_id=current_user.id, **payload.model_dump())
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(PreferencesRead.model_validate(preferences), "Préférences enregistrées")


@router.delete("/", response_model=ApiResponse[None])
def remove_preferences(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        delete_preferences(db, user_id=current_user.id)
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(message="Préférences supprimées")


@router.get("/onboarding", response_model=ApiResponse[OnboardingStatus])
def onboarding_status(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    return ok(OnboardingStatus(completed=has_completed_onboarding(db, user_id=current_user.id)))


__all__ = ["router"]

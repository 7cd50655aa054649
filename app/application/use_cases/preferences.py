"""Use cases for the onboarding preferences of a user."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from app.application.errors import NotFoundError, ValidationError
from app.domain.entities import UserPreferences
from app.domain.entities.listing import PROPERTY_TYPES
from app.domain.entities.preference import PROJECTS
from app.infrastructure.repositories import PreferenceRepository, UserRepository

MAX_PREFERENCE_ITEMS = 20


def _clean_list(values: Iterable[str] | None, label: str) -> list[str]:
    cleaned: list[str] = []
    for value in values or ():
        item = str(value).strip()
        if item and item not in cleaned:
            cleaned.append(item)
    if len(cleaned) > MAX_PREFERENCE_ITEMS:
        raise ValidationError(f"Trop de {label} (maximum {MAX_PREFERENCE_ITEMS})")
    return cleaned


def save_preferences(
    session: Session,
    *,
    user_id: int,
    project: str | None = None,
    budget_max: float | None = None,
    cities: Iterable[str] | None = None,
    property_types: Iterable[str] | None = None,
    districts: Iterable[str] | None = None,
) -> UserPreferences:
    """Create or replace the preferences of ``user_id``."""

    if not UserRepository(session).exists(user_id):
        raise NotFoundError("Utilisateur non trouvé")
    if project is not None and project not in PROJECTS:
        raise ValidationError(f"Projet inconnu: {project}")
    if budget_max is not None and budget_max < 0:
        raise ValidationError("Le budget ne peut pas être négatif")
    types = _clean_list(property_types, "types de bien")
    unknown = [value for value in types if value not in PROPERTY_TYPES]
    if unknown:
        raise ValidationError(f"Type de bien inconnu: {', '.join(unknown)}")

    return PreferenceRepository(session).upsert(
        UserPreferences(
            id=None,
            user_id=user_id,
            project=project,
            budget_max=budget_max,
            cities=_clean_list(cities, "villes"),
            property_types=types,
            districts=_clean_list(districts, "quartiers"),
        )
    )


def get_preferences(session: Session, *, user_id: int) -> UserPreferences:
    preferences = PreferenceRepository(session).get_by_user(user_id)
    if preferences is None:
        raise NotFoundError("Préférences non trouvées")
    return preferences


def delete_preferences(session: Session, *, user_id: int) -> None:
    if not PreferenceRepository(session).delete(user_id):
        raise NotFoundError("Préférences non trouvées")


def has_completed_onboarding(session: Session, *, user_id: int) -> bool:
    preferences = PreferenceRepository(session).get_by_user(user_id)
    return preferences is not None and preferences.project is not None


__all__ = [
    "delete_preferences",
    "get_preferences",
    "has_completed_onboarding",
    "save_preferences",
]

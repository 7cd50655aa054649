"""Persistence helpers for user ranking preferences."""

from __future__ import annotations

from app.domain.entities import UserPreferences
from app.infrastructure.models import UserPreferenceModel
from app.utils import ensure_app_timezone

from .base import SessionRepository, to_float


class PreferenceRepository(SessionRepository):
    """Read, upsert and delete :class:`UserPreferences` rows."""

    def get_by_user(self, user_id: int) -> UserPreferences | None:
        model = self._get_model(user_id)
        return self._to_entity(model) if model else None

    def upsert(self, preferences: UserPreferences) -> UserPreferences:
        model = self._get_model(preferences.user_id) or UserPreferenceModel(
            user_id=preferences.user_id
        )
        model.project = preferences.project
        model.budget_max = preferences.budget_max
        model.cities = list(preferences.cities)
        model.property_types = list(preferences.property_types)
        model.districts = list(preferences.districts)
        self._save(model)
        return self._to_entity(model)

    def delete(self, user_id: int) -> bool:
        model = self._get_model(user_id)
        if model is None:
            return False
        self.session.delete(model)
        self._finish()
        return True

    def _get_model(self, user_id: int) -> UserPreferenceModel | None:
        return (
            self.session.query(UserPreferenceModel)
            .filter(UserPreferenceModel.user_id == user_id)
            .first()
        )

    @staticmethod
    def _to_entity(model: UserPreferenceModel) -> UserPreferences:
        return UserPreferences(
            id=model.id,
            user_id=model.user_id,
            project=model.project,
            budget_max=to_float(model.budget_max),
            cities=list(model.cities or []),
            property_types=list(model.property_types or []),
            districts=list(model.districts or []),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["PreferenceRepository"]

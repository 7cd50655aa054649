"""Persistence helpers for user profiles."""

from __future__ import annotations

from app.domain.entities import Profile
from app.infrastructure.models import ProfileModel
from app.utils import ensure_app_timezone

from .base import SessionRepository


class ProfileRepository(SessionRepository):
    """Read and upsert :class:`Profile` rows."""

    def get_by_user(self, user_id: int) -> Profile | None:
        model = self._get_model(user_id)
        return self._to_entity(model) if model else None

    def email_taken(self, email: str, *, exclude_user_id: int | None = None) -> bool:
        query = self.session.query(ProfileModel.id).filter(ProfileModel.email == email)
        if exclude_user_id is not None:
            query = query.filter(ProfileModel.user_id != exclude_user_id)
        return query.first() is not None

    def upsert(self, profile: Profile) -> Profile:
        model = self._get_model(profile.user_id) or ProfileModel(user_id=profile.user_id)
        model.email = profile.email
        model.address = profile.address
        model.city = profile.city
        model.country = profile.country or "CI"
        model.bio = profile.bio
        model.avatar = profile.avatar
        self._save(model)
        return self._to_entity(model)

    def _get_model(self, user_id: int) -> ProfileModel | None:
        return (
            self.session.query(ProfileModel)
            .filter(ProfileModel.user_id == user_id)
            .first()
        )

    @staticmethod
    def _to_entity(model: ProfileModel) -> Profile:
        return Profile(
            id=model.id,
            user_id=model.user_id,
            email=model.email,
            address=model.address,
            city=model.city,
            country=model.country,
            bio=model.bio,
            avatar=model.avatar,
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["ProfileRepository"]

"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from app.domain.entities import User
from app.infrastructure.models import UserModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone

from .base import SessionRepository


class UserRepository(SessionRepository):
    """Provide CRUD operations for user entities."""

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_telephone(self, telephone: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(UserModel.telephone == telephone)
            .first()
        )
        return self._to_entity(model) if model else None

    def exists(self, user_id: int) -> bool:
        return (
            self.session.query(UserModel.id).filter(UserModel.id == user_id).first()
            is not None
        )

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        if user.created_at is not None:
            model.created_at = ensure_app_naive_datetime(user.created_at)
        self._save(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id)
        if model is None:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        self._save(model)
        return self._to_entity(model)

    def set_push_token(self, user_id: int, push_token: str | None) -> User:
        model = self.session.get(UserModel, user_id)
        if model is None:
            msg = f"User with id {user_id} not found"
            raise ValueError(msg)
        model.push_token = push_token
        self._save(model)
        return self._to_entity(model)

    def get_map_by_ids(self, user_ids: Sequence[int]) -> dict[int, User]:
        if not user_ids:
            return {}
        unique_ids = {int(user_id) for user_id in user_ids}
        query = self.session.query(UserModel).filter(UserModel.id.in_(unique_ids))
        return {model.id: self._to_entity(model) for model in query.all()}

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.fullname = user.fullname
        model.telephone = user.telephone
        model.password = user.password
        model.role = user.role
        model.is_active = user.is_active
        model.push_token = user.push_token

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            fullname=model.fullname,
            telephone=model.telephone,
            password=model.password,
            role=model.role,
            is_active=model.is_active,
            push_token=model.push_token,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["UserRepository"]

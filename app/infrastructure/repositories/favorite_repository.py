"""Persistence helpers for favorite listings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from app.domain.entities import Favorite, Listing
from app.infrastructure.models import FavoriteModel
from app.utils import ensure_app_timezone

from .base import SessionRepository
from .listing_repository import ListingRepository


class FavoriteRepository(SessionRepository):
    """Store which listings each user bookmarked."""

    def get(self, user_id: int, listing_id: int) -> Favorite | None:
        model = self._get_model(user_id, listing_id)
        return self._to_entity(model) if model else None

    def add(self, user_id: int, listing_id: int) -> Favorite:
        model = FavoriteModel(user_id=user_id, listing_id=listing_id)
        self._save(model)
        return self._to_entity(model)

    def remove(self, user_id: int, listing_id: int) -> bool:
        model = self._get_model(user_id, listing_id)
        if model is None:
            return False
        self.session.delete(model)
        self._finish()
        return True

    def list_for_user(
        self, user_id: int, *, limit: int = 50, offset: int = 0
    ) -> Sequence[tuple[Favorite, Listing]]:
        query = (
            self.session.query(FavoriteModel)
            .filter(FavoriteModel.user_id == user_id)
            .order_by(FavoriteModel.added_at.desc(), FavoriteModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return [
            (self._to_entity(model), ListingRepository._to_entity(model.listing))
            for model in query.all()
        ]

    def count_for_user(self, user_id: int) -> int:
        return (
            self.session.query(FavoriteModel)
            .filter(FavoriteModel.user_id == user_id)
            .count()
        )

    def clear(self, user_id: int) -> int:
        deleted = (
            self.session.query(FavoriteModel)
            .filter(FavoriteModel.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self._finish()
        return int(deleted or 0)

    def favorite_listing_ids(self, user_id: int, listing_ids: Iterable[int]) -> set[int]:
        ids = {int(listing_id) for listing_id in listing_ids}
        if not ids:
            return set()
        query = self.session.query(FavoriteModel.listing_id).filter(
            FavoriteModel.user_id == user_id,
            FavoriteModel.listing_id.in_(ids),
        )
        return {listing_id for (listing_id,) in query.all()}

    def _get_model(self, user_id: int, listing_id: int) -> FavoriteModel | None:
        return (
            self.session.query(FavoriteModel)
            .filter(
                FavoriteModel.user_id == user_id,
                FavoriteModel.listing_id == listing_id,
            )
            .first()
        )

    @staticmethod
    def _to_entity(model: FavoriteModel) -> Favorite:
        return Favorite(
            id=model.id,
            user_id=model.user_id,
            listing_id=model.listing_id,
            added_at=ensure_app_timezone(model.added_at),
        )


__all__ = ["FavoriteRepository"]

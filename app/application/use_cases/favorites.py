"""Use cases for bookmarking listings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.application.errors import ConflictError, NotFoundError
from app.domain.entities import Favorite, Listing
from app.infrastructure.repositories import (
    FavoriteRepository,
    ListingRepository,
    UserRepository,
)


def add_favorite(session: Session, *, user_id: int, listing_id: int) -> Favorite:
    if not UserRepository(session).exists(user_id):
        raise NotFoundError("Utilisateur non trouvé")
    if ListingRepository(session).get(listing_id) is None:
        raise NotFoundError("Propriété non trouvée")

    repository = FavoriteRepository(session)
    if repository.get(user_id, listing_id) is not None:
        raise ConflictError("Cette propriété est déjà dans vos favoris")
    try:
        return repository.add(user_id, listing_id)
    except IntegrityError as exc:
        session.rollback()
        raise ConflictError("Cette propriété est déjà dans vos favoris") from exc


def remove_favorite(session: Session, *, user_id: int, listing_id: int) -> None:
    if not FavoriteRepository(session).remove(user_id, listing_id):
        raise NotFoundError("Favori non trouvé")


def toggle_favorite(session: Session, *, user_id: int, listing_id: int) -> bool:
    """Add or remove the bookmark and return whether it is now set."""

    if FavoriteRepository(session).get(user_id, listing_id) is not None:
        remove_favorite(session, user_id=user_id, listing_id=listing_id)
        return False
    add_favorite(session, user_id=user_id, listing_id=listing_id)
    return True


def is_favorite(session: Session, *, user_id: int, listing_id: int) -> bool:
    return FavoriteRepository(session).get(user_id, listing_id) is not None


def list_favorites(
    session: Session, *, user_id: int, limit: int = 50, offset: int = 0
) -> Sequence[tuple[Favorite, Listing]]:
    return FavoriteRepository(session).list_for_user(user_id, limit=limit, offset=offset)


def count_favorites(session: Session, *, user_id: int) -> int:
    return FavoriteRepository(session).count_for_user(user_id)


def clear_favorites(session: Session, *, user_id: int) -> int:
    return FavoriteRepository(session).clear(user_id)


def check_favorites(
    session: Session, *, user_id: int, listing_ids: Iterable[int]
) -> dict[int, bool]:
    """Return a ``listing_id -> is favorite`` map for every requested id."""

    ids = [int(listing_id) for listing_id in listing_ids]
    favorites = FavoriteRepository(session).favorite_listing_ids(user_id, ids)
    return {listing_id: listing_id in favorites for listing_id in ids}


__all__ = [
    "add_favorite",
    "check_favorites",
    "clear_favorites",
    "count_favorites",
    "is_favorite",
    "list_favorites",
    "remove_favorite",
    "toggle_favorite",
]

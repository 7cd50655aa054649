"""Routes for the authenticated user's favorite listings."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.errors import DomainError
from app.application.use_cases.favorites import (
    add_favorite,
    check_favorites,
    clear_favorites,
    count_favorites,
    is_favorite,
    list_favorites,
    remove_favorite,
    toggle_favorite,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user
from app.interfaces.api.routes_helpers import http_error
from app.interfaces.api.schemas import (
    ApiResponse,
    FavoriteCheckRequest,
    FavoriteCreate,
    FavoriteRead,
    FavoriteToggleRead,
    FavoriteWithListingRead,
    ListingRead,
    ok,
)

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("/", response_model=ApiResponse[list[FavoriteWithListingRead]])
def read_favorites(
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    pairs = list_favorites(db, user_id=current_user.id, limit=limit, offset=offset)
    return ok(
        [
            FavoriteWithListingRead(
                **FavoriteRead.model_validate(favorite).model_dump(),
                listing=ListingRead.model_validate(listing),
            )
            for favorite, listing in pairs
        ]
    )


@router.get("/count", response_model=ApiResponse[int])
def favorites_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    return ok(count_favorites(db, user_id=current_user.id))


@router.post(
    "/",
    response_model=ApiResponse[FavoriteRead],
    status_code=status.HTTP_201_CREATED,
)
def create_favorite(
    payload: FavoriteCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        favorite = add_favorite(db, user_id=current_user.id, listing_id=payload.listing_id)
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(FavoriteRead.model_validate(favorite), "Ajouté aux favoris")


@router.post("/check", response_model=ApiResponse[dict[int, bool]])
def check_many(
    payload: FavoriteCheckRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Tell, for each listing id, whether it is among the user's favorites."""

    return ok(check_favorites(db, user_id=current_user.id, listing_ids=payload.listing_ids))


@router.delete("/", response_model=ApiResponse[int])
def clear_all(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    removed = clear_favorites(db, user_id=current_user.id)
    return ok(removed, f"{removed} favori(s) supprimé(s)")


@router.get("/{listing_id}", response_model=ApiResponse[FavoriteToggleRead])
def favorite_status(
    listing_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    return ok(
        FavoriteToggleRead(
            listing_id=listing_id,
            is_favorite=is_favorite(db, user_id=current_user.id, listing_id=listing_id),
        )
    )


@router.post("/{listing_id}/toggle", response_model=ApiResponse[FavoriteToggleRead])
def toggle(
    listing_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        added = toggle_favorite(db, user_id=current_user.id, listing_id=listing_id)
    except DomainError as exc:
        raise http_error(exc) from exc
    message = "Ajouté aux favoris" if added else "Retiré des favoris"
    return ok(FavoriteToggleRead(listing_id=listing_id, is_favorite=added), message)


@router.delete("/{listing_id}", response_model=ApiResponse[None])
def delete_favorite(
    listing_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        remove_favorite(db, user_id=current_user.id, listing_id=listing_id)
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(message="Retiré des favoris")


__all__ = ["router"]

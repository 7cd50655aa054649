"""Favorite schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .listing import ListingRead


class FavoriteCreate(BaseModel):
    listing_id: int = Field(..., ge=1)


class FavoriteRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    listing_id: int
    added_at: datetime | None


class FavoriteWithListingRead(FavoriteRead):
    listing: ListingRead


class FavoriteToggleRead(BaseModel):
    listing_id: int
    is_favorite: bool


class FavoriteCheckRequest(BaseModel):
    listing_ids: list[int] = Field(..., min_length=1, max_length=200)


__all__ = [
    "FavoriteCheckRequest",
    "FavoriteCreate",
    "FavoriteRead",
    "FavoriteToggleRead",
    "FavoriteWithListingRead",
]

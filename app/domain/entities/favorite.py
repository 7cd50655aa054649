"""Domain entity representing a bookmarked listing."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Favorite:
    """A listing saved by a user."""

    id: int | None
    user_id: int
    listing_id: int
    added_at: datetime | None


__all__ = ["Favorite"]

"""Domain entity representing the public profile of a user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Profile:
    """Contact and presentation details attached to a user."""

    id: int | None
    user_id: int
    email: str | None
    address: str | None
    city: str | None
    country: str
    bio: str | None
    avatar: str | None
    updated_at: datetime | None


__all__ = ["Profile"]

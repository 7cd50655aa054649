"""Domain entity describing the ranking preferences of a user."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .listing import TRANSACTION_RENT, TRANSACTION_SALE

PROJECT_BUY = "acheter"
PROJECT_RENT = "louer"
PROJECT_VISIT = "visiter"
PROJECTS = (PROJECT_BUY, PROJECT_RENT, PROJECT_VISIT)

PROJECT_TRANSACTION_TYPES: dict[str, str] = {
    PROJECT_BUY: TRANSACTION_SALE,
    PROJECT_RENT: TRANSACTION_RENT,
    PROJECT_VISIT: TRANSACTION_RENT,
}


@dataclass
class UserPreferences:
    """Preferences used to personalize listing order, never to filter search."""

    id: int | None
    user_id: int
    project: str | None = None
    budget_max: float | None = None
    cities: list[str] = field(default_factory=list)
    property_types: list[str] = field(default_factory=list)
    districts: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_project(self) -> bool:
        return self.project in PROJECTS


__all__ = [
    "UserPreferences",
    "PROJECT_BUY",
    "PROJECT_RENT",
    "PROJECT_VISIT",
    "PROJECTS",
    "PROJECT_TRANSACTION_TYPES",
]

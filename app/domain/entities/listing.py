"""Domain entities describing property listings."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

TRANSACTION_RENT = "location"
TRANSACTION_SALE = "vente"
TRANSACTION_TYPES = (TRANSACTION_RENT, TRANSACTION_SALE)

PROPERTY_TYPES = (
    "appartement",
    "maison",
    "villa",
    "studio",
    "terrain",
    "bureau",
    "residence",
    "hotel",
    "entrepot",
    "magasin",
    "restaurant",
    "immeuble",
    "colocation",
    "chambre",
    "garage",
    "ferme",
    "hangar",
    "loft",
    "complexe",
)

BILLING_PERIODS = ("jour", "semaine", "mois", "an", "saison")
DEFAULT_BILLING_PERIOD = "mois"

LISTING_STATUS_AVAILABLE = "disponible"
LISTING_STATUS_SOLD = "vendu"
LISTING_STATUS_RENTED = "loue"
LISTING_STATUS_NEGOTIATING = "en_negociation"
LISTING_STATUS_RESERVED = "reserve"
LISTING_STATUSES = (
    LISTING_STATUS_AVAILABLE,
    LISTING_STATUS_SOLD,
    LISTING_STATUS_RENTED,
    LISTING_STATUS_NEGOTIATING,
    LISTING_STATUS_RESERVED,
)

MEDIA_TYPES = ("image", "video", "plan", "document")

ATTRIBUTE_SURFACE = "superficie"
ATTRIBUTE_BEDROOMS = "chambres"
ATTRIBUTE_BATHROOMS = "salles_bain"

RENT_DEPOSIT_MULTIPLIER = 3


@dataclass
class ListingAttribute:
    """Named characteristic of a listing stored as raw text."""

    name: str
    value: str

    def numeric_value(self) -> float | None:
        """Return the value as a number or ``None`` when it is not numeric."""

        try:
            return float(str(self.value).strip().replace(",", "."))
        except (TypeError, ValueError):
            return None


@dataclass
class ListingMedia:
    """Picture, video or document attached to a listing."""

    id: int | None
    listing_id: int | None
    url: str
    media_type: str = "image"
    is_main: bool = False
    display_order: int = 0


@dataclass
class Listing:
    """A property offered for rent or sale."""

    id: int | None
    owner_id: int
    title: str
    property_type: str
    transaction_type: str
    price: float
    city: str
    district: str
    status: str = LISTING_STATUS_AVAILABLE
    slug: str | None = None
    description: str | None = None
    billing_period: str | None = DEFAULT_BILLING_PERIOD
    deposit: float = 0
    charges_included: bool = False
    min_stay: int = 1
    country: str = "CI"
    longitude: float | None = None
    latitude: float | None = None
    visit_fee: float = 0
    view_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    attributes: list[ListingAttribute] = field(default_factory=list)
    media: list[ListingMedia] = field(default_factory=list)

    def is_rental(self) -> bool:
        return self.transaction_type == TRANSACTION_RENT

    def attribute_value(self, name: str) -> float | None:
        """Return the numeric value of attribute ``name`` if present."""

        for attribute in self.attributes:
            if attribute.name == name:
                return attribute.numeric_value()
        return None

    def main_media(self) -> ListingMedia | None:
        for media in self.media:
            if media.is_main:
                return media
        return self.media[0] if self.media else None


__all__ = [
    "Listing",
    "ListingAttribute",
    "ListingMedia",
    "TRANSACTION_RENT",
    "TRANSACTION_SALE",
    "TRANSACTION_TYPES",
    "PROPERTY_TYPES",
    "BILLING_PERIODS",
    "DEFAULT_BILLING_PERIOD",
    "LISTING_STATUS_AVAILABLE",
    "LISTING_STATUS_SOLD",
    "LISTING_STATUS_RENTED",
    "LISTING_STATUS_NEGOTIATING",
    "LISTING_STATUS_RESERVED",
    "LISTING_STATUSES",
    "MEDIA_TYPES",
    "ATTRIBUTE_SURFACE",
    "ATTRIBUTE_BEDROOMS",
    "ATTRIBUTE_BATHROOMS",
    "RENT_DEPOSIT_MULTIPLIER",
]

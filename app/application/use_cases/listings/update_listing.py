"""Use cases for modifying and removing listings."""

from typing import Any

from sqlalchemy.orm import Session

from app.application.errors import NotFoundError, ValidationError
from app.domain.entities import Listing, ListingMedia
from app.infrastructure.repositories import ListingRepository

from .get_listing import get_listing
from .validators import (
    billing_terms,
    build_attributes,
    require_text,
    validate_media_type,
    validate_price,
    validate_property_type,
    validate_status,
    validate_transaction_type,
)

_UPDATABLE_FIELDS = {
    "title",
    "description",
    "property_type",
    "transaction_type",
    "price",
    "billing_period",
    "charges_included",
    "min_stay",
    "city",
    "district",
    "country",
    "longitude",
    "latitude",
    "visit_fee",
    "attributes",
}


def _get_owned_listing(session: Session, listing_id: int, owner_id: int | None) -> Listing:
    listing = get_listing(session, listing_id)
    if owner_id is not None and listing.owner_id != owner_id:
        raise NotFoundError("Propriété non trouvée")
    return listing


def update_listing(
    session: Session,
    listing_id: int,
    *,
    changes: dict[str, Any],
    owner_id: int | None = None,
) -> Listing:
    """Apply ``changes``; billing period and deposit follow price and transaction type."""

    unknown = set(changes) - _UPDATABLE_FIELDS
    if unknown:
        raise ValidationError(f"Champs non modifiables: {', '.join(sorted(unknown))}")
    listing = _get_owned_listing(session, listing_id, owner_id)

    if "title" in changes:
        listing.title = require_text(changes["title"], "titre", max_length=100)
    if "description" in changes:
        listing.description = (changes["description"] or "").strip() or None
    if "property_type" in changes:
        listing.property_type = validate_property_type(changes["property_type"])
    if "transaction_type" in changes:
        listing.transaction_type = validate_transaction_type(changes["transaction_type"])
    if "price" in changes:
        listing.price = validate_price(changes["price"])
    if "city" in changes:
        listing.city = require_text(changes["city"], "ville")
    if "district" in changes:
        listing.district = require_text(changes["district"], "quartier")
    for name in ("charges_included", "min_stay", "country", "longitude", "latitude", "visit_fee"):
        if name in changes and changes[name] is not None:
            setattr(listing, name, changes[name])
    if "attributes" in changes:
        listing.attributes = build_attributes(changes["attributes"])

    period = changes.get("billing_period", listing.billing_period)
    listing.billing_period, listing.deposit = billing_terms(
        listing.transaction_type, listing.price, period
    )
    return ListingRepository(session).update(listing)


def update_listing_status(
    session: Session, listing_id: int, *, status: str, owner_id: int | None = None
) -> Listing:
    _get_owned_listing(session, listing_id, owner_id)
    return ListingRepository(session).update_status(listing_id, validate_status(status))


def delete_listing(session: Session, listing_id: int, *, owner_id: int | None = None) -> None:
    _get_owned_listing(session, listing_id, owner_id)
    ListingRepository(session).delete(listing_id)


def add_listing_media(
    session: Session,
    listing_id: int,
    *,
    url: str,
    media_type: str = "image",
    is_main: bool = False,
    owner_id: int | None = None,
) -> ListingMedia:
    listing = _get_owned_listing(session, listing_id, owner_id)
    media = ListingMedia(
        id=None,
        listing_id=listing_id,
        url=require_text(url, "url", max_length=500),
        media_type=validate_media_type(media_type),
        is_main=is_main or not listing.media,
        display_order=len(listing.media),
    )
    return ListingRepository(session).add_media(listing_id, media)


__all__ = [
    "add_listing_media",
    "delete_listing",
    "update_listing",
    "update_listing_status",
]

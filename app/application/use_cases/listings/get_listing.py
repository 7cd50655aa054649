"""Use cases for reading listings."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.application.errors import NotFoundError
from app.domain.entities import Listing
from app.infrastructure.repositories import ListingRepository


def get_listing(session: Session, listing_id: int) -> Listing:
    listing = ListingRepository(session).get(listing_id)
    if listing is None:
        raise NotFoundError("Propriété non trouvée")
    return listing


def get_listing_by_slug(session: Session, slug: str) -> Listing:
    listing = ListingRepository(session).get_by_slug(slug)
    if listing is None:
        raise NotFoundError("Propriété non trouvée")
    return listing


def list_owner_listings(session: Session, *, owner_id: int) -> Sequence[Listing]:
    return ListingRepository(session).list_by_owner(owner_id)


__all__ = ["get_listing", "get_listing_by_slug", "list_owner_listings"]

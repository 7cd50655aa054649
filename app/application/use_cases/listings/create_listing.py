"""Use case for publishing a new listing."""

from collections.abc import Mapping, Sequence

from sqlalchemy.orm import Session

from app.application.errors import NotFoundError
from app.domain.entities import Listing, ListingMedia
from app.domain.entities.listing import LISTING_STATUS_AVAILABLE
from app.infrastructure.database import transaction
from app.infrastructure.repositories import ListingRepository, UserRepository
from app.utils import now_in_app_timezone, slugify

from .validators import (
    billing_terms,
    build_attributes,
    require_text,
    validate_media_type,
    validate_price,
    validate_property_type,
    validate_transaction_type,
)


def unique_slug(repository: ListingRepository, title: str) -> str:
    """Slug derived from ``title``, suffixed with a counter when taken."""

    base = slugify(title)
    candidate = base
    counter = 1
    while repository.slug_exists(candidate):
        candidate = f"{base}-{counter}"
        counter += 1
    return candidate


def create_listing(
    session: Session,
    *,
    owner_id: int,
    title: str,
    property_type: str,
    transaction_type: str,
    price: float,
    city: str,
    district: str,
    description: str | None = None,
    billing_period: str | None = None,
    charges_included: bool = False,
    min_stay: int = 1,
    country: str = "CI",
    longitude: float | None = None,
    latitude: float | None = None,
    visit_fee: float = 0,
    attributes: Mapping[str, object] | None = None,
    media: Sequence[ListingMedia] = (),
) -> Listing:
    """Store a listing with its attributes and media as a single unit."""

    if not UserRepository(session).exists(owner_id):
        raise NotFoundError("Utilisateur non trouvé")

    transaction_type = validate_transaction_type(transaction_type)
    price = validate_price(price)
    period, deposit = billing_terms(transaction_type, price, billing_period)
    for item in media:
        validate_media_type(item.media_type)

    repository = ListingRepository(session, autocommit=False)
    title = require_text(title, "titre", max_length=100)
    now = now_in_app_timezone()
    entity = Listing(
        id=None,
        owner_id=owner_id,
        title=title,
        slug=None,
        description=(description or "").strip() or None,
        property_type=validate_property_type(property_type),
        transaction_type=transaction_type,
        price=price,
        billing_period=period,
        deposit=deposit,
        charges_included=charges_included,
        min_stay=max(int(min_stay or 1), 1),
        city=require_text(city, "ville"),
        district=require_text(district, "quartier"),
        country=country or "CI",
        longitude=longitude,
        latitude=latitude,
        visit_fee=max(visit_fee or 0, 0),
        status=LISTING_STATUS_AVAILABLE,
        created_at=now,
        updated_at=now,
        attributes=build_attributes(attributes),
        media=list(media),
    )
    if entity.media and not any(item.is_main for item in entity.media):
        entity.media[0].is_main = True

    with transaction(session):
        entity.slug = unique_slug(repository, title)
        created = repository.create(entity)
    return created


__all__ = ["create_listing", "unique_slug"]

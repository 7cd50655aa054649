"""Routes for browsing, publishing and managing listings."""

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from app.application.errors import DomainError
from app.application.use_cases.listings import (
    ListingSearchCriteria,
    RankedListing,
    add_listing_media,
    create_listing,
    delete_listing,
    get_home_feed,
    get_listing,
    get_listing_by_slug,
    list_owner_listings,
    record_view,
    search_listings,
    update_listing,
    update_listing_status,
)
from app.domain.entities import ListingMedia, User
from app.domain.entities.listing import (
    BILLING_PERIODS,
    LISTING_STATUSES,
    PROPERTY_TYPES,
    TRANSACTION_TYPES,
)
from app.infrastructure.database import get_db
from app.infrastructure.repositories.listing_repository import ORDER_RECENT
from app.interfaces.api.dependencies import (
    get_optional_user,
    require_agent,
)
from app.interfaces.api.routes_helpers import http_error
from app.interfaces.api.schemas import (
    ApiResponse,
    HomeFeedRead,
    ListingCreate,
    ListingMediaCreate,
    ListingMediaRead,
    ListingRead,
    ListingStatusUpdate,
    ListingUpdate,
    RankedListingRead,
    SearchResultRead,
    ViewRecorded,
    VocabularyRead,
    ok,
)

router = APIRouter(prefix="/listings", tags=["listings"])


def _ranked_read(item: RankedListing) -> RankedListingRead:
    read = RankedListingRead.model_validate(item.listing)
    read.score = item.score
    read.relevance = item.relevance
    return read


def _owner_scope(user: User) -> int | None:
    """Administrators may act on any listing; others only on their own."""

    return None if user.is_admin() else user.id


@router.get("/search", response_model=ApiResponse[SearchResultRead])
def search(
    transaction_type: str | None = None,
    property_type: str | None = None,
    city: str | None = None,
    district: str | None = None,
    price_min: float | None = Query(default=None, ge=0),
    price_max: float | None = Query(default=None, ge=0),
    status_filter: list[str] | None = Query(default=None, alias="status"),
    sort: str = ORDER_RECENT,
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
):
    """Filter listings; signed-in users get them ordered by their preferences."""

    criteria = ListingSearchCriteria(
        transaction_type=transaction_type,
        property_type=property_type,
        city=city,
        district=district,
        price_min=price_min,
        price_max=price_max,
        sort=sort,
    )
    if status_filter:
        criteria.statuses = tuple(status_filter)
    try:
        result = search_listings(
            db,
            criteria,
            user_id=current_user.id if current_user else None,
            limit=limit,
            offset=offset,
        )
    except DomainError as exc:
        raise http_error(exc) from exc

    items = [_ranked_read(item) for item in result.items]
    return ok(
        SearchResultRead(
            items=items,
            count=len(items),
            personalized=result.personalized,
            relevance=result.relevance,
            criteria_used=result.criteria_used,
            limit=limit,
            offset=offset,
        )
    )


@router.get("/home", response_model=ApiResponse[HomeFeedRead])
def home_feed(
    limit: int | None = Query(default=None, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
):
    """Listings for the home screen, personalized when possible."""

    feed = get_home_feed(
        db, user_id=current_user.id if current_user else None, limit=limit
    )
    items = [_ranked_read(item) for item in feed.items]
    return ok(
        HomeFeedRead(
            items=items,
            count=len(items),
            content_type=feed.content_type,
            fallback_used=feed.fallback_used,
            fallback_reason=feed.fallback_reason,
        )
    )


@router.get("/vocabulary", response_model=ApiResponse[VocabularyRead])
def vocabulary():
    """Accepted values for the enumerated listing fields."""

    return ok(
        VocabularyRead(
            property_types=list(PROPERTY_TYPES),
            transaction_types=list(TRANSACTION_TYPES),
            billing_periods=list(BILLING_PERIODS),
            statuses=list(LISTING_STATUSES),
        )
    )


@router.get("/mine", response_model=ApiResponse[list[ListingRead]])
def my_listings(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_agent),
):
    """Listings published by the authenticated agent."""

    listings = list_owner_listings(db, owner_id=current_user.id)
    return ok([ListingRead.model_validate(listing) for listing in listings])


@router.get("/slug/{slug}", response_model=ApiResponse[ListingRead])
def read_listing_by_slug(slug: str, db: Session = Depends(get_db)):
    try:
        listing = get_listing_by_slug(db, slug)
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(ListingRead.model_validate(listing))


@router.post(
    "/",
    response_model=ApiResponse[ListingRead],
    status_code=status.HTTP_201_CREATED,
)
def publish_listing(
    payload: ListingCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_agent),
):
    """Publish a listing with its characteristics and media."""

    data = payload.model_dump(exclude={"media"})
    media = [
        ListingMedia(
            id=None,
            listing_id=None,
            url=item.url,
            media_type=item.media_type,
            is_main=item.is_main,
            display_order=position,
        )
        for position, item in enumerate(payload.media)
    ]
    try:
        listing = create_listing(db, owner_id=current_user.id, media=media, **data)
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(ListingRead.model_validate(listing), "Propriété créée avec succès")


@router.get("/{listing_id}", response_model=ApiResponse[ListingRead])
def read_listing(listing_id: int, db: Session = Depends(get_db)):
    try:
        listing = get_listing(db, listing_id)
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(ListingRead.model_validate(listing))


@router.put("/{listing_id}", response_model=ApiResponse[ListingRead])
def edit_listing(
    listing_id: int,
    payload: ListingUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_agent),
):
    try:
        listing = update_listing(
            db,
            listing_id,
            changes=payload.model_dump(exclude_unset=True),
            owner_id=_owner_scope(current_user),
        )
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(ListingRead.model_validate(listing), "Propriété mise à jour")


@router.patch("/{listing_id}/status", response_model=ApiResponse[ListingRead])
def change_listing_status(
    listing_id: int,
    payload: ListingStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_agent),
):
    try:
        listing = update_listing_status(
            db, listing_id, status=payload.status, owner_id=_owner_scope(current_user)
        )
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(ListingRead.model_validate(listing), "Statut mis à jour")


@router.delete("/{listing_id}", response_model=ApiResponse[None])
def remove_listing(
    listing_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_agent),
):
    try:
        delete_listing(db, listing_id, owner_id=_owner_scope(current_user))
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(message="Propriété supprimée")


@router.post(
    "/{listing_id}/media",
    response_model=ApiResponse[ListingMediaRead],
    status_code=status.HTTP_201_CREATED,
)
def attach_media(
    listing_id: int,
    payload: ListingMediaCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_agent),
):
    try:
        media = add_listing_media(
            db,
            listing_id,
            url=payload.url,
            media_type=payload.media_type,
            is_main=payload.is_main,
            owner_id=_owner_scope(current_user),
        )
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(ListingMediaRead.model_validate(media))


@router.post("/{listing_id}/views", response_model=ApiResponse[ViewRecorded])
def count_view(
    listing_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
):
    """Count a visit to the listing page, ignoring recent repeats."""

    try:
        outcome = record_view(
            db,
            listing_id,
            user_id=current_user.id if current_user else None,
            ip_address=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent"),
        )
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(ViewRecorded(counted=outcome.counted, view_count=outcome.view_count))


__all__ = ["router"]

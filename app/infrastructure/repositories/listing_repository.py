"""Persistence helpers for listings, their attributes, media and views."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from sqlalchemy import func, or_

from app.domain.entities import Listing, ListingAttribute, ListingMedia
from app.domain.entities.listing import LISTING_STATUS_AVAILABLE
from app.infrastructure.models import (
    ListingAttributeModel,
    ListingMediaModel,
    ListingModel,
    ListingViewModel,
)
from app.utils import ensure_app_naive_datetime, ensure_app_timezone

from .base import SessionRepository, to_float

ORDER_RECENT = "recent"
ORDER_POPULARITY = "popularite"
ORDER_PRICE_ASC = "prix_croissant"
ORDER_PRICE_DESC = "prix_decroissant"
LISTING_ORDERS = (ORDER_RECENT, ORDER_POPULARITY, ORDER_PRICE_ASC, ORDER_PRICE_DESC)


def _clean_terms(values: Iterable[str] | None, *, max_items: int = 50) -> list[str]:
    """Lower-case, de-duplicate and bound a list of filter values."""

    cleaned: list[str] = []
    for value in values or ():
        term = str(value).strip().lower()
        if term and term not in cleaned:
            cleaned.append(term)
        if len(cleaned) >= max_items:
            break
    return cleaned


class ListingRepository(SessionRepository):
    """Provide CRUD and query operations for :class:`Listing` objects."""

    def get(self, listing_id: int) -> Listing | None:
        model = self.session.get(ListingModel, listing_id)
        return self._to_entity(model) if model else None

    def get_by_slug(self, slug: str) -> Listing | None:
        model = self.session.query(ListingModel).filter(ListingModel.slug == slug).first()
        return self._to_entity(model) if model else None

    def slug_exists(self, slug: str) -> bool:
        return (
            self.session.query(ListingModel.id).filter(ListingModel.slug == slug).first()
            is not None
        )

    def create(self, listing: Listing) -> Listing:
        model = ListingModel()
        self._apply_entity_to_model(model, listing)
        model.view_count = listing.view_count or 0
        if listing.created_at is not None:
            model.created_at = ensure_app_naive_datetime(listing.created_at)
            model.updated_at = model.created_at
        model.attributes = [
            ListingAttributeModel(name=attribute.name, value=str(attribute.value))
            for attribute in listing.attributes
        ]
        model.media = [self._media_to_model(media) for media in listing.media]
        self._save(model)
        return self._to_entity(model)

    def update(self, listing: Listing) -> Listing:
        model = self._require_model(listing.id)
        self._apply_entity_to_model(model, listing)
        model.attributes = [
            ListingAttributeModel(name=attribute.name, value=str(attribute.value))
            for attribute in listing.attributes
        ]
        self._save(model)
        return self._to_entity(model)

    def update_status(self, listing_id: int, status: str) -> Listing:
        model = self._require_model(listing_id)
        model.status = status
        self._save(model)
        return self._to_entity(model)

    def delete(self, listing_id: int) -> None:
        model = self._require_model(listing_id)
        self.session.delete(model)
        self._finish()

    def add_media(self, listing_id: int, media: ListingMedia) -> ListingMedia:
        self._require_model(listing_id)
        if media.is_main:
            self.session.query(ListingMediaModel).filter(
                ListingMediaModel.listing_id == listing_id
            ).update({ListingMediaModel.is_main: False}, synchronize_session=False)
        model = self._media_to_model(media)
        model.listing_id = listing_id
        self._save(model)
        return self._media_to_entity(model)

    def list_by_owner(self, owner_id: int) -> Sequence[Listing]:
        query = (
            self.session.query(ListingModel)
            .filter(ListingModel.owner_id == owner_id)
            .order_by(ListingModel.created_at.desc(), ListingModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def search(
        self,
        *,
        transaction_type: str | None = None,
        property_type: str | None = None,
        city: str | None = None,
        district: str | None = None,
        price_min: float | None = None,
        price_max: float | None = None,
        statuses: Sequence[str] = (LISTING_STATUS_AVAILABLE,),
        order: str = ORDER_RECENT,
        limit: int = 20,
        offset: int = 0,
    ) -> Sequence[Listing]:
        """Return listings matching the filters; every value is a bound parameter."""

        query = self.session.query(ListingModel)
        if statuses:
            query = query.filter(ListingModel.status.in_(list(statuses)))
        if transaction_type:
            query = query.filter(ListingModel.transaction_type == transaction_type)
        if property_type:
            query = query.filter(ListingModel.property_type == property_type)
        if city:
            query = query.filter(
                func.lower(ListingModel.city).contains(city.strip().lower(), autoescape=True)
            )
        if district:
            query = query.filter(
                func.lower(ListingModel.district).contains(
                    district.strip().lower(), autoescape=True
                )
            )
        if price_min is not None:
            query = query.filter(ListingModel.price >= price_min)
        if price_max is not None:
            query = query.filter(ListingModel.price <= price_max)
        query = query.order_by(*self._ordering(order)).offset(offset).limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_popular(self, *, limit: int) -> Sequence[Listing]:
        return self.search(order=ORDER_POPULARITY, limit=limit)

    def list_recent(self, *, limit: int) -> Sequence[Listing]:
        return self.search(statuses=(), order=ORDER_RECENT, limit=limit)

    def list_recommended(
        self,
        *,
        cities: Iterable[str] | None,
        property_types: Iterable[str] | None,
        transaction_type: str | None,
        limit: int,
    ) -> Sequence[Listing]:
        """Available listings located in a preferred city or of a preferred type."""

        city_terms = _clean_terms(cities)
        type_terms = _clean_terms(property_types)
        clauses = []
        if city_terms:
            clauses.append(func.lower(ListingModel.city).in_(city_terms))
        if type_terms:
            clauses.append(func.lower(ListingModel.property_type).in_(type_terms))
        if not clauses:
            return []
        query = (
            self.session.query(ListingModel)
            .filter(ListingModel.status == LISTING_STATUS_AVAILABLE)
            .filter(or_(*clauses))
        )
        if transaction_type:
            query = query.filter(ListingModel.transaction_type == transaction_type)
        query = query.order_by(*self._ordering(ORDER_POPULARITY)).limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_created_after(
        self,
        created_after: datetime,
        *,
        status: str = LISTING_STATUS_AVAILABLE,
    ) -> Sequence[Listing]:
        query = (
            self.session.query(ListingModel)
            .filter(ListingModel.status == status)
            .filter(ListingModel.created_at > ensure_app_naive_datetime(created_after))
            .order_by(ListingModel.created_at.desc(), ListingModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def has_recent_view(
        self,
        listing_id: int,
        *,
        since: datetime,
        user_id: int | None = None,
        ip_address: str | None = None,
    ) -> bool:
        query = self.session.query(ListingViewModel.id).filter(
            ListingViewModel.listing_id == listing_id,
            ListingViewModel.viewed_at > ensure_app_naive_datetime(since),
        )
        if user_id is not None:
            query = query.filter(ListingViewModel.user_id == user_id)
        elif ip_address:
            query = query.filter(
                ListingViewModel.user_id.is_(None),
                ListingViewModel.ip_address == ip_address,
            )
        else:
            return False
        return query.first() is not None

    def record_view(
        self,
        listing_id: int,
        *,
        viewed_at: datetime,
        user_id: int | None = None,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> int:
        """Store a view, bump the counter and return the new view count."""

        model = self._require_model(listing_id)
        self.session.add(
            ListingViewModel(
                listing_id=listing_id,
                user_id=user_id,
                ip_address=ip_address,
                user_agent=user_agent,
                viewed_at=ensure_app_naive_datetime(viewed_at),
            )
        )
        self.session.query(ListingModel).filter(ListingModel.id == listing_id).update(
            {ListingModel.view_count: ListingModel.view_count + 1},
            synchronize_session=False,
        )
        self._finish()
        self.session.refresh(model)
        return model.view_count

    def _require_model(self, listing_id: int | None) -> ListingModel:
        model = self.session.get(ListingModel, listing_id) if listing_id else None
        if model is None:
            msg = f"Listing with id {listing_id} not found"
            raise ValueError(msg)
        return model

    @staticmethod
    def _ordering(order: str) -> tuple:
        if order == ORDER_POPULARITY:
            return (
                ListingModel.view_count.desc(),
                ListingModel.created_at.desc(),
                ListingModel.id.desc(),
            )
        if order == ORDER_PRICE_ASC:
            return (ListingModel.price.asc(), ListingModel.id.asc())
        if order == ORDER_PRICE_DESC:
            return (ListingModel.price.desc(), ListingModel.id.desc())
        return (ListingModel.created_at.desc(), ListingModel.id.desc())

    @staticmethod
    def _apply_entity_to_model(model: ListingModel, listing: Listing) -> None:
        model.owner_id = listing.owner_id
        model.title = listing.title
        model.slug = listing.slug
        model.description = listing.description
        model.property_type = listing.property_type
        model.transaction_type = listing.transaction_type
        model.price = listing.price
        model.billing_period = listing.billing_period
        model.deposit = listing.deposit
        model.charges_included = listing.charges_included
        model.min_stay = listing.min_stay
        model.district = listing.district
        model.city = listing.city
        model.country = listing.country
        model.longitude = listing.longitude
        model.latitude = listing.latitude
        model.status = listing.status
        model.visit_fee = listing.visit_fee

    @staticmethod
    def _media_to_model(media: ListingMedia) -> ListingMediaModel:
        return ListingMediaModel(
            url=media.url,
            media_type=media.media_type,
            is_main=media.is_main,
            display_order=media.display_order,
        )

    @staticmethod
    def _media_to_entity(model: ListingMediaModel) -> ListingMedia:
        return ListingMedia(
            id=model.id,
            listing_id=model.listing_id,
            url=model.url,
            media_type=model.media_type,
            is_main=model.is_main,
            display_order=model.display_order,
        )

    @classmethod
    def _to_entity(cls, model: ListingModel) -> Listing:
        return Listing(
            id=model.id,
            owner_id=model.owner_id,
            title=model.title,
            slug=model.slug,
            description=model.description,
            property_type=model.property_type,
            transaction_type=model.transaction_type,
            price=to_float(model.price) or 0.0,
            billing_period=model.billing_period,
            deposit=to_float(model.deposit) or 0.0,
            charges_included=model.charges_included,
            min_stay=model.min_stay,
            district=model.district,
            city=model.city,
            country=model.country,
            longitude=model.longitude,
            latitude=model.latitude,
            status=model.status,
            view_count=model.view_count or 0,
            visit_fee=to_float(model.visit_fee) or 0.0,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            attributes=[
                ListingAttribute(name=attribute.name, value=attribute.value)
                for attribute in model.attributes
            ],
            media=[cls._media_to_entity(media) for media in model.media],
        )


__all__ = [
    "ListingRepository",
    "LISTING_ORDERS",
    "ORDER_RECENT",
    "ORDER_POPULARITY",
    "ORDER_PRICE_ASC",
    "ORDER_PRICE_DESC",
]

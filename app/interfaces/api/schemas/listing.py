"""Listing schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ListingAttributeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    value: str


class ListingMediaBase(BaseModel):
    url: str = Field(..., min_length=1, max_length=500)
    media_type: str = "image"
    is_main: bool = False


class ListingMediaCreate(ListingMediaBase):
    pass


class ListingMediaRead(ListingMediaBase):
    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    display_order: int = 0


class ListingCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    property_type: str
    transaction_type: str
    price: float = Field(..., ge=0)
    city: str = Field(..., min_length=1, max_length=100)
    district: str = Field(..., min_length=1, max_length=100)
    description: str | None = None
    billing_period: str | None = None
    charges_included: bool = False
    min_stay: int = Field(default=1, ge=1)
    country: str = "CI"
    longitude: float | None = None
    latitude: float | None = None
    visit_fee: float = Field(default=0, ge=0)
    attributes: dict[str, str | int | float] = Field(
        default_factory=dict,
        description="Characteristics such as superficie, chambres or salles_bain",
    )
    media: list[ListingMediaCreate] = Field(default_factory=list)


class ListingUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, max_length=100)
    property_type: str | None = None
    transaction_type: str | None = None
    price: float | None = Field(default=None, ge=0)
    city: str | None = None
    district: str | None = None
    description: str | None = None
    billing_period: str | None = None
    charges_included: bool | None = None
    min_stay: int | None = Field(default=None, ge=1)
    country: str | None = None
    longitude: float | None = None
    latitude: float | None = None
    visit_fee: float | None = Field(default=None, ge=0)
    attributes: dict[str, str | int | float] | None = None


class ListingStatusUpdate(BaseModel):
    status: str


class ListingRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    title: str
    slug: str | None
    description: str | None
    property_type: str
    transaction_type: str
    price: float
    billing_period: str | None
    deposit: float
    charges_included: bool
    min_stay: int
    district: str
    city: str
    country: str
    longitude: float | None
    latitude: float | None
    status: str
    view_count: int
    visit_fee: float
    created_at: datetime | None
    updated_at: datetime | None
    attributes: list[ListingAttributeRead] = Field(default_factory=list)
    media: list[ListingMediaRead] = Field(default_factory=list)


class RankedListingRead(ListingRead):
    score: int = 0
    relevance: str = "standard"


class SearchResultRead(BaseModel):
    items: list[RankedListingRead]
    count: int
    personalized: bool
    relevance: dict[str, int]
    criteria_used: list[str]
    limit: int
    offset: int


class HomeFeedRead(BaseModel):
    items: list[RankedListingRead]
    count: int
    content_type: str
    fallback_used: bool
    fallback_reason: str | None


class ViewRecorded(BaseModel):
    counted: bool
    view_count: int


class VocabularyRead(BaseModel):
    property_types: list[str]
    transaction_types: list[str]
    billing_periods: list[str]
    statuses: list[str]


__all__ = [
    "HomeFeedRead",
    "ListingAttributeRead",
    "ListingCreate",
    "ListingMediaCreate",
    "ListingMediaRead",
    "ListingRead",
    "ListingStatusUpdate",
    "ListingUpdate",
    "RankedListingRead",
    "SearchResultRead",
    "ViewRecorded",
    "VocabularyRead",
]

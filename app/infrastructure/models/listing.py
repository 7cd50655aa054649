"""SQLAlchemy models for listings and their attributes, media and views."""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class ListingModel(Base):
    """Database representation of a property listing."""

    __tablename__ = "listing"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_listing_price_positive"),
        CheckConstraint("deposit >= 0", name="ck_listing_deposit_positive"),
        CheckConstraint(
            "transaction_type = 'location' OR billing_period IS NULL",
            name="ck_listing_billing_period_rental_only",
        ),
        CheckConstraint(
            "transaction_type IN ('location', 'vente')",
            name="ck_listing_transaction_type",
        ),
        CheckConstraint(
            "status IN ('disponible', 'vendu', 'loue', 'en_negociation', 'reserve')",
            name="ck_listing_status",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(100), nullable=False)
    slug = Column(String(120), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    property_type = Column(String(30), nullable=False, index=True)
    transaction_type = Column(String(20), nullable=False, index=True)
    price = Column(Numeric(15, 2), nullable=False)
    billing_period = Column(String(20), nullable=True)
    deposit = Column(Numeric(15, 2), nullable=False, default=0)
    charges_included = Column(Boolean, nullable=False, default=False)
    min_stay = Column(Integer, nullable=False, default=1)
    district = Column(String(100), nullable=False)
    city = Column(String(100), nullable=False, index=True)
    country = Column(String(50), nullable=False, default="CI")
    longitude = Column(Float, nullable=True)
    latitude = Column(Float, nullable=True)
    status = Column(String(20), nullable=False, default="disponible", index=True)
    view_count = Column(Integer, nullable=False, default=0)
    visit_fee = Column(Numeric(15, 2), nullable=False, default=0)
    created_at = Column(
        DateTime(), nullable=False, default=now_in_app_naive_datetime, index=True
    )
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )

    attributes = relationship(
        "ListingAttributeModel",
        back_populates="listing",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )
    media = relationship(
        "ListingMediaModel",
        back_populates="listing",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
        order_by="ListingMediaModel.display_order",
    )


class ListingAttributeModel(Base):
    """Named characteristic (surface, bedrooms...) stored as text."""

    __tablename__ = "listing_attribute"

    id = Column(Integer, primary_key=True, index=True)
    listing_id = Column(
        Integer,
        ForeignKey("listing.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(100), nullable=False)
    value = Column(String(255), nullable=False)

    listing = relationship("ListingModel", back_populates="attributes")


class ListingMediaModel(Base):
    """Picture, video, plan or document referenced by URL."""

    __tablename__ = "listing_media"

    id = Column(Integer, primary_key=True, index=True)
    listing_id = Column(
        Integer,
        ForeignKey("listing.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    url = Column(String(500), nullable=False)
    media_type = Column(String(20), nullable=False, default="image")
    is_main = Column(Boolean, nullable=False, default=False)
    display_order = Column(Integer, nullable=False, default=0)

    listing = relationship("ListingModel", back_populates="media")


class ListingViewModel(Base):
    """A single recorded consultation of a listing."""

    __tablename__ = "listing_view"

    id = Column(Integer, primary_key=True, index=True)
    listing_id = Column(
        Integer,
        ForeignKey("listing.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="SET NULL"), nullable=True, index=True
    )
    ip_address = Column(String(45), nullable=True)
    user_agent = Column(Text, nullable=True)
    viewed_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = [
    "ListingModel",
    "ListingAttributeModel",
    "ListingMediaModel",
    "ListingViewModel",
]

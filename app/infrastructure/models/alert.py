"""SQLAlchemy models for search alerts and their notification history."""

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class AlertModel(Base):
    """Database representation of a saved-search alert."""

    __tablename__ = "alert"
    __table_args__ = (
        CheckConstraint(
            "price_min IS NULL OR price_max IS NULL OR price_min <= price_max",
            name="ck_alert_price_range",
        ),
        CheckConstraint(
            "surface_min IS NULL OR surface_max IS NULL OR surface_min <= surface_max",
            name="ck_alert_surface_range",
        ),
        CheckConstraint(
            "property_type IS NOT NULL OR city IS NOT NULL OR district IS NOT NULL "
            "OR price_min IS NOT NULL OR surface_min IS NOT NULL",
            name="ck_alert_has_criterion",
        ),
        CheckConstraint(
            "frequency IN ('quotidien', 'hebdomadaire', 'mensuel')",
            name="ck_alert_frequency",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(100), nullable=False)
    property_type = Column(String(30), nullable=True)
    transaction_type = Column(String(20), nullable=True, default="location")
    city = Column(String(100), nullable=True)
    district = Column(String(100), nullable=True)
    price_min = Column(Numeric(15, 2), nullable=True)
    price_max = Column(Numeric(15, 2), nullable=True)
    surface_min = Column(Numeric(10, 2), nullable=True)
    surface_max = Column(Numeric(10, 2), nullable=True)
    min_bedrooms = Column(Integer, nullable=True)
    min_bathrooms = Column(Integer, nullable=True)
    amenities = Column(JSON, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    frequency = Column(String(20), nullable=False, default="quotidien")
    notifications_enabled = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )
    last_notified_at = Column(DateTime(), nullable=True)
    notification_count = Column(Integer, nullable=False, default=0)
    last_match_count = Column(Integer, nullable=False, default=0)

    history = relationship(
        "AlertHistoryModel",
        back_populates="alert",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class AlertHistoryModel(Base):
    """One notification produced by an alert."""

    __tablename__ = "alert_history"

    id = Column(Integer, primary_key=True, index=True)
    alert_id = Column(
        Integer, ForeignKey("alert.id", ondelete="CASCADE"), nullable=False, index=True
    )
    match_count = Column(Integer, nullable=False, default=0)
    listing_ids = Column(JSON, nullable=False, default=list)
    notified_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    status = Column(String(20), nullable=False, default="envoyee")

    alert = relationship("AlertModel", back_populates="history")


__all__ = ["AlertModel", "AlertHistoryModel"]

"""SQLAlchemy model for visit reservations."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    Time,
)
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class ReservationModel(Base):
    """A requested visit of a listing at a given date and time."""

    __tablename__ = "reservation"
    __table_args__ = (
        CheckConstraint("party_size >= 1", name="ck_reservation_party_size"),
        CheckConstraint(
            "status IN ('attente', 'confirme', 'annule', 'termine', 'refuse')",
            name="ck_reservation_status",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    listing_id = Column(
        Integer,
        ForeignKey("listing.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    visit_date = Column(Date, nullable=False)
    visit_time = Column(Time, nullable=False)
    party_size = Column(Integer, nullable=False, default=1)
    notes = Column(Text, nullable=True)
    visitor_phone = Column(String(30), nullable=True)
    agent_message = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="attente", index=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )

    listing = relationship("ListingModel", lazy="joined")


__all__ = ["ReservationModel"]

"""SQLAlchemy model for favorite listings."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class FavoriteModel(Base):
    """A listing bookmarked by a user."""

    __tablename__ = "favorite"
    __table_args__ = (
        UniqueConstraint("user_id", "listing_id", name="uq_favorite_user_listing"),
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
    added_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    listing = relationship("ListingModel", lazy="joined")


__all__ = ["FavoriteModel"]

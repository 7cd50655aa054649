"""SQLAlchemy model for user ranking preferences."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, Numeric, String

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class UserPreferenceModel(Base):
    """Onboarding answers used to personalize listing order."""

    __tablename__ = "user_preference"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    project = Column(String(20), nullable=True)
    budget_max = Column(Numeric(15, 2), nullable=True)
    cities = Column(JSON, nullable=False, default=list)
    property_types = Column(JSON, nullable=False, default=list)
    districts = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["UserPreferenceModel"]

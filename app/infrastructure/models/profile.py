"""SQLAlchemy model for user profiles."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class ProfileModel(Base):
    """Contact details attached to a user."""

    __tablename__ = "profile"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    email = Column(String(120), nullable=True, unique=True)
    address = Column(Text, nullable=True)
    city = Column(String(100), nullable=True)
    country = Column(String(50), nullable=False, default="CI")
    bio = Column(Text, nullable=True)
    avatar = Column(String(255), nullable=True)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )

    user = relationship("UserModel", back_populates="profile")


__all__ = ["ProfileModel"]

"""ORM models used by the application infrastructure."""

from .alert import AlertHistoryModel, AlertModel
from .favorite import FavoriteModel
from .listing import (
    ListingAttributeModel,
    ListingMediaModel,
    ListingModel,
    ListingViewModel,
)
from .message import MessageModel
from .notification import NotificationModel
from .payment import PaymentModel
from .preference import UserPreferenceModel
from .profile import ProfileModel
from .reservation import ReservationModel
from .user import UserModel

__all__ = [
    "AlertHistoryModel",
    "AlertModel",
    "FavoriteModel",
    "ListingAttributeModel",
    "ListingMediaModel",
    "ListingModel",
    "ListingViewModel",
    "MessageModel",
    "NotificationModel",
    "PaymentModel",
    "UserPreferenceModel",
    "ProfileModel",
    "ReservationModel",
    "UserModel",
]

"""Domain entities package."""

from .alert import (
    ALERT_FREQUENCIES,
    DEFAULT_FREQUENCY_MIN_HOURS,
    FREQUENCY_DAILY,
    FREQUENCY_MIN_HOURS,
    FREQUENCY_MONTHLY,
    FREQUENCY_WEEKLY,
    Alert,
    AlertCriteria,
    AlertHistoryEntry,
    AlertStatistics,
)
from .favorite import Favorite
from .listing import (
    LISTING_STATUS_AVAILABLE,
    LISTING_STATUS_RESERVED,
    LISTING_STATUSES,
    PROPERTY_TYPES,
    TRANSACTION_RENT,
    TRANSACTION_SALE,
    TRANSACTION_TYPES,
    Listing,
    ListingAttribute,
    ListingMedia,
)
from .message import Message
from .notification import Notification
from .payment import Payment
from .preference import PROJECTS, UserPreferences
from .profile import Profile
from .push import DispatchResult, PushMessage
from .reservation import RESERVATION_STATUSES, Reservation
from .user import USER_ROLES, User

__all__ = [
    "ALERT_FREQUENCIES",
    "DEFAULT_FREQUENCY_MIN_HOURS",
    "FREQUENCY_DAILY",
    "FREQUENCY_MIN_HOURS",
    "FREQUENCY_MONTHLY",
    "FREQUENCY_WEEKLY",
    "Alert",
    "AlertCriteria",
    "AlertHistoryEntry",
    "AlertStatistics",
    "DispatchResult",
    "Favorite",
    "LISTING_STATUS_AVAILABLE",
    "LISTING_STATUS_RESERVED",
    "LISTING_STATUSES",
    "Listing",
    "ListingAttribute",
    "ListingMedia",
    "Message",
    "Notification",
    "PROJECTS",
    "PROPERTY_TYPES",
    "Payment",
    "Profile",
    "PushMessage",
    "RESERVATION_STATUSES",
    "Reservation",
    "TRANSACTION_RENT",
    "TRANSACTION_SALE",
    "TRANSACTION_TYPES",
    "USER_ROLES",
    "User",
    "UserPreferences",
]

"""Use cases for listings, ranking and the home feed."""

from .create_listing import create_listing
from .get_listing import get_listing, get_listing_by_slug, list_owner_listings
from .ranking import (
    RankedListing,
    has_usable_preferences,
    rank_listings,
    relevance_label,
    score_listing,
)
from .record_view import ViewOutcome, record_view
from .search import (
    HomeFeed,
    ListingSearchCriteria,
    SearchResult,
    get_home_feed,
    search_listings,
)
from .update_listing import (
    add_listing_media,
    delete_listing,
    update_listing,
    update_listing_status,
)

__all__ = [
    "HomeFeed",
    "ListingSearchCriteria",
    "RankedListing",
    "SearchResult",
    "ViewOutcome",
    "add_listing_media",
    "create_listing",
    "delete_listing",
    "get_home_feed",
    "get_listing",
    "get_listing_by_slug",
    "has_usable_preferences",
    "list_owner_listings",
    "rank_listings",
    "record_view",
    "relevance_label",
    "score_listing",
    "search_listings",
    "update_listing",
    "update_listing_status",
]

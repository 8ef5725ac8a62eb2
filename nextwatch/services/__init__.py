from nextwatch.services.catalog import CatalogService
from nextwatch.services.interactions import InteractionService
from nextwatch.services.profiles import ProfileService
from nextwatch.services.recommendations import RecommendationService
from nextwatch.services.watchlist import WatchlistService

__all__ = [
    "CatalogService",
    "InteractionService",
    "ProfileService",
    "RecommendationService",
    "WatchlistService",
]

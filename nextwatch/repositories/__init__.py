"""SQLAlchemy-backed stores. Each repository wraps one request-scoped session."""

from nextwatch.repositories.interactions import InteractionRepository
from nextwatch.repositories.media import MediaRepository
from nextwatch.repositories.profiles import ProfileRepository
from nextwatch.repositories.recommendations import RecommendationRepository
from nextwatch.repositories.watchlist import WatchlistRepository

__all__ = [
    "InteractionRepository",
    "MediaRepository",
    "ProfileRepository",
    "RecommendationRepository",
    "WatchlistRepository",
]

"""ORM row -> record conversion. The decode half of the numeric boundary."""

from nextwatch.domain import numeric
from nextwatch.domain.models import (
    MediaItem,
    Recommendation,
    UserInteraction,
    UserProfile,
    WatchlistEntry,
)
from nextwatch.domain.records import (
    InteractionRecord,
    MediaItemRecord,
    RecommendationRecord,
    UserProfileRecord,
    WatchlistRecord,
)


def media_record(row: MediaItem) -> MediaItemRecord:
    return MediaItemRecord(
        id=row.id,
        tmdb_id=row.tmdb_id,
        title=row.title,
        media_type=row.media_type,
        poster_path=row.poster_path,
        backdrop_path=row.backdrop_path,
        overview=row.overview,
        release_date=row.release_date,
        genres=list(row.genres or []),
        vote_average=numeric.decode(row.vote_average),
        vote_count=row.vote_count,
        popularity=numeric.decode(row.popularity),
        adult=row.adult,
        original_language=row.original_language,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def profile_record(row: UserProfile) -> UserProfileRecord:
    return UserProfileRecord(
        id=row.id,
        username=row.username,
        email=row.email,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def interaction_record(row: UserInteraction) -> InteractionRecord:
    return InteractionRecord(
        id=row.id,
        user_id=row.user_id,
        session_id=row.session_id,
        media_item_id=row.media_item_id,
        interaction_type=row.interaction_type,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def recommendation_record(row: Recommendation) -> RecommendationRecord:
    return RecommendationRecord(
        id=row.id,
        user_id=row.user_id,
        session_id=row.session_id,
        media_item_id=row.media_item_id,
        reason=row.reason,
        score=numeric.decode(row.score),
        shown=row.shown,
        created_at=row.created_at,
    )


def watchlist_record(row: WatchlistEntry, media: MediaItem | None = None) -> WatchlistRecord:
    return WatchlistRecord(
        id=row.id,
        user_id=row.user_id,
        session_id=row.session_id,
        media_item_id=row.media_item_id,
        created_at=row.created_at,
        media_item=media_record(media) if media is not None else None,
    )

"""Plain records handed out by the repositories.

Numeric columns are already decoded to floats here; ORM rows never leave the
repository layer.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

MediaType = Literal["movie", "tv"]
InteractionType = Literal[
    "like",
    "dislike",
    "watched_liked",
    "watched_disliked",
    "add_to_watchlist",
    "remove_from_watchlist",
]


class MediaItemFields(BaseModel):
    """Descriptive fields of a catalog entry, as ingested from TMDB."""

    tmdb_id: int
    title: str
    media_type: MediaType
    poster_path: str | None = None
    backdrop_path: str | None = None
    overview: str = ""
    release_date: str | None = None
    genres: list[str] = Field(default_factory=list)
    vote_average: float = Field(default=0.0, ge=0, le=10)
    vote_count: int = Field(default=0, ge=0)
    popularity: float = Field(default=0.0, ge=0)
    adult: bool = False
    original_language: str = "en"


class MediaItemRecord(MediaItemFields):
    id: int
    created_at: datetime
    updated_at: datetime


class UserProfileRecord(BaseModel):
    id: int
    username: str
    email: str
    created_at: datetime
    updated_at: datetime


class InteractionRecord(BaseModel):
    id: int
    user_id: int | None
    session_id: str | None
    media_item_id: int
    interaction_type: InteractionType
    created_at: datetime
    updated_at: datetime


class RecommendationRecord(BaseModel):
    id: int
    user_id: int | None
    session_id: str | None
    media_item_id: int
    reason: str
    score: float
    shown: bool
    created_at: datetime
    media_item: MediaItemRecord | None = None


class WatchlistRecord(BaseModel):
    id: int
    user_id: int | None
    session_id: str | None
    media_item_id: int
    created_at: datetime
    media_item: MediaItemRecord | None = None

"""SQLAlchemy ORM models."""

from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import DeclarativeBase, relationship

MEDIA_TYPES = ("movie", "tv")
INTERACTION_TYPES = (
    "like",
    "dislike",
    "watched_liked",
    "watched_disliked",
    "add_to_watchlist",
    "remove_from_watchlist",
)
POSITIVE_INTERACTIONS = frozenset({"like", "watched_liked"})

# Exactly one of user_id / session_id identifies the owner of a row.
ONE_ACTOR = "(user_id IS NULL) <> (session_id IS NULL)"

GenreList = JSON().with_variant(ARRAY(String), "postgresql")


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Base(DeclarativeBase):
    pass


class UserProfile(Base):
    __tablename__ = "user_profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class MediaItem(Base):
    __tablename__ = "media_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    tmdb_id = Column(Integer, nullable=False, index=True)
    title = Column(String(500), nullable=False, index=True)
    media_type = Column(Enum(*MEDIA_TYPES, name="media_type"), nullable=False)
    poster_path = Column(String(500), nullable=True)
    backdrop_path = Column(String(500), nullable=True)
    overview = Column(Text, nullable=False, default="")
    release_date = Column(String(20), nullable=True)
    genres = Column(GenreList, nullable=False, default=list)
    vote_average = Column(Numeric(3, 1), nullable=False)
    vote_count = Column(Integer, nullable=False, default=0)
    popularity = Column(Numeric(10, 3), nullable=False)
    adult = Column(Boolean, nullable=False, default=False)
    original_language = Column(String(10), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    # TMDB numbers movies and TV shows independently.
    __table_args__ = (
        UniqueConstraint("tmdb_id", "media_type", name="uq_media_items_tmdb_kind"),
        Index("ix_media_items_rating_popularity", "vote_average", "popularity"),
        Index("ix_media_items_popularity", "popularity"),
    )


# Related media items are only loaded through explicit joins.


class UserInteraction(Base):
    __tablename__ = "user_interactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("user_profiles.id", ondelete="CASCADE"), nullable=True)
    session_id = Column(String(100), nullable=True)
    media_item_id = Column(Integer, ForeignKey("media_items.id", ondelete="CASCADE"), nullable=False)
    interaction_type = Column(
        Enum(*INTERACTION_TYPES, name="interaction_type"),
        nullable=False,
    )
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    media_item = relationship("MediaItem", lazy="raise")

    __table_args__ = (
        UniqueConstraint("user_id", "media_item_id", name="uq_interactions_user_media"),
        UniqueConstraint("session_id", "media_item_id", name="uq_interactions_session_media"),
        CheckConstraint(ONE_ACTOR, name="ck_interactions_one_actor"),
    )


class Recommendation(Base):
    __tablename__ = "recommendations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("user_profiles.id", ondelete="CASCADE"), nullable=True)
    session_id = Column(String(100), nullable=True)
    media_item_id = Column(Integer, ForeignKey("media_items.id", ondelete="CASCADE"), nullable=False)
    reason = Column(Text, nullable=False)
    score = Column(Numeric(5, 4), nullable=False)
    shown = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    media_item = relationship("MediaItem", lazy="raise")

    __table_args__ = (
        Index("ix_recommendations_user_queue", "user_id", "shown", "score"),
        Index("ix_recommendations_session_queue", "session_id", "shown", "score"),
        CheckConstraint(ONE_ACTOR, name="ck_recommendations_one_actor"),
    )


class WatchlistEntry(Base):
    __tablename__ = "watchlist"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("user_profiles.id", ondelete="CASCADE"), nullable=True)
    session_id = Column(String(100), nullable=True)
    media_item_id = Column(Integer, ForeignKey("media_items.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    media_item = relationship("MediaItem", lazy="raise")

    __table_args__ = (
        UniqueConstraint("user_id", "media_item_id", name="uq_watchlist_user_media"),
        UniqueConstraint("session_id", "media_item_id", name="uq_watchlist_session_media"),
        CheckConstraint(ONE_ACTOR, name="ck_watchlist_one_actor"),
    )
